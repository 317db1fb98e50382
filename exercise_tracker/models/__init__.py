"""ORM Models — SQLAlchemy declarative models for users and exercises.

Design Decisions:
    - One file per entity
    - All models imported here so Base.metadata holds every table and the
      exercises.user_id foreign key resolves before create_all or any query
"""

from exercise_tracker.models.user import User  # noqa: F401
from exercise_tracker.models.exercise import Exercise  # noqa: F401
