"""Exercise ORM — a timed activity logged against a user.

Invariants:
    - user_id references users.id (existence also checked before insert)
    - duration is nullable: non-numeric input is stored as NULL
    - date is a calendar date (no time component)
    - Rows are immutable after insert

Design Decisions:
    - Integer autoincrement id: doubles as insertion order for log queries
    - Index on (user_id, date): every log query filters on both
"""

import uuid
import datetime

from sqlalchemy import Date, ForeignKey, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from exercise_tracker.core.domain_types import DESCRIPTION_MAX_LENGTH
from exercise_tracker.db.base import Base


class Exercise(Base):
    """Exercise log entry."""
    __tablename__ = "exercises"
    __table_args__ = (
        Index("ix_exercises_user_id_date", "user_id", "date"),
    )

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    user_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("users.id"), nullable=False,
    )
    description: Mapped[str] = mapped_column(
        String(DESCRIPTION_MAX_LENGTH), nullable=False,
    )
    duration: Mapped[int | None] = mapped_column(Integer, nullable=True)
    date: Mapped[datetime.date] = mapped_column(Date, nullable=False)

