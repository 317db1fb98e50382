"""User ORM — an account identified by a unique username.

Invariants:
    - id is UUID primary key, generated client-side
    - username is unique and non-nullable
    - Users are never updated or deleted by the API

Design Decisions:
    - created_at exists only to give GET /api/users a stable order
    - No ORM relationship to exercises: routes query them by user_id
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, DateTime
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from exercise_tracker.core.domain_types import USERNAME_MAX_LENGTH
from exercise_tracker.db.base import Base


class User(Base):
    """User — owner of zero or more exercises."""
    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    username: Mapped[str] = mapped_column(
        String(USERNAME_MAX_LENGTH), nullable=False, unique=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

