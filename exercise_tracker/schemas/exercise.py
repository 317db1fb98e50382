"""Exercise Schemas — logging input and the merged user+exercise view.

Invariants:
    - description is required, stripped, non-empty
    - duration is parsed leniently: missing or non-numeric input becomes None, never an error
    - date is optional; blank means "today" (resolved by the route, not here)
    - Unparseable dates are validation errors (400)
"""

from datetime import date as Date
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from exercise_tracker.core.dates import parse_calendar_date
from exercise_tracker.core.domain_types import DESCRIPTION_MAX_LENGTH
from exercise_tracker.core.exercise_log import parse_duration


class ExerciseCreate(BaseModel):
    """Exercise logging request body (JSON or form-encoded)."""
    description: str = Field(min_length=1, max_length=DESCRIPTION_MAX_LENGTH)
    duration: int | None = None
    date: Date | None = None

    @field_validator("description")
    @classmethod
    def strip_description(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("description cannot be empty or whitespace")
        return v

    @field_validator("duration", mode="before")
    @classmethod
    def lenient_duration(cls, v: object) -> int | None:
        return parse_duration(v)

    @field_validator("date", mode="before")
    @classmethod
    def parse_date(cls, v: object) -> Date | None:
        if v is None or isinstance(v, (str, Date)):
            return parse_calendar_date(v)
        raise ValueError("date must be a string")


class ExerciseResponse(BaseModel):
    """User fields merged with the logged exercise; date is a calendar string."""
    id: UUID
    username: str
    description: str
    duration: int | None = None
    date: str
