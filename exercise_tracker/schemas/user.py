"""User Schemas — username validation and the public user shape."""

from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from exercise_tracker.core.domain_types import USERNAME_MAX_LENGTH


class UserCreate(BaseModel):
    """User creation — username is required and stripped."""
    username: str = Field(min_length=1, max_length=USERNAME_MAX_LENGTH)

    @field_validator("username")
    @classmethod
    def strip_username(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("username cannot be empty or whitespace")
        return v


class UserResponse(BaseModel):
    username: str
    id: UUID
