"""Log Schemas — query filters and the log response shape."""

from datetime import date as Date
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from exercise_tracker.core.dates import parse_calendar_date


class LogQuery(BaseModel):
    """Log filters. from/to are inclusive; limit 0 means no cap."""
    model_config = ConfigDict(populate_by_name=True)

    from_date: Date | None = Field(None, alias="from")
    to_date: Date | None = Field(None, alias="to")
    limit: int | None = Field(None, ge=0)

    @field_validator("from_date", "to_date", mode="before")
    @classmethod
    def parse_bound(cls, v: object) -> Date | None:
        if v is None or isinstance(v, (str, Date)):
            return parse_calendar_date(v)
        raise ValueError("date bound must be a string")

    @field_validator("limit", mode="before")
    @classmethod
    def blank_limit(cls, v: object) -> object:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @model_validator(mode="after")
    def drop_zero_limit(self):
        if self.limit == 0:
            self.limit = None
        return self


class LogEntry(BaseModel):
    description: str
    duration: int | None
    date: str


class LogResponse(BaseModel):
    """A user's filtered log. count == len(log)."""
    username: str
    count: int
    id: UUID
    log: list[LogEntry]
