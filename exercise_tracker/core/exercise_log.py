"""Exercise Log — pure helpers for duration parsing and log assembly.

Invariants:
    - parse_duration never raises: missing, non-numeric or out-of-range input yields None
    - build_log_entries preserves input order
    - count in a log view always equals len(log)

Design Decisions:
    - Protocols over ORM imports: core never imports models/ (dependency arrows point inward)
    - Leading-integer parse ("45min" -> 45, "12.9" -> 12) matches what form clients send
"""

import re
from datetime import date
from typing import Protocol, Sequence

from exercise_tracker.core.dates import render_calendar_date

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")

# 32-bit INTEGER column range
DURATION_MIN = -(2**31)
DURATION_MAX = 2**31 - 1


class UserLike(Protocol):
    """Structural contract for a user record."""
    id: object
    username: str


class ExerciseLike(Protocol):
    """Structural contract for an exercise record."""
    description: str
    duration: int | None
    date: date


def parse_duration(raw: object) -> int | None:
    """Parse a duration in minutes from its leading integer, or None.

    Values outside the 32-bit INTEGER column range are treated as non-numeric.
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, float):
        raw = int(raw) if raw == raw and abs(raw) != float("inf") else None
    elif not isinstance(raw, int):
        match = _LEADING_INT.match(str(raw))
        raw = int(match.group(1)) if match else None
    if raw is None or not DURATION_MIN <= raw <= DURATION_MAX:
        return None
    return raw


def build_log_entries(exercises: Sequence[ExerciseLike]) -> list[dict]:
    """Render exercises as log entries, in the given order."""
    return [
        {
            "description": ex.description,
            "duration": ex.duration,
            "date": render_calendar_date(ex.date),
        }
        for ex in exercises
    ]


def build_log_view(user: UserLike, exercises: Sequence[ExerciseLike]) -> dict:
    """Assemble the log response body for a user."""
    log = build_log_entries(exercises)
    return {
        "username": user.username,
        "count": len(log),
        "id": user.id,
        "log": log,
    }


def build_exercise_view(user: UserLike, exercise: ExerciseLike) -> dict:
    """Merge a user and a freshly logged exercise into one response body."""
    return {
        "id": user.id,
        "username": user.username,
        "description": exercise.description,
        "duration": exercise.duration,
        "date": render_calendar_date(exercise.date),
    }
