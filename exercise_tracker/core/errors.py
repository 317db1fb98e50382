"""Error Hierarchy — typed, categorized exceptions for exercise tracker failures.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors (400/404) are recoverable; persistence errors (500) are critical
    - to_response() produces the flat {"error": message} REST envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with ExerciseTrackerError base: one global handler catches all
    - UserNotFoundError carries its status: exercise logging reports 400, log retrieval 404
    - ErrorContext as dataclass: observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logs only (never sent to clients)."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    user_id: str | None = None
    debug_info: dict[str, Any] | None = None


class ExerciseTrackerError(Exception):
    """Base exception for all exercise tracker errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the REST error envelope."""
        return {"error": self.message}


# ─── Client Errors (400-level) ──────────────────────────────────

class UserNotFoundError(ExerciseTrackerError):
    """Referenced user does not exist (or the id is malformed)."""
    def __init__(
        self, user_id: str, http_status: int = 404, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.user_id = user_id
        super().__init__(
            "User not found", "USER_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, ctx, http_status,
        )
        self.user_id = user_id


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(ExerciseTrackerError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation


class PersistenceError(ExerciseTrackerError):
    """An endpoint could not complete its read or write. Message is client-safe."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "PERSISTENCE_FAILED", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 500,
        )
