"""Tests for the error hierarchy — status codes and client-safe envelopes."""

from exercise_tracker.core.errors import (
    DatabaseError, ErrorCategory, ErrorSeverity, PersistenceError, UserNotFoundError,
)


def test_user_not_found_defaults_to_404():
    err = UserNotFoundError("abc")
    assert err.http_status == 404
    assert err.category == ErrorCategory.RESOURCE_NOT_FOUND
    assert err.to_response() == {"error": "User not found"}


def test_user_not_found_status_is_configurable():
    err = UserNotFoundError("abc", http_status=400)
    assert err.http_status == 400
    assert err.context.user_id == "abc"


def test_persistence_error_is_generic_500():
    err = PersistenceError("Failed to fetch logs")
    assert err.http_status == 500
    assert err.severity == ErrorSeverity.CRITICAL
    assert err.to_response() == {"error": "Failed to fetch logs"}


def test_database_error_records_operation():
    err = DatabaseError("Integrity constraint violated", "commit")
    assert err.operation == "commit"
    assert err.http_status == 500
    assert "commit" in err.message
