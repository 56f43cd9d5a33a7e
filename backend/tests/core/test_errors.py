"""Error Hierarchy — codes, categories, causes, and the public response body.

Tests cover:
    - StoreError / ConstraintViolationError carry code, category, cause
    - to_response() never includes internal detail
"""

from app.core.errors import (
    GENERIC_ERROR_MESSAGE,
    ConstraintViolationError,
    ErrorCategory,
    ErrorSeverity,
    StoreError,
    UserDirectoryError,
)


def test_store_error_carries_cause_and_operation():
    cause = ConnectionRefusedError("db:5432 refused")
    err = StoreError("connection refused", "list_users", cause=cause)
    assert err.cause is cause
    assert err.operation == "list_users"
    assert err.code == "STORE_ERROR"
    assert err.category == ErrorCategory.DATABASE
    assert err.severity == ErrorSeverity.CRITICAL
    assert err.http_status == 500
    assert "list_users" in err.message


def test_constraint_violation_is_directory_error():
    err = ConstraintViolationError("UNIQUE constraint failed: users.email")
    assert isinstance(err, UserDirectoryError)
    assert err.code == "CONSTRAINT_VIOLATION"
    assert err.category == ErrorCategory.CONFLICT


def test_response_body_is_generic():
    err = StoreError(
        "could not connect to postgresql://users:secret@db:5432/users",
        "execute",
    )
    body = err.to_response()
    assert body == {"message": GENERIC_ERROR_MESSAGE}
    assert "secret" not in str(body)


def test_generic_message_text():
    assert GENERIC_ERROR_MESSAGE == (
        "An error occurred while processing your request."
    )
