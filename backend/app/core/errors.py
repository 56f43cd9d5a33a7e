"""Error Hierarchy — typed, categorized exceptions for user-directory failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - StoreError always carries the underlying exception as `cause`
    - to_response() produces the public REST envelope: {"message": str}
    - The public message is fixed; internal detail stays in `message` for logs only
"""

from enum import Enum

GENERIC_ERROR_MESSAGE = "An error occurred while processing your request."


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    DATABASE = "database"
    CONFLICT = "conflict"


class UserDirectoryError(Exception):
    """Base exception for all user-directory errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the public REST error body (no internal detail)."""
        return {"message": GENERIC_ERROR_MESSAGE}


class StoreError(UserDirectoryError):
    """Communicating with or querying the store failed."""
    def __init__(
        self,
        message: str,
        operation: str,
        cause: BaseException | None = None,
    ):
        super().__init__(
            f"Store {operation} failed: {message}",
            "STORE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, 500,
        )
        self.operation = operation
        self.cause = cause


class ConstraintViolationError(UserDirectoryError):
    """A write broke a schema invariant and was rolled back."""
    def __init__(
        self,
        message: str,
        cause: BaseException | None = None,
    ):
        super().__init__(
            f"Constraint violated: {message}",
            "CONSTRAINT_VIOLATION", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, 500,
        )
        self.cause = cause
