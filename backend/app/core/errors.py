"""Error Hierarchy — typed, categorized exceptions for every registration failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - to_response() produces the flat {"error": message} envelope the form expects
    - StorageError never carries driver details in its message (cause is chained instead)

Design Decisions:
    - Single hierarchy with DonorRegistryError base: FastAPI global handler catches all (ADR: uniform error shape)
    - Severity drives log level in the handler: validation is the caller's problem,
      storage failures are the operator's
"""

from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    CONFLICT = "conflict"
    DATABASE = "database"
    INTERNAL = "internal"


MISSING_FIELDS_MESSAGE = "Please fill out all required fields."
MISSING_BLOOD_GROUP_MESSAGE = "Blood group is required for blood donors."
EMAIL_TAKEN_MESSAGE = "This email is already registered."
GENERIC_FAILURE_MESSAGE = (
    "An error occurred during registration. Please try again."
)


class DonorRegistryError(Exception):
    """Base exception for all donor registry errors."""

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
        """Convert to the REST error body."""
        return {"error": self.message}


# ─── Caller Errors (400-level) ──────────────────────────────────

class ValidationError(DonorRegistryError):
    """Submitted form data fails a required or conditional field rule."""
    def __init__(self, message: str, field: str):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400,
        )
        self.field = field


class ConflictError(DonorRegistryError):
    """A donor with the same email already exists."""
    def __init__(self, field: str = "email"):
        super().__init__(
            EMAIL_TAKEN_MESSAGE, "EMAIL_ALREADY_REGISTERED",
            ErrorCategory.CONFLICT, ErrorSeverity.WARNING, 409,
        )
        self.field = field


# ─── Infrastructure Errors (500-level) ──────────────────────────

class StorageError(DonorRegistryError):
    """Pool or query failure. Raise `from` the driver error to keep the cause."""
    def __init__(self, operation: str):
        super().__init__(
            GENERIC_FAILURE_MESSAGE, "STORAGE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, 500,
        )
        self.operation = operation
