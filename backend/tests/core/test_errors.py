"""Error Hierarchy — status codes, codes and response bodies per error type."""

from app.core.errors import (
    ValidationError, ConflictError, StorageError,
    ErrorCategory, ErrorSeverity,
    EMAIL_TAKEN_MESSAGE, GENERIC_FAILURE_MESSAGE,
)


def test_validation_error_is_400_with_message_body():
    error = ValidationError("Please fill out all required fields.", field="email")
    assert error.http_status == 400
    assert error.category == ErrorCategory.VALIDATION
    assert error.to_response() == {"error": "Please fill out all required fields."}


def test_conflict_error_is_409_with_fixed_message():
    error = ConflictError()
    assert error.http_status == 409
    assert error.code == "EMAIL_ALREADY_REGISTERED"
    assert error.to_response() == {"error": EMAIL_TAKEN_MESSAGE}


def test_storage_error_hides_cause_from_response():
    try:
        try:
            raise OSError("connection refused by db.internal:3306")
        except OSError as cause:
            raise StorageError("insert") from cause
    except StorageError as error:
        assert error.http_status == 500
        assert error.severity == ErrorSeverity.CRITICAL
        assert error.to_response() == {"error": GENERIC_FAILURE_MESSAGE}
        assert "db.internal" not in str(error.to_response())
        assert isinstance(error.__cause__, OSError)
