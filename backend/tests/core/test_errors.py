"""Error Hierarchy — status codes and REST error bodies."""

from insurance_advisor.core.errors import (
    AdvisorError, DatabaseError, ErrorCategory, ErrorSeverity,
    InputValidationError, ResourceNotFoundError,
)


def test_input_validation_error_is_400_with_message_string():
    err = InputValidationError("Age must be between 18 and 100", "age")
    body = err.to_response()
    assert err.http_status == 400
    assert body["error"] == "Age must be between 18 and 100"
    assert body["code"] == "VALIDATION_ERROR"
    assert body["category"] == ErrorCategory.VALIDATION.value
    assert body["severity"] == ErrorSeverity.ERROR.value
    assert body["field"] == "age"
    assert "timestamp" in body


def test_resource_not_found_is_404():
    err = ResourceNotFoundError("Recommendation", "42")
    assert err.http_status == 404
    assert err.to_response()["error"] == "Recommendation '42' not found"
    assert "field" not in err.to_response()


def test_database_error_is_500_with_generic_message():
    err = DatabaseError("insert")
    body = err.to_response()
    assert err.http_status == 500
    assert err.operation == "insert"
    assert body["error"] == "Internal server error"
    assert body["severity"] == ErrorSeverity.CRITICAL.value


def test_all_errors_share_base():
    for err in (
        InputValidationError("m", "age"),
        ResourceNotFoundError("R", "1"),
        DatabaseError("query"),
    ):
        assert isinstance(err, AdvisorError)
