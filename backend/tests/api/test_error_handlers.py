"""Validation error summary — Pydantic error lists to one client message."""

from insurance_advisor.api.error_handlers import summarize_validation_errors


def _error(loc, type_="int_parsing"):
    return {"loc": loc, "type": type_, "msg": "bad"}


def test_body_field_error_uses_field_message():
    assert summarize_validation_errors([_error(("body", "age"))]) == (
        "Age must be between 18 and 100", "age",
    )


def test_nested_union_loc_uses_top_level_field():
    errors = [_error(("body", "riskTolerance", "str"), "string_type")]
    assert summarize_validation_errors(errors) == (
        "Invalid risk tolerance value", "riskTolerance",
    )


def test_whole_body_error_reads_as_missing_fields():
    assert summarize_validation_errors([_error(("body",), "missing")]) == (
        "Missing required fields", None,
    )


def test_malformed_json_is_invalid_request():
    assert summarize_validation_errors([_error(("body", 11), "json_invalid")]) == (
        "Invalid request data", None,
    )


def test_query_errors_are_invalid_request():
    errors = [_error(("query", "limit"), "greater_than_equal")]
    assert summarize_validation_errors(errors) == ("Invalid request data", None)


def test_first_body_error_wins():
    errors = [
        _error(("query", "limit")),
        _error(("body", "income")),
        _error(("body", "age")),
    ]
    assert summarize_validation_errors(errors) == (
        "Income must be a positive number", "income",
    )
