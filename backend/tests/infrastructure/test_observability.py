"""Structured logging — JSON formatter fields and setup."""

import json
import logging

from insurance_advisor.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra):
    record = logging.LogRecord(
        "insurance_advisor.test", logging.INFO, __file__, 1,
        "Recommendation issued", None, None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_includes_base_fields():
    payload = json.loads(JSONFormatter().format(_record()))
    assert payload["level"] == "INFO"
    assert payload["logger"] == "insurance_advisor.test"
    assert payload["message"] == "Recommendation issued"
    assert "timestamp" in payload


def test_json_formatter_surfaces_known_extras_only():
    payload = json.loads(JSONFormatter().format(
        _record(recommendation_id=5, applicant_id=4, unrelated="x"),
    ))
    assert payload["recommendation_id"] == 5
    assert payload["applicant_id"] == 4
    assert "unrelated" not in payload


def test_json_formatter_uses_record_time():
    record = _record()
    record.created = 0.0
    payload = json.loads(JSONFormatter().format(record))
    assert payload["timestamp"] == "1970-01-01T00:00:00+00:00"


def test_json_formatter_custom_fields():
    payload = json.loads(JSONFormatter(fields=("path",)).format(
        _record(path="/api/recommendation", recommendation_id=5),
    ))
    assert payload["path"] == "/api/recommendation"
    assert "recommendation_id" not in payload


def test_setup_logging_installs_handler_and_level():
    handler = setup_logging("warning", "json")
    try:
        assert handler in logging.root.handlers
        assert isinstance(handler.formatter, JSONFormatter)
        assert logging.root.level == logging.WARNING
    finally:
        logging.root.removeHandler(handler)


def test_setup_logging_replaces_previous_handler():
    first = setup_logging("info", "text")
    second = setup_logging("info", "json")
    try:
        assert first not in logging.root.handlers
        assert second in logging.root.handlers
    finally:
        logging.root.removeHandler(second)


def test_setup_logging_routes_uvicorn_through_root():
    handler = setup_logging("info", "text")
    try:
        access = logging.getLogger("uvicorn.access")
        assert access.propagate is True
        assert access.handlers == []
    finally:
        logging.root.removeHandler(handler)
