"""Structured Logging — verifies JSON formatting and idempotent setup."""

import json
import logging

import pytest

from cruise_response.infrastructure.observability import JSONFormatter, setup_logging


@pytest.fixture
def restore_root_logger():
    handlers = list(logging.root.handlers)
    level = logging.root.level
    yield
    logging.root.handlers[:] = handlers
    logging.root.setLevel(level)


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "cruise_response.test", logging.INFO, __file__, 1, "wrote %s", ("body",), None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_base_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "INFO"
    assert log["logger"] == "cruise_response.test"
    assert log["message"] == "wrote body"
    assert "timestamp" in log


def test_json_formatter_surfaces_response_fields():
    log = json.loads(JSONFormatter().format(
        _record(status_code=200, content_length=5, path="/kafkacruisecontrol/health"),
    ))
    assert log["status_code"] == 200
    assert log["content_length"] == 5
    assert log["path"] == "/kafkacruisecontrol/health"
    assert "error_code" not in log


def test_setup_logging_replaces_its_own_handler(restore_root_logger):
    first = setup_logging("DEBUG", "json")
    second = setup_logging("WARNING", "text")
    assert first not in logging.root.handlers
    assert second in logging.root.handlers
    assert logging.root.level == logging.WARNING
    assert not isinstance(second.formatter, JSONFormatter)
