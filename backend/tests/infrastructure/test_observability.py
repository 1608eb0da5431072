"""Structured Logging - JSON formatter output and setup."""

import json
import logging

from signup.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "signup.core.pipeline", logging.INFO, __file__, 1,
        "Pipeline stopped at step %s", ("validate",), None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_includes_core_fields():
    log = json.loads(JSONFormatter().format(_record()))

    assert log["level"] == "INFO"
    assert log["logger"] == "signup.core.pipeline"
    assert log["message"] == "Pipeline stopped at step validate"
    assert "timestamp" in log


def test_json_formatter_surfaces_known_extras_only():
    log = json.loads(JSONFormatter().format(
        _record(step="validate", failure_tag="invalid", secret="nope"),
    ))

    assert log["step"] == "validate"
    assert log["failure_tag"] == "invalid"
    assert "secret" not in log


def test_setup_logging_installs_handler_and_level():
    root = logging.getLogger()
    previous_level = root.level
    handler = setup_logging("warning", "json")
    try:
        assert handler in root.handlers
        assert isinstance(handler.formatter, JSONFormatter)
        assert root.level == logging.WARNING
    finally:
        root.removeHandler(handler)
        root.setLevel(previous_level)
