"""JSONFormatter - structured log lines with car-specific extras."""

import json
import logging

from car_api.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "car_api.services.car_service", logging.INFO, __file__, 1,
        "Car created", None, None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_formats_base_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "INFO"
    assert log["logger"] == "car_api.services.car_service"
    assert log["message"] == "Car created"
    assert "timestamp" in log


def test_includes_known_extras_only():
    log = json.loads(JSONFormatter().format(
        _record(car_id="abc", error_code="DATABASE_ERROR", unrelated="x"),
    ))
    assert log["car_id"] == "abc"
    assert log["error_code"] == "DATABASE_ERROR"
    assert "unrelated" not in log


def test_includes_exception_text():
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        import sys
        record = _record()
        record.exc_info = sys.exc_info()
    log = json.loads(JSONFormatter().format(record))
    assert "RuntimeError: boom" in log["exception"]


def test_setup_logging_installs_handler():
    root = logging.getLogger()
    previous_level = root.level
    handler = setup_logging("debug", "text")
    try:
        assert handler in root.handlers
        assert root.level == logging.DEBUG
        assert not isinstance(handler.formatter, JSONFormatter)
    finally:
        root.removeHandler(handler)
        root.setLevel(previous_level)
