"""Tests for structured logging."""

import json
import logging
import logging.handlers
import sys

from pizza_assistant.logging_config import JSONFormatter, get_logger, setup_logging


def make_record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="pizza_assistant.test",
        level=logging.INFO,
        pathname=__file__,
        lineno=10,
        msg="Order %s placed",
        args=("67890",),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_fields():
    """Test that records are rendered as JSON with the expected keys."""
    data = json.loads(JSONFormatter().format(make_record()))

    assert data["level"] == "INFO"
    assert data["logger"] == "pizza_assistant.test"
    assert data["message"] == "Order 67890 placed"
    assert "timestamp" in data
    assert "context" not in data


def test_json_formatter_component():
    """Test that package loggers are tagged with their subpackage."""
    record = make_record()
    record.name = "pizza_assistant.dialogue.ordering"
    assert json.loads(JSONFormatter().format(record))["component"] == "dialogue"

    record.name = "uvicorn.error"
    assert "component" not in json.loads(JSONFormatter().format(record))


def test_json_formatter_context():
    """Test that extra context is included."""
    data = json.loads(JSONFormatter().format(make_record(context={"order_id": "67890"})))

    assert data["context"] == {"order_id": "67890"}


def test_setup_logging_writes_file(tmp_path):
    """Test that setup_logging writes JSON lines to the log file."""
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    log_file = tmp_path / "logs" / "app.log"

    try:
        setup_logging(log_level="DEBUG", log_file=str(log_file), console=False)
        get_logger("pizza_assistant.test").info("hello")
        for handler in root.handlers:
            handler.flush()
        handler_types = [type(h) for h in root.handlers]
    finally:
        for handler in root.handlers:
            handler.close()
        root.handlers = saved_handlers
        root.setLevel(saved_level)

    lines = log_file.read_text(encoding="utf-8").splitlines()
    assert json.loads(lines[-1])["message"] == "hello"
    assert handler_types == [logging.handlers.RotatingFileHandler]


def test_setup_logging_console_uses_stdout(tmp_path):
    """Test that the console handler writes to stdout."""
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level

    try:
        setup_logging(log_file=str(tmp_path / "app.log"), console=True)
        streams = [
            h.stream for h in root.handlers
            if type(h) is logging.StreamHandler
        ]
    finally:
        for handler in root.handlers:
            handler.close()
        root.handlers = saved_handlers
        root.setLevel(saved_level)

    assert streams == [sys.stdout]
