"""Tests for structured logging functionality."""

from __future__ import annotations

import json
import logging
import logging.handlers
import sys

import pytest

from kairo.logging_config import JSONFormatter, get_logger, setup_logging


def _record(**kwargs) -> logging.LogRecord:
    defaults = dict(
        name="kairo.test",
        level=logging.INFO,
        pathname="test.py",
        lineno=42,
        msg="Test message",
        args=(),
        exc_info=None,
    )
    defaults.update(kwargs)
    record = logging.LogRecord(**defaults)
    record.module = "test_module"
    record.funcName = "test_function"
    return record


def test_json_formatter():
    """JSONFormatter emits the standard fields."""
    log_data = json.loads(JSONFormatter().format(_record()))

    assert log_data["level"] == "INFO"
    assert log_data["logger"] == "kairo.test"
    assert log_data["message"] == "Test message"
    assert log_data["module"] == "test_module"
    assert log_data["function"] == "test_function"
    assert log_data["line"] == 42
    assert "timestamp" in log_data
    assert "extra" not in log_data


def test_json_formatter_with_exception():
    try:
        raise ValueError("Test error")
    except ValueError:
        exc_info = sys.exc_info()

    log_data = json.loads(
        JSONFormatter().format(_record(level=logging.ERROR, msg="Error occurred", exc_info=exc_info))
    )

    assert log_data["exception"]["type"] == "ValueError"
    assert "Test error" in log_data["exception"]["message"]
    assert log_data["exception"]["traceback"] is not None


def test_json_formatter_includes_extra_fields():
    record = _record()
    record.habits = 3
    log_data = json.loads(JSONFormatter().format(record))
    assert log_data["extra"] == {"habits": 3}


def test_setup_logging(app_config, tmp_path):
    """Logging setup creates a rotating JSON log under the data directory."""
    logger = setup_logging(app_config)

    assert logger.name == "kairo"
    assert logger.level == logging.INFO
    assert len(logger.handlers) == 2  # Console + File

    log_file = tmp_path / "logs" / "kairo.log"
    assert log_file.exists()

    logger.warning("Test warning message")
    for handler in logger.handlers:
        handler.flush()

    lines = [line for line in log_file.read_text().splitlines() if line.strip()]
    assert len(lines) >= 2
    for line in lines:
        entry = json.loads(line)
        assert {"timestamp", "level", "message"} <= set(entry)


def test_setup_logging_twice_does_not_duplicate_handlers(app_config):
    setup_logging(app_config)
    logger = setup_logging(app_config)
    assert len(logger.handlers) == 2


def test_log_level_from_config(app_config):
    app_config.LOG_LEVEL = "DEBUG"
    assert setup_logging(app_config).level == logging.DEBUG


def test_get_logger():
    """get_logger namespaces bare names under ``kairo``."""
    assert get_logger("module1").name == "kairo.module1"
    assert get_logger("kairo.services.habits").name == "kairo.services.habits"
    assert get_logger("module1") is not get_logger("module2")


@pytest.mark.parametrize("dev_mode", [True, False])
def test_logging_levels_by_mode(app_config, dev_mode):
    """Console logging level adjusts based on dev mode."""
    app_config.DEV_MODE = dev_mode
    logger = setup_logging(app_config)

    console_handler = next(
        handler
        for handler in logger.handlers
        if isinstance(handler, logging.StreamHandler)
        and not isinstance(handler, logging.handlers.RotatingFileHandler)
    )

    expected_level = logging.INFO if dev_mode else logging.WARNING
    assert console_handler.level == expected_level
