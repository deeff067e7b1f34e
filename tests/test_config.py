"""Unit tests for settings and logging setup."""

import json
import logging

import pytest
import structlog

from calc_service.config import Settings
from calc_service.logging_config import configure_logging


def test_defaults(monkeypatch):
    for name in ("PORT", "BANNER", "STATIC_DIR", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.PORT == 3000
    assert settings.BANNER == "Task 5.1P - Containerization"
    assert settings.STATIC_DIR == "public"
    assert settings.LOG_LEVEL == "INFO"


def test_env_override(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("LOG_JSON", "true")

    settings = Settings(_env_file=None)

    assert settings.PORT == 8080
    assert settings.LOG_JSON is True


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    configure_logging("INFO")
    root.handlers[:] = handlers
    root.setLevel(level)


def test_json_logging(capsys, restore_logging):
    configure_logging("INFO", json_logs=True)
    structlog.get_logger("test").info("calculation_completed", operation="mod")
    line = capsys.readouterr().err.strip().splitlines()[-1]

    event = json.loads(line)
    assert event["event"] == "calculation_completed"
    assert event["operation"] == "mod"
    assert event["level"] == "info"
    assert event["logger"] == "test"


def test_log_level_filters(capsys, restore_logging):
    configure_logging("WARNING")
    structlog.get_logger("test").info("hidden_event")
    structlog.get_logger("test").warning("shown_event")

    err = capsys.readouterr().err
    assert "hidden_event" not in err
    assert "shown_event" in err
