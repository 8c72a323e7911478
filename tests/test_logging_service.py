"""Tests for the stderr logging service."""

import logging

from worldclock.core.logging_service import (
    LoggingService,
    get_logger,
    level_from_env,
    reset_logger,
)


def test_level_from_env_precedence():
    assert level_from_env({"WORLDCLOCK_LOG_LEVEL": "DEBUG", "LOG_LEVEL": "ERROR"}) == "DEBUG"
    assert level_from_env({"LOG_LEVEL": "ERROR"}) == "ERROR"
    assert level_from_env({}) == "WARNING"


def test_unknown_level_falls_back_to_warning():
    service = LoggingService("worldclock-test", "LOUD")
    assert service.logger.level == logging.WARNING
    service.logger.handlers.clear()


def test_single_stderr_handler(capsys):
    service = LoggingService("worldclock-test", "debug")
    LoggingService("worldclock-test", "debug")
    assert len(service.logger.handlers) == 1

    service.debug("hello there")
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "[DEBUG] worldclock-test: hello there" in captured.err
    service.logger.handlers.clear()


def test_get_logger_is_singleton(monkeypatch):
    monkeypatch.setenv("WORLDCLOCK_LOG_LEVEL", "ERROR")
    first = get_logger()
    assert get_logger() is first
    assert first.logger.name == "worldclock"
    assert first.logger.level == logging.ERROR


def test_reset_logger_drops_handlers():
    service = get_logger()
    reset_logger()
    assert service.logger.handlers == []
    assert get_logger() is not service


def test_log_startup_only_at_debug(caplog):
    service = LoggingService("worldclock-test", "WARNING")
    service.log_startup("1.0.0", "/tmp/worldclock.toml")
    assert "worldclock v1.0.0" not in caplog.text

    service = LoggingService("worldclock-test", "DEBUG")
    service.log_startup("1.0.0", "/tmp/worldclock.toml")
    assert "worldclock v1.0.0" in caplog.text
    assert "/tmp/worldclock.toml" in caplog.text
    service.logger.handlers.clear()
