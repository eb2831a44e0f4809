import logging

from pythonjsonlogger import jsonlogger

from utils.logging_config import get_logger


def test_logger_configured_once():
    first = get_logger("tests.logging.once")
    second = get_logger("tests.logging.once")

    assert first is second
    assert len(first.handlers) == 1
    assert isinstance(first.handlers[0].formatter, jsonlogger.JsonFormatter)
    assert first.propagate is False


def test_level_from_environment(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")

    logger = get_logger("tests.logging.level")

    assert logger.level == logging.DEBUG
