"""Tests for logging configuration."""

import logging

from calorie_scanner.app_logging import configure_logging


def test_configure_logging_adds_single_handler() -> None:
    logger = logging.getLogger("calorie_scanner")
    logger.handlers.clear()

    configure_logging()
    configure_logging()

    assert len(logger.handlers) == 1
    assert logger.propagate is False


def test_configure_logging_updates_level() -> None:
    logger = configure_logging("debug")

    assert logger.level == logging.DEBUG

    configure_logging("warning")
    assert logger.level == logging.WARNING
    configure_logging()
