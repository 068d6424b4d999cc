"""Tests for wren.logs: logger names and CLI logging setup."""

import logging

from wren.logs import access_logger, configure_logging, dispatch_logger, error_logger


class TestLoggerNames:
    def test_names(self) -> None:
        assert dispatch_logger.name == "wren.dispatch"
        assert access_logger.name == "wren.access"
        assert error_logger.name == "wren.errors"


class TestConfigureLogging:
    def test_sets_level(self) -> None:
        configure_logging("debug")
        assert logging.getLogger("wren").level == logging.DEBUG

    def test_idempotent(self) -> None:
        logger = logging.getLogger("wren")
        before = len(logger.handlers)
        configure_logging()
        configure_logging("warning")
        assert len(logger.handlers) == before + 1
        assert logger.level == logging.WARNING
