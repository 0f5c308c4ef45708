"""Tests for logging helpers."""

from __future__ import annotations

import logging

import pytest

from recursive_category.utils.logging_config import (
    PACKAGE_LOGGER_NAME,
    configure_logging,
    get_logger,
)


@pytest.fixture
def restore_package_logger():
    """Undo handler and level changes made by configure_logging."""
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    handlers = list(logger.handlers)
    level = logger.level
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)


class TestGetLogger:
    """Tests for get_logger."""

    def test_keeps_package_module_names(self) -> None:
        assert get_logger("recursive_category.builder").name == "recursive_category.builder"

    def test_nests_foreign_names_under_package(self) -> None:
        assert get_logger("myapp").name == "recursive_category.myapp"

    def test_package_logger_has_null_handler(self) -> None:
        handlers = logging.getLogger(PACKAGE_LOGGER_NAME).handlers

        assert any(isinstance(handler, logging.NullHandler) for handler in handlers)


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_sets_level(self, restore_package_logger: logging.Logger) -> None:
        logger = configure_logging("debug")

        assert logger is restore_package_logger
        assert logger.level == logging.DEBUG

    def test_is_idempotent(self, restore_package_logger: logging.Logger) -> None:
        configure_logging("INFO")
        configure_logging("INFO")

        stream_handlers = [
            handler
            for handler in restore_package_logger.handlers
            if type(handler) is logging.StreamHandler
        ]
        assert len(stream_handlers) == 1
