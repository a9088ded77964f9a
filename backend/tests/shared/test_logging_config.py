"""Tests for shared/logging_config.py."""

import logging

import pytest

from shared import logging_config
from shared.logging_config import configure_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    level = root.level
    handlers = list(root.handlers)
    installed = logging_config._handler
    yield root
    root.setLevel(level)
    root.handlers = handlers
    logging_config._handler = installed


class TestConfigureLogging:
    def test_sets_level(self, restore_root_logger):
        """Should set the root level from the name."""
        configure_logging("DEBUG")
        assert restore_root_logger.level == logging.DEBUG
        configure_logging("warning")
        assert restore_root_logger.level == logging.WARNING

    def test_installs_single_handler(self, restore_root_logger):
        """Repeated calls should not stack handlers."""
        configure_logging("INFO")
        count = len(restore_root_logger.handlers)
        configure_logging("INFO")
        assert len(restore_root_logger.handlers) == count

    def test_unknown_level_falls_back_to_info(self, restore_root_logger):
        """An unknown level name should not break startup."""
        configure_logging("chatty")
        assert restore_root_logger.level == logging.INFO
