"""Unit tests for logging setup."""

import logging

import pytest

from chute.config import Settings
from chute.util.logging import setup_logging


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    chute_level = logging.getLogger("chute").level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.getLogger("chute").setLevel(chute_level)


class TestSetupLogging:
    def test_test_environment_logs_warnings_only(self, restore_logging):
        # Act
        setup_logging(Settings(environment="test", debug=False))

        # Assert
        assert logging.getLogger("chute").level == logging.WARNING
        assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING

    def test_debug_lowers_chute_but_not_libraries(self, restore_logging):
        # Act
        setup_logging(Settings(environment="development", debug=True))

        # Assert
        assert logging.getLogger("chute").level == logging.DEBUG
        assert logging.getLogger("asyncpg").level == logging.WARNING
