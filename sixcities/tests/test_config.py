"""
Tests for configuration and logging setup.
"""

import logging

from sixcities.config.logging_config import LOGGER_NAME, get_logger, setup_logging
from sixcities.config.settings import Settings


class TestSettings:
    """Tests for Settings defaults."""

    def test_defaults(self):
        """Test settings expose usable values."""
        assert Settings.DATABASE_URL
        assert Settings.API_PREFIX.startswith("/")
        assert isinstance(Settings.PORT, int)


class TestLogging:
    """Tests for setup_logging."""

    def test_setup_is_idempotent(self):
        """Test repeated calls do not stack handlers."""
        setup_logging()
        count = len(logging.getLogger(LOGGER_NAME).handlers)

        setup_logging()

        assert len(logging.getLogger(LOGGER_NAME).handlers) == count
        assert count >= 1

    def test_get_logger_is_child(self):
        """Test area loggers propagate to the project logger."""
        assert get_logger("offers").name == "sixcities.offers"
