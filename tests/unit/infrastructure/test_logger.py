"""Tests for logging setup."""

import logging

import pytest

from patternkit.config import LogDestination, LoggingConfig
from patternkit.domain.base.exceptions import ConfigurationError
from patternkit.infrastructure.logging import setup_logging


class TestSetupLogging:
    """Test handler configuration."""

    def test_file_destination_creates_log_directory(self, tmp_path):
        log_path = tmp_path / "nested" / "patternkit.log"
        config = LoggingConfig(destination=LogDestination.FILE, file={"path": str(log_path)})

        setup_logging(config)

        assert log_path.parent.is_dir()
        assert any(isinstance(h, logging.FileHandler) for h in logging.getLogger().handlers)

    def test_unopenable_log_file_raises_configuration_error(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("plain file")
        config = LoggingConfig(
            level="DEBUG",
            destination=LogDestination.BOTH,
            file={"path": str(blocker / "sub" / "patternkit.log")},
        )
        root_logger = logging.getLogger()
        handlers_before = root_logger.handlers[:]

        with pytest.raises(ConfigurationError, match="Cannot open log file") as exc_info:
            setup_logging(config)

        assert exc_info.value.error_code == "CONFIGURATION_ERROR"
        assert isinstance(exc_info.value.__cause__, OSError)
        # Existing handlers are left in place
        assert root_logger.handlers == handlers_before
