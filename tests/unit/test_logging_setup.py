"""Tests for logging configuration."""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

import pytest
from rich.logging import RichHandler

from clip_downloader.infrastructure.config.models import LoggingConfig
from clip_downloader.infrastructure.logging_setup import configure_logging


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_console_only(self, root_logger: logging.Logger) -> None:
        """Test the default console handler and level."""
        configure_logging(LoggingConfig(level="WARNING"))

        assert root_logger.level == logging.WARNING
        assert len(root_logger.handlers) == 1
        assert isinstance(root_logger.handlers[0], RichHandler)
        assert logging.getLogger("httpx").level == logging.WARNING

    def test_verbose_forces_debug(self, root_logger: logging.Logger) -> None:
        """Test that verbose output overrides the configured level."""
        configure_logging(LoggingConfig(level="ERROR"), verbose=True)
        assert root_logger.level == logging.DEBUG

    def test_file_handler(self, root_logger: logging.Logger, tmp_path: Path) -> None:
        """Test that a log file is written when configured."""
        log_path = tmp_path / "logs" / "clips.log"
        configure_logging(LoggingConfig(file_path=str(log_path)))

        logging.getLogger("clip_downloader.test").info("Finished with 3 clips")
        for handler in root_logger.handlers:
            handler.flush()

        assert any(isinstance(h, RotatingFileHandler) for h in root_logger.handlers)
        assert "Finished with 3 clips" in log_path.read_text()

    def test_reconfigure_replaces_handlers(self, root_logger: logging.Logger) -> None:
        """Test that repeated calls do not stack handlers."""
        configure_logging(LoggingConfig())
        configure_logging(LoggingConfig())
        assert len(root_logger.handlers) == 1
