"""Logging configuration with rich console output and an optional rotating file."""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from clip_downloader.infrastructure.config.models import LoggingConfig

NOISY_LOGGERS = ("httpx", "httpcore")


def configure_logging(
    config: LoggingConfig,
    verbose: bool = False,
    console: Console | None = None,
) -> None:
    """
    Configure the root logger.

    Args:
        config: Logging settings from the configuration file
        verbose: Force DEBUG level regardless of the configured level
        console: Console the log lines are rendered on (shared with progress bars)
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG if verbose else getattr(logging, config.level))

    for handler in list(root.handlers):
        root.removeHandler(handler)

    console_handler = RichHandler(console=console, show_path=verbose, rich_tracebacks=verbose)
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root.addHandler(console_handler)

    if config.file_path:
        log_path = Path(config.file_path)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            filename=str(log_path),
            maxBytes=config.max_file_size,
            backupCount=config.backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(logging.Formatter(config.format))
        root.addHandler(file_handler)

    for noisy in NOISY_LOGGERS:
        logging.getLogger(noisy).setLevel(logging.WARNING)
