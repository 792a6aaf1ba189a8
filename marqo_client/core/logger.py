"""Structured logging for the Marqo client.

This module provides a configured logger with a console handler and an
optional rotating file handler. Logs are human-readable with timestamp, level,
logger name, and message; structured fields travel in the record's extra.

Examples:
    >>> from marqo_client.core.logger import get_logger
    >>> logger = get_logger("marqo_client")
    >>> logger.error("Search failed: status code: 500")
    2026-01-14 23:45:00,123 | ERROR | marqo_client | Search failed: status code: 500
"""

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Human-readable log format with timestamp, level, module name, and message
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

# Rotating file handler limits (100MB max file size, 5 backup files)
MAX_LOG_SIZE_BYTES = 100 * 1024 * 1024  # 100MB
BACKUP_COUNT = 5


def _is_configured(logger: logging.Logger, level: int, log_file: Path | None) -> bool:
    """Return True if logger already has exactly this level and log file."""
    if not logger.handlers or logger.level != level:
        return False
    files = [
        h.baseFilename for h in logger.handlers if isinstance(h, RotatingFileHandler)
    ]
    expected = [os.path.abspath(log_file)] if log_file is not None else []
    return files == expected


def get_logger(
    name: str,
    log_level: str = "ERROR",
    log_file: Path | None = None,
) -> logging.Logger:
    """Create and configure a logger with console and optional file handlers.

    The logger includes:
    - Console handler: writes to stderr
    - Rotating file handler (only when log_file is given): DEBUG level,
      100MB max size, 5 backups

    Args:
        name: Logger name (typically "marqo_client" or a submodule)
        log_level: Logging level as string (DEBUG, INFO, WARNING, ERROR,
            CRITICAL). Controls the logger's base level.
        log_file: Optional path to a log file. Parent directories are created
            automatically.

    Returns:
        Configured logging.Logger instance. Calling this function again with
        the same name and configuration returns the logger untouched; a
        different configuration closes and replaces the old handlers.

    Raises:
        ValueError: If log_level is not a valid logging level name.
    """
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {log_level}")

    logger = logging.getLogger(name)
    if _is_configured(logger, level, log_file):
        return logger
    logger.setLevel(level)

    # Close and clear existing handlers to allow reconfiguration
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=MAX_LOG_SIZE_BYTES,
            backupCount=BACKUP_COUNT,
        )
        file_handler.setLevel(logging.DEBUG)  # File captures all log levels
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
