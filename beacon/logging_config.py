"""
Centralized logging configuration for Beacon.

Provides consistent logging setup across all modules with configurable
levels and formatting.
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from beacon.config import LoggingConfig


def setup_logging(
    level: str = "INFO",
    log_file: str | None = None,
    max_bytes: int = 10 * 1024 * 1024,  # 10MB default
    backup_count: int = 5
) -> None:
    """
    Configure logging for Beacon.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path to log file (logs to console if not provided)
        max_bytes: Maximum bytes per log file before rotation (default: 10MB)
        backup_count: Number of backup files to keep (default: 5)
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    beacon_logger = logging.getLogger("beacon")
    beacon_logger.setLevel(log_level)
    beacon_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    beacon_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=max_bytes,
            backupCount=backup_count
        )
        file_handler.setFormatter(formatter)
        beacon_logger.addHandler(file_handler)

    beacon_logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a specific module.

    Args:
        name: Module name (typically __name__)

    Returns:
        Logger nested under the "beacon" logger
    """
    if name.startswith("beacon."):
        name = name[len("beacon."):]

    return logging.getLogger(f"beacon.{name}")


def setup_logging_from_config(config: "LoggingConfig") -> None:
    """
    Configure logging from the ``logging`` section of the config file.

    The log file's directory is created if it does not exist yet.

    Raises:
        OSError: If the log file cannot be opened
    """
    if config.file:
        Path(config.file).parent.mkdir(parents=True, exist_ok=True)

    setup_logging(config.level, config.file)
