"""Logging configuration for the application."""

import logging
import sys

from app.core.config import LogLevel, get_settings


def setup_logging(level: LogLevel | None = None) -> None:
    """Configure application logging.

    Args:
        level: The logging level to use. Defaults to the level from settings.
    """
    logging.basicConfig(
        level=level or get_settings().effective_log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance with the given name.

    Args:
        name: The name for the logger (typically __name__).

    Returns:
        A configured logger instance.
    """
    return logging.getLogger(name)
