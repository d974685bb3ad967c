"""
Logging utilities for textbank
Centralized logging configuration
"""

import logging
import sys
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
PACKAGE_LOGGER = "textbank"


def resolve_level(level: Optional[Union[str, int]]) -> int:
    """Log level from a name ("debug", "WARNING") or number; unknown names mean INFO."""
    if level is None:
        return logging.INFO
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.INFO)
    return level


def configure_logging(level: Union[str, int] = "INFO", logger_name: Optional[str] = None) -> logging.Logger:
    """
    Configure logging settings.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        logger_name: Logger to set the level on (root logger if None)

    Returns:
        The configured logger
    """
    logger = logging.getLogger(logger_name)
    logger.setLevel(resolve_level(level))

    # Only add handler if no handlers exist (avoid duplicate handlers)
    if not logging.root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logging.root.addHandler(handler)

    return logger


def configure_package_logging(settings) -> logging.Logger:
    """
    Apply ApplicationSettings to the textbank loggers.

    ``debug`` wins over ``log_level``. The host application's own loggers are
    left alone.
    """
    level = logging.DEBUG if settings.debug else settings.log_level
    return configure_logging(level, PACKAGE_LOGGER)
