"""
Logging helpers.

The library only creates loggers; handlers are the application's business.
Call setup_logging() from an entry point to get output on stdout.
"""

import logging
import sys
from typing import Optional

from . import config


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a module (pass __name__)."""
    return logging.getLogger(name)


def setup_logging(
    level: str = config.LOG_LEVEL,
    format_string: Optional[str] = None,
) -> None:
    """
    Configure root logging with a stdout stream handler.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR)
        format_string: Custom format string (config.LOG_FORMAT if None)

    Raises:
        ValueError: if `level` is not a known level name
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level!r}")
    logging.basicConfig(
        level=numeric_level,
        format=format_string or config.LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )
