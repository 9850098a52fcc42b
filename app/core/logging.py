"""
Logging setup - configures the "typing" logger hierarchy.

Every module logs through logging.getLogger("typing.<area>"), so a single
handler on the "typing" root covers the whole application.

Log Format:
==========
    [2024-01-01 12:00:00] INFO [typing.services.notestore] Creating note
"""

import logging
import sys
from typing import Optional, TextIO


LOGGER_NAME = "typing"

LOG_FORMAT = "[%(asctime)s] %(levelname)s [%(name)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# TYPING_LOG_LEVEL values mapped to stdlib levels
LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
}

_COLORS = {
    logging.DEBUG: "\033[36m",
    logging.INFO: "\033[32m",
    logging.WARNING: "\033[33m",
    logging.ERROR: "\033[31m",
    logging.CRITICAL: "\033[35m",
}
_RESET = "\033[0m"


class ColorFormatter(logging.Formatter):
    """Formatter that wraps the level name in an ANSI color."""

    def format(self, record: logging.LogRecord) -> str:
        original = record.levelname
        color = _COLORS.get(record.levelno)
        if color:
            record.levelname = f"{color}{original}{_RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = original


def configure_logging(
    level: str = "DEBUG",
    color: bool = True,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """
    Configure the application logger.

    Args:
        level: DEBUG, INFO, WARN or ERROR (unknown values mean DEBUG)
        color: Colorize level names (disabled for release builds)
        stream: Output stream, stdout by default

    Returns:
        The configured "typing" logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(LEVELS.get(level.upper(), logging.DEBUG))

    # Reconfiguring replaces the previous handler instead of stacking another one
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stdout)
    formatter_cls = ColorFormatter if color else logging.Formatter
    handler.setFormatter(formatter_cls(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False

    return logger
