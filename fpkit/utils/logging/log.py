"""Colour-aware logging helpers for fpkit.

Messages go through the standard ``logging`` module under the ``fpkit``
logger. The library installs a ``NullHandler`` only; applications that want
output call :func:`configure_logging` or set up handlers themselves.
"""

import logging
import sys

from fpkit.config import get_settings

BOLD = "\033[1m"
UNDERLINE = "\033[4m"
ITALIC = "\033[3m"
RED = "\033[91m"
ORANGE = "\033[38;5;208m"
YELLOW = "\033[93m"
GREEN = "\033[92m"
BLUE = "\033[94m"
PURPLE = "\033[95m"
RESET_COLOR = "\033[0m"

LOGGER_NAME = "fpkit"

logger = logging.getLogger(LOGGER_NAME)
logger.addHandler(logging.NullHandler())


def _colored(message: str, color: str | None) -> str:
    if color and get_settings().color:
        return f"{color}{message}{RESET_COLOR}"
    return message


def debug(message: str, color: str | None = None) -> None:
    logger.debug(_colored(message, color))


def info(message: str, color: str | None = None) -> None:
    logger.info(_colored(message, color))


def warning(message: str, color: str | None = YELLOW) -> None:
    logger.warning(_colored(message, color))


def error(message: str, color: str | None = RED) -> None:
    logger.error(_colored(message, color))


def configure_logging(level: str | int | None = None, stream=None) -> logging.Handler:
    """Attach a stream handler to the ``fpkit`` logger.

    Args:
        level: Logging level; defaults to the level from :func:`get_settings`
        stream: Output stream, ``sys.stderr`` by default

    Returns:
        The handler that was added, so callers can remove it again
    """
    if level is None:
        level = get_settings().effective_level
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)
    return handler
