"""Logging utilities for fpkit."""

from .log import (
    BOLD, UNDERLINE, ITALIC,
    RED, ORANGE, YELLOW, GREEN, BLUE, PURPLE,
    RESET_COLOR,
    LOGGER_NAME,
    debug, info, warning, error,
    configure_logging,
)

__all__ = [
    "BOLD", "UNDERLINE", "ITALIC",
    "RED", "ORANGE", "YELLOW", "GREEN", "BLUE", "PURPLE",
    "RESET_COLOR",
    "LOGGER_NAME",
    "debug", "info", "warning", "error",
    "configure_logging",
]
