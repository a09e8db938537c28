"""Runtime settings read from the environment."""

import logging
import os
from dataclasses import dataclass

_TRUTHY = {'1', 'true', 'yes', 'on'}


def _env_flag(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


def _env_log_level(name: str, default: str) -> str:
    raw = os.environ.get(name, '').strip().upper()
    if not raw:
        return default
    # getLevelName maps known names to their numeric level and anything else to a string
    if not isinstance(logging.getLevelName(raw), int):
        raise ValueError(f"{name}={raw!r} is not a logging level name")
    return raw


@dataclass(frozen=True)
class Settings:
    """Library settings.

    Attributes:
        log_level: Level name for the ``fpkit`` logger (``FPKIT_LOG_LEVEL``)
        debug: Force debug logging regardless of ``log_level`` (``FPKIT_DEBUG``)
        color: Wrap log messages in ANSI colour codes (``FPKIT_COLOR``)
    """
    log_level: str = 'WARNING'
    debug: bool = False
    color: bool = True

    @property
    def effective_level(self) -> str:
        return 'DEBUG' if self.debug else self.log_level

    @classmethod
    def from_env(cls) -> 'Settings':
        return cls(
            log_level=_env_log_level('FPKIT_LOG_LEVEL', cls.log_level),
            debug=_env_flag('FPKIT_DEBUG', cls.debug),
            color=_env_flag('FPKIT_COLOR', cls.color),
        )


_settings: Settings | None = None


def get_settings() -> Settings:
    """Return the settings, reading the environment on first use."""
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings


def reload_settings() -> Settings:
    """Discard cached settings and read the environment again."""
    global _settings
    _settings = Settings.from_env()
    return _settings
