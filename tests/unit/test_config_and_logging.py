"""Unit tests for settings and the library logger."""

import io
import logging

import pytest

from fpkit.config import Settings, get_settings
from fpkit.utils.logging import log


class TestSettings:
    """Test environment-driven settings."""

    def test_defaults(self, fresh_settings):
        settings = fresh_settings()
        assert settings == Settings()
        assert settings.effective_level == "WARNING"

    def test_log_level_from_env(self, fresh_settings, monkeypatch):
        monkeypatch.setenv("FPKIT_LOG_LEVEL", " info ")
        assert fresh_settings().log_level == "INFO"

    @pytest.mark.parametrize("raw,expected", [
        ("1", True), ("true", True), ("YES", True), ("on", True),
        ("0", False), ("no", False), ("", False),
    ])
    def test_debug_flag(self, fresh_settings, monkeypatch, raw, expected):
        monkeypatch.setenv("FPKIT_DEBUG", raw)
        assert fresh_settings().debug is expected

    def test_debug_overrides_level(self, fresh_settings, monkeypatch):
        monkeypatch.setenv("FPKIT_DEBUG", "1")
        assert fresh_settings().effective_level == "DEBUG"

    @pytest.mark.parametrize("raw", ["verbose", "warnings", "5"])
    def test_unknown_log_level_rejected(self, fresh_settings, monkeypatch, raw):
        monkeypatch.setenv("FPKIT_LOG_LEVEL", raw)
        with pytest.raises(ValueError, match="FPKIT_LOG_LEVEL"):
            fresh_settings()

    @pytest.mark.parametrize("raw", ["", "   "])
    def test_blank_log_level_uses_default(self, fresh_settings, monkeypatch, raw):
        monkeypatch.setenv("FPKIT_LOG_LEVEL", raw)
        assert fresh_settings().log_level == "WARNING"

    def test_get_settings_is_cached(self, fresh_settings):
        fresh_settings()
        assert get_settings() is get_settings()


class TestLog:
    """Test colour-aware log helpers."""

    def test_color_applied(self, fresh_settings, caplog):
        fresh_settings()
        with caplog.at_level(logging.INFO, logger=log.LOGGER_NAME):
            log.info("hello", log.GREEN)
        assert caplog.records[-1].getMessage() == f"{log.GREEN}hello{log.RESET_COLOR}"

    def test_color_disabled(self, fresh_settings, monkeypatch, caplog):
        monkeypatch.setenv("FPKIT_COLOR", "0")
        fresh_settings()
        with caplog.at_level(logging.WARNING, logger=log.LOGGER_NAME):
            log.warning("careful")
        assert caplog.records[-1].getMessage() == "careful"

    def test_error_level(self, fresh_settings, caplog):
        fresh_settings()
        with caplog.at_level(logging.ERROR, logger=log.LOGGER_NAME):
            log.error("bad")
        assert caplog.records[-1].levelno == logging.ERROR

    def test_configure_logging_writes_to_stream(self, fresh_settings):
        fresh_settings()
        stream = io.StringIO()
        handler = log.configure_logging("DEBUG", stream=stream)
        try:
            log.debug("traced")
        finally:
            log.logger.removeHandler(handler)
            log.logger.setLevel(logging.NOTSET)
        assert "traced" in stream.getvalue()
        assert "fpkit - DEBUG" in stream.getvalue()

    def test_configure_logging_uses_settings_level(self, fresh_settings, monkeypatch):
        monkeypatch.setenv("FPKIT_LOG_LEVEL", "error")
        fresh_settings()
        handler = log.configure_logging(stream=io.StringIO())
        try:
            assert log.logger.level == logging.ERROR
        finally:
            log.logger.removeHandler(handler)
            log.logger.setLevel(logging.NOTSET)

    def test_configure_logging_debug_flag(self, fresh_settings, monkeypatch):
        monkeypatch.setenv("FPKIT_DEBUG", "1")
        fresh_settings()
        handler = log.configure_logging(stream=io.StringIO())
        try:
            assert log.logger.level == logging.DEBUG
        finally:
            log.logger.removeHandler(handler)
            log.logger.setLevel(logging.NOTSET)


class TestLibraryLoggerSetup:
    """Test that importing fpkit leaves application logging alone."""

    def test_null_handler_installed(self):
        assert any(isinstance(h, logging.NullHandler) for h in log.logger.handlers)

    def test_root_logger_untouched(self, fresh_settings):
        fresh_settings()
        root = logging.getLogger()
        before = list(root.handlers), root.level
        stream = io.StringIO()
        handler = log.configure_logging("INFO", stream=stream)
        try:
            log.info("only on fpkit")
            assert (list(root.handlers), root.level) == before
        finally:
            log.logger.removeHandler(handler)
            log.logger.setLevel(logging.NOTSET)
        assert handler not in root.handlers
