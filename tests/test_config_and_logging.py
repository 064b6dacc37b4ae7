"""Tests for settings loading and logging setup."""

import logging

import pytest
import structlog
from pydantic import ValidationError

from commerce_core.config import Settings, get_settings
from commerce_core.logging_config import add_app_context, setup_logging


class TestSettings:
    """Environment-driven configuration."""

    def test_defaults(self):
        settings = Settings()

        assert settings.app_name == "commerce-core"
        assert settings.log_level == "INFO"
        assert settings.log_format == "json"
        assert settings.strict_email_validation is True
        assert settings.app_env == "development"

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("COMMERCE_LOG_LEVEL", "debug")
        monkeypatch.setenv("COMMERCE_APP_ENV", "Production")

        settings = get_settings()

        assert settings.log_level == "DEBUG"
        assert settings.app_env == "Production"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            Settings(log_level="LOUD")

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()


class TestLogging:
    """structlog configuration."""

    @pytest.fixture(autouse=True)
    def restore_logging(self):
        root = logging.getLogger()
        handlers, level = root.handlers[:], root.level
        yield
        structlog.reset_defaults()
        root.handlers[:] = handlers
        root.setLevel(level)

    def test_app_context_added(self):
        event = add_app_context(None, "info", {"event": "x"})

        assert event["app_name"] == "commerce-core"
        assert event["app_env"] == "development"

    @pytest.mark.parametrize("log_format", ["json", "console"])
    def test_setup_installs_single_handler(self, log_format):
        setup_logging(Settings(log_level="WARNING", log_format=log_format))

        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert root.level == logging.WARNING

    def test_json_format_uses_json_formatter(self):
        from pythonjsonlogger.json import JsonFormatter

        setup_logging(Settings(log_format="json"))

        (handler,) = logging.getLogger().handlers
        assert isinstance(handler.formatter, JsonFormatter)
