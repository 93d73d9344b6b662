"""Test configuration and settings."""

import pytest
from pydantic import ValidationError

from forge_mock.core.config import Settings


class TestSettings:
    """Test configuration settings."""

    def test_default_settings(self):
        """Test that default settings are loaded correctly."""
        settings = Settings()

        assert settings.HOST == "127.0.0.1"
        assert settings.PORT == 8000
        assert settings.DEBUG is False
        assert settings.LOG_LEVEL == "INFO"
        assert settings.LOG_FORMAT == "json"
        assert settings.MOCK_ACCESS_TOKEN == "mock-jwt-token-12345"
        assert settings.RATE_LIMIT_LIMIT == 1000
        assert settings.RATE_LIMIT_COST == 5
        assert settings.RATE_LIMIT_RESET_SECONDS == 3600

    def test_settings_from_env(self, monkeypatch):
        """Test that settings can be loaded from environment variables."""
        monkeypatch.setenv("HOST", "0.0.0.0")
        monkeypatch.setenv("PORT", "9000")
        monkeypatch.setenv("DEBUG", "true")
        monkeypatch.setenv("MOCK_ACCESS_TOKEN", "token-from-env")

        settings = Settings()

        assert settings.HOST == "0.0.0.0"
        assert settings.PORT == 9000
        assert settings.DEBUG is True
        assert settings.MOCK_ACCESS_TOKEN == "token-from-env"

    def test_log_settings_are_normalized(self, monkeypatch):
        """Test log level and format are case-normalized."""
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("LOG_FORMAT", "TEXT")

        settings = Settings()

        assert settings.LOG_LEVEL == "DEBUG"
        assert settings.LOG_FORMAT == "text"

    def test_invalid_log_level_rejected(self, monkeypatch):
        """Test that unknown log levels fail validation."""
        monkeypatch.setenv("LOG_LEVEL", "VERBOSE")

        with pytest.raises(ValidationError, match="Log level must be one of"):
            Settings()
