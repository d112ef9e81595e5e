"""Unit tests for environment settings."""

import pytest

from userapi.config import ConfigurationError, Settings
from userapi.server import create_app


class TestSettings:
    """Test Settings.from_env."""

    def test_defaults(self, monkeypatch):
        for name in ("USERAPI_AUTH_TOKEN", "USERAPI_ENV", "USERAPI_PORT"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings.from_env()

        assert settings.auth_token == "mysecret123"
        assert settings.port == 5000
        assert settings.is_development is False

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("USERAPI_AUTH_TOKEN", "abc")
        monkeypatch.setenv("USERAPI_ENV", "Development")
        monkeypatch.setenv("USERAPI_PORT", " 8080 ")

        settings = Settings.from_env()

        assert settings.auth_token == "abc"
        assert settings.is_development is True
        assert settings.port == 8080

    def test_non_numeric_port(self, monkeypatch):
        monkeypatch.setenv("USERAPI_PORT", "eighty")

        with pytest.raises(ConfigurationError, match="USERAPI_PORT"):
            Settings.from_env()

    def test_create_app_reports_bad_port(self, monkeypatch):
        monkeypatch.setenv("USERAPI_PORT", "eighty")

        with pytest.raises(ConfigurationError, match="must be an integer"):
            create_app()
