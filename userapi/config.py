"""Environment-driven settings for the user API.

Values are read from environment variables when ``Settings.from_env`` is
called, so tests can monkeypatch the environment and build a fresh app.
"""

import os
from dataclasses import dataclass

DEFAULT_AUTH_TOKEN = "mysecret123"
DEVELOPMENT = "development"


class ConfigurationError(ValueError):
    """An environment variable holds an unusable value."""


def _env(name: str, default: str) -> str:
    return os.environ.get(name, default).strip()


def _env_int(name: str, default: int) -> int:
    value = _env(name, str(default))
    try:
        return int(value)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {value!r}") from None


@dataclass(frozen=True)
class Settings:
    """Application settings."""
    auth_token: str = DEFAULT_AUTH_TOKEN
    environment: str = "production"
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 5000

    @property
    def is_development(self) -> bool:
        """Whether internal fault detail may be exposed to callers."""
        return self.environment.lower() == DEVELOPMENT

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from ``USERAPI_*`` environment variables."""
        return cls(
            auth_token=_env("USERAPI_AUTH_TOKEN", DEFAULT_AUTH_TOKEN),
            environment=_env("USERAPI_ENV", "production"),
            log_level=_env("USERAPI_LOG_LEVEL", "INFO"),
            host=_env("USERAPI_HOST", "127.0.0.1"),
            port=_env_int("USERAPI_PORT", 5000),
        )
