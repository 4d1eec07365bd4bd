"""Relay configuration.

Hides where settings come from (process environment, optionally seeded from
a .env file) and how they are validated.
"""

import os
from collections.abc import Mapping
from typing import Any, Literal

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..llm import DEFAULT_MODEL

DEFAULT_PORT = 5000
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PROVIDER_TIMEOUT = 60.0
DEFAULT_LOG_LEVEL = "info"

LogLevel = Literal["debug", "info", "warning", "error", "critical"]


class ConfigError(ValueError):
    """Raised when an environment variable holds an unusable value."""


class RelaySettings(BaseModel):
    """Settings for the relay service, read once at startup."""

    model_config = ConfigDict(frozen=True)

    api_key: str | None = Field(default=None, description="Gemini API key")
    model: str = Field(default=DEFAULT_MODEL, description="Fixed model identifier")
    host: str = Field(default=DEFAULT_HOST, description="Interface to listen on")
    port: int = Field(default=DEFAULT_PORT, ge=1, le=65535, description="Port to listen on")
    provider_timeout: float = Field(
        default=DEFAULT_PROVIDER_TIMEOUT,
        gt=0,
        description="Seconds before a provider call is abandoned"
    )
    log_level: LogLevel = Field(default=DEFAULT_LOG_LEVEL, description="Log level name")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "RelaySettings":
        """Build settings from environment variables.

        Args:
            environ: Mapping to read from (defaults to os.environ after
                loading .env)

        Returns:
            Validated settings

        Raises:
            ConfigError: If a variable holds an unusable value (non-numeric or
                out-of-range PORT or RELAY_PROVIDER_TIMEOUT, unknown log level)

        Environment variables:
            GEMINI_API_KEY: Provider API key
            PORT: Listen port (default: 5000)
            HOST: Listen interface (default: 0.0.0.0)
            RELAY_PROVIDER_TIMEOUT: Provider timeout in seconds (default: 60)
            RELAY_LOG_LEVEL: debug, info, warning, error or critical (default: info)
        """
        if environ is None:
            load_dotenv()
            environ = os.environ

        try:
            port = int(environ.get("PORT") or DEFAULT_PORT)
        except ValueError as e:
            raise ConfigError(f"PORT must be an integer, got {environ.get('PORT')!r}") from e

        raw_timeout = environ.get("RELAY_PROVIDER_TIMEOUT") or DEFAULT_PROVIDER_TIMEOUT
        try:
            timeout = float(raw_timeout)
        except ValueError as e:
            raise ConfigError(f"RELAY_PROVIDER_TIMEOUT must be a number, got {raw_timeout!r}") from e

        return cls.validated(
            api_key=environ.get("GEMINI_API_KEY") or None,
            host=environ.get("HOST") or DEFAULT_HOST,
            port=port,
            provider_timeout=timeout,
            log_level=(environ.get("RELAY_LOG_LEVEL") or DEFAULT_LOG_LEVEL).lower(),
        )

    @classmethod
    def validated(cls, **values: Any) -> "RelaySettings":
        """Build settings, reporting invalid values as ConfigError."""
        try:
            return cls.model_validate(values)
        except ValidationError as e:
            problems = "; ".join(
                f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}" for err in e.errors()
            )
            raise ConfigError(f"Invalid relay settings: {problems}") from e

    def with_overrides(self, **overrides: Any) -> "RelaySettings":
        """Return a copy with the non-None overrides applied and validated.

        Raises:
            ConfigError: If an override is out of range or unknown
        """
        values = {key: value for key, value in overrides.items() if value is not None}
        if not values:
            return self
        return self.validated(**{**self.model_dump(), **values})
