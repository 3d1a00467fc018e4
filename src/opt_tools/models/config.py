"""Client configuration.

ClientConfig is supplied once when a client is constructed and is not
revisited for the lifetime of the process.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from opt_tools.exceptions import ConfigError

DEFAULT_SERVER_URL = "https://api.opt-tools.com"

_ENV_SERVER_URL = "OPT_TOOLS_SERVER_URL"
_ENV_API_KEY = "OPT_TOOLS_API_KEY"
_ENV_TIMEOUT_MS = "OPT_TOOLS_TIMEOUT_MS"
_ENV_RETRIES = "OPT_TOOLS_RETRIES"
_ENV_DEBUG = "OPT_TOOLS_DEBUG"

_TRUTHY = {"1", "true", "yes", "on"}


class ClientConfig(BaseModel):
    """Connection settings for OptimizationClient.

    Attributes:
        server_url: Base URL of the optimization API (e.g. "https://api.opt-tools.com").
        api_key: API key sent in the ``X-API-Key`` header.
        timeout_ms: Per-request timeout in milliseconds.
        retries: Number of retries after the first attempt.
        debug: Log every request and response.
        backoff_factor: First backoff delay in seconds; doubles per retry.
    """

    model_config = ConfigDict(frozen=True)

    server_url: str
    api_key: str
    timeout_ms: int = Field(default=30000, gt=0)
    retries: int = Field(default=3, ge=0)
    debug: bool = False
    backoff_factor: float = Field(default=0.1, ge=0)

    @field_validator("server_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        value = value.rstrip("/")
        if not value:
            raise ValueError("server_url must not be empty")
        return value

    @field_validator("api_key")
    @classmethod
    def _require_api_key(cls, value: str) -> str:
        if not value:
            raise ValueError("api_key must not be empty")
        return value

    @property
    def timeout_seconds(self) -> float:
        return self.timeout_ms / 1000

    @classmethod
    def from_env(
        cls, *, defaults: Mapping[str, Any] | None = None, **overrides: Any
    ) -> ClientConfig:
        """Build a config from OPT_TOOLS_* environment variables.

        Precedence, lowest first: ``defaults``, the environment, then keyword
        arguments that are not None.

        Raises:
            ConfigError: If no API key is available or a value is invalid.
        """
        values: dict[str, Any] = dict(defaults or {})
        values.update({
            "server_url": os.environ.get(_ENV_SERVER_URL, DEFAULT_SERVER_URL),
            "api_key": os.environ.get(_ENV_API_KEY, ""),
        })
        if _ENV_TIMEOUT_MS in os.environ:
            values["timeout_ms"] = os.environ[_ENV_TIMEOUT_MS]
        if _ENV_RETRIES in os.environ:
            values["retries"] = os.environ[_ENV_RETRIES]
        if _ENV_DEBUG in os.environ:
            values["debug"] = os.environ[_ENV_DEBUG].strip().lower() in _TRUTHY
        values.update({k: v for k, v in overrides.items() if v is not None})

        if not values["api_key"]:
            raise ConfigError(
                f"No API key provided. Pass api_key= or set {_ENV_API_KEY} "
                "environment variable."
            )
        try:
            return cls(**values)
        except ValidationError as exc:
            raise ConfigError(f"Invalid client configuration: {exc}") from exc
