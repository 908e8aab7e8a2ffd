"""Configuration for Civitai MCP server.

Settings are read from environment variables with the ``CIVITAI_MCP_``
prefix or from a ``.env`` file. The API key is also accepted from the
``CIVITAI_API_KEY`` variable used by other Civitai tooling.
"""

from __future__ import annotations

from enum import Enum
from functools import lru_cache
from typing import Any

from pydantic import AliasChoices, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from civitai_mcp.utils.errors import ConfigurationError

DEFAULT_BASE_URL = "https://civitai.com/api/v1"


class TransportMode(str, Enum):
    """MCP transport used to serve tools."""

    STDIO = "stdio"
    SSE = "sse"
    STREAMABLE_HTTP = "streamable-http"


class LogLevel(str, Enum):
    """Logging level for the server process."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class CivitaiConfig(BaseSettings):
    """Configuration for the Civitai MCP server."""

    model_config = SettingsConfigDict(
        env_prefix="CIVITAI_MCP_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # Civitai API settings
    api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("CIVITAI_MCP_API_KEY", "CIVITAI_API_KEY"),
        description="Civitai API token; requests are unauthenticated when unset",
    )
    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        description="Base URL of the Civitai REST API",
    )
    timeout: float = Field(
        default=30.0,
        gt=0,
        description="HTTP timeout in seconds for a single API call",
    )

    # Server settings
    transport: TransportMode = Field(
        default=TransportMode.STDIO,
        description="MCP transport mode",
    )
    host: str = Field(
        default="127.0.0.1",
        description="Host to bind HTTP transports to",
    )
    port: int = Field(
        default=8000,
        ge=1,
        le=65535,
        description="Port to bind HTTP transports to",
    )
    log_level: LogLevel = Field(
        default=LogLevel.INFO,
        description="Logging level",
    )

    @field_validator("api_key")
    @classmethod
    def _blank_key_is_unset(cls, value: str | None) -> str | None:
        if value is not None and not value.strip():
            return None
        return value

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @property
    def is_authenticated(self) -> bool:
        """Whether API calls carry an API token."""
        return self.api_key is not None


@lru_cache
def get_config() -> CivitaiConfig:
    """Get the process-wide configuration loaded from the environment."""
    return CivitaiConfig()


def load_config(**overrides: Any) -> CivitaiConfig:
    """Build configuration from the environment with explicit overrides.

    Raises:
        ConfigurationError: If a setting fails validation.
    """
    try:
        return CivitaiConfig(**overrides)
    except ValidationError as e:
        raise ConfigurationError(str(e)) from e
