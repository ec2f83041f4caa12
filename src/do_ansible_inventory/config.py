"""Configuration management for the DigitalOcean inventory."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import ConfigurationError

TOKEN_ENV_VAR = "DO_TOKEN"
TOKEN_DESCRIPTION = "The Digital Ocean token API access key"


class Settings(BaseSettings):
    """Centralised runtime configuration, read from ``DO_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="DO_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        validate_assignment=True,
    )

    # API
    token: Optional[str] = Field(default=None, description=TOKEN_DESCRIPTION)
    api_url: str = Field(default="https://api.digitalocean.com/v2")
    per_page: int = Field(
        default=200,
        ge=1,
        le=200,
        description="Droplets requested in the single /droplets call.",
    )
    timeout: float = Field(default=30.0, gt=0, description="HTTP timeout in seconds.")

    # Inventory
    group_prefix: str = Field(
        default="do_",
        description="Prefix keeping generated group names clear of Ansible reserved names.",
    )

    # Logging
    log_level: str = Field(default="WARNING")

    @field_validator("api_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("group_prefix")
    @classmethod
    def _non_empty_prefix(cls, value: str) -> str:
        if not value:
            raise ValueError("group prefix must not be empty")
        return value

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        value = value.upper()
        if not isinstance(logging.getLevelName(value), int):
            raise ValueError(f"unknown log level: {value}")
        return value

    def require_token(self) -> str:
        """Return the API token or fail before any request is made."""
        if not self.token:
            raise ConfigurationError(
                f"{TOKEN_ENV_VAR} environment variable is missing, {TOKEN_DESCRIPTION}"
            )
        return self.token


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings instance."""
    try:
        return Settings()
    except ValidationError as exc:
        raise ConfigurationError(f"invalid configuration: {exc}") from exc
