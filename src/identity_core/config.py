"""Package configuration using pydantic-settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class IdentitySettings(BaseSettings):
    """
    Runtime settings for identity-core.

    Settings can be configured via environment variables with the
    IDENTITY_CORE_ prefix, e.g. ``IDENTITY_CORE_LOG_LEVEL=DEBUG``.
    """

    model_config = SettingsConfigDict(
        env_prefix="IDENTITY_CORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = Field(default="INFO", description="Minimum level for emitted log events")
    log_json: bool = Field(default=False, description="Render log events as JSON lines")


@lru_cache
def get_settings() -> IdentitySettings:
    """Get the process-wide settings instance."""
    return IdentitySettings()
