"""
Configuration and settings for the display client.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class FrontendSettings(BaseSettings):
    """Environment-backed settings for the display client."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
    )

    backend_url: str = Field(default="http://localhost:3000")
    component_id: str = Field(default="3-tier-app")

    frontend_host: str = Field(default="0.0.0.0")
    frontend_port: int = Field(default=5173)
    frontend_request_timeout: float = Field(default=30.0)


@lru_cache(maxsize=1)
def get_settings() -> FrontendSettings:
    """Return cached settings instance."""
    return FrontendSettings()
