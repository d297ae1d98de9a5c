"""
Configuration and settings for the backend service.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    """Environment-backed settings for the FastAPI service."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
    )

    api_prefix: str = Field(default="/api")

    # Database (Postgres expected). DATABASE_URL wins over the DB_* parts.
    database_url: Optional[str] = Field(default=None)
    db_user: str = Field(default="postgres")
    db_host: str = Field(default="localhost")
    db_name: str = Field(default="postgres")
    db_password: str = Field(default="password")
    db_port: int = Field(default=5432)

    # MinIO (S3-compatible storage)
    minio_endpoint: str = Field(default="localhost")
    minio_port: int = Field(default=9000)
    minio_use_ssl: bool = Field(default=False)
    minio_access_key: str = Field(default="minioadmin")
    minio_secret_key: str = Field(default="minioadmin")
    minio_region: str = Field(default="us-east-1")

    # HTTP server
    backend_host: str = Field(default="0.0.0.0")
    backend_port: int = Field(default=3000)

    # Development toggles
    use_in_memory_backends: bool = Field(default=False)

    @property
    def sqlalchemy_url(self) -> str:
        if self.database_url:
            return self.database_url
        url = URL.create(
            "postgresql+psycopg2",
            username=self.db_user,
            password=self.db_password,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
        )
        return url.render_as_string(hide_password=False)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()
