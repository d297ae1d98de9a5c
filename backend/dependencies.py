"""
Dependency wiring for the FastAPI app.
"""

from __future__ import annotations

from backend.config import get_settings
from backend.db import DbClient, InMemoryDbClient, PostgresDbClient
from backend.storage import InMemoryStorageClient, MinioStorageClient, StorageClient

_db_client: DbClient | None = None
_storage_client: StorageClient | None = None


def get_db_client() -> DbClient:
    """
    Return a singleton DB client so the connection pool is shared across requests.
    """
    global _db_client
    if _db_client:
        return _db_client

    settings = get_settings()
    if settings.use_in_memory_backends:
        _db_client = InMemoryDbClient()
    else:
        _db_client = PostgresDbClient(settings.sqlalchemy_url)
    return _db_client


def get_storage_client() -> StorageClient:
    global _storage_client
    if _storage_client:
        return _storage_client

    settings = get_settings()
    if settings.use_in_memory_backends:
        _storage_client = InMemoryStorageClient()
    else:
        _storage_client = MinioStorageClient(
            endpoint=settings.minio_endpoint,
            port=settings.minio_port,
            use_ssl=settings.minio_use_ssl,
            access_key=settings.minio_access_key,
            secret_key=settings.minio_secret_key,
            region=settings.minio_region,
        )
    return _storage_client


def reset_clients() -> None:
    """Drop the cached clients (useful in tests)."""
    global _db_client, _storage_client
    _db_client = None
    _storage_client = None
