"""
Object storage access for MinIO (S3-compatible) and in-memory testing.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional, Protocol

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

logger = logging.getLogger(__name__)

ERROR_PLACEHOLDER_NAME = "Error connecting to MinIO"


@dataclass
class BucketListing:
    """
    Result of a bucket-listing call: either the buckets, or the error message.
    """

    buckets: list[dict] = field(default_factory=list)
    error: Optional[str] = None

    @classmethod
    def success(cls, buckets: list[dict]) -> "BucketListing":
        return cls(buckets=list(buckets))

    @classmethod
    def failure(cls, error: str) -> "BucketListing":
        return cls(buckets=[], error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def as_wire(self) -> list[dict]:
        """
        Bucket list as sent to clients. A failed listing becomes a single
        placeholder entry so older clients reading only ``minio_buckets``
        still see what went wrong.
        """
        if self.ok:
            return list(self.buckets)
        return [{"name": ERROR_PLACEHOLDER_NAME, "error": self.error}]


class StorageClient(Protocol):
    """Defines the operations the API needs from object storage."""

    def list_buckets(self) -> BucketListing:
        ...


@dataclass
class InMemoryStorageClient:
    """Test double for storage interactions."""

    buckets: Optional[list] = None
    error: Optional[str] = None

    def __post_init__(self):
        if self.buckets is None:
            self.buckets = []

    def list_buckets(self) -> BucketListing:
        if self.error is not None:
            logger.warning("Could not list MinIO buckets: %s", self.error)
            return BucketListing.failure(self.error)
        return BucketListing.success(self.buckets)


@dataclass
class MinioStorageClient:
    """
    S3-compatible storage client pointed at a MinIO server.
    """

    endpoint: str
    port: int
    use_ssl: bool
    access_key: str
    secret_key: str
    region: str = "us-east-1"

    def __post_init__(self):
        # MinIO serves buckets under the path, not as virtual hosts.
        config = Config(
            s3={"addressing_style": "path"},
            signature_version="s3v4",
        )
        self._client = boto3.client(
            "s3",
            endpoint_url=self.endpoint_url,
            region_name=self.region,
            aws_access_key_id=self.access_key,
            aws_secret_access_key=self.secret_key,
            config=config,
        )

    @property
    def endpoint_url(self) -> str:
        scheme = "https" if self.use_ssl else "http"
        return f"{scheme}://{self.endpoint}:{self.port}"

    def list_buckets(self) -> BucketListing:
        try:
            response = self._client.list_buckets()
        except (BotoCoreError, ClientError) as exc:
            logger.warning("Could not list MinIO buckets: %s", exc)
            return BucketListing.failure(str(exc))
        return BucketListing.success(
            [_to_bucket_info(bucket) for bucket in response.get("Buckets", [])]
        )


def _to_bucket_info(bucket: dict) -> dict:
    info = {
        "name": bucket.get("Name"),
        "creationDate": bucket.get("CreationDate"),
    }
    # Pass through anything else the server reports (e.g. BucketRegion).
    for key, value in bucket.items():
        if key not in ("Name", "CreationDate"):
            info[key[:1].lower() + key[1:]] = value
    return info
