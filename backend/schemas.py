"""
Pydantic schemas for the backend API.
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class ErrorPlaceholder(BaseModel):
    """Stand-in entry for ``minio_buckets`` when listing failed."""

    model_config = ConfigDict(extra="forbid")

    name: str
    error: str


class BucketInfo(BaseModel):
    model_config = ConfigDict(extra="allow")

    name: str
    creationDate: Optional[datetime] = None


class DataResponse(BaseModel):
    message: str
    db_time: datetime
    minio_buckets: list[
        Annotated[
            Union[ErrorPlaceholder, BucketInfo], Field(union_mode="left_to_right")
        ]
    ] = Field(default_factory=list)
    minio_error: Optional[str] = None


class ErrorResponse(BaseModel):
    error: str
