"""
HTTP routes for the backend API.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from backend.db import DbClient
from backend.dependencies import get_db_client, get_storage_client
from backend.schemas import DataResponse, ErrorResponse
from backend.storage import StorageClient

logger = logging.getLogger(__name__)

router = APIRouter()

HELLO_MESSAGE = "Hello from Backend!"


def build_envelope(db: DbClient, storage: StorageClient) -> DataResponse:
    """
    Query the database, then list buckets, and merge both into one response.

    Database errors propagate; storage errors come back as a failed listing.
    """
    db_time = db.now()
    listing = storage.list_buckets()
    return DataResponse(
        message=HELLO_MESSAGE,
        db_time=db_time,
        minio_buckets=listing.as_wire(),
        minio_error=listing.error,
    )


@router.get(
    "/data",
    response_model=DataResponse,
    responses={500: {"model": ErrorResponse}},
)
def get_data(
    db: DbClient = Depends(get_db_client),
    storage: StorageClient = Depends(get_storage_client),
):
    try:
        return build_envelope(db, storage)
    except Exception as exc:
        logger.exception("Failed to build data response: %s", exc)
        return JSONResponse(
            status_code=500, content=ErrorResponse(error=str(exc)).model_dump()
        )
