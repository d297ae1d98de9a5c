"""
FastAPI application entry point for the backend.
"""

from __future__ import annotations

import logging

import uvicorn
from fastapi import FastAPI

from backend.config import get_settings
from backend.routes import router

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(title="Three-Tier App Backend", version="0.1.0")
    app.include_router(router, prefix=settings.api_prefix)
    return app


app = create_app()


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    settings = get_settings()
    logger.info("Backend listening on port %s", settings.backend_port)
    uvicorn.run(app, host=settings.backend_host, port=settings.backend_port)


if __name__ == "__main__":
    main()
