"""
FastAPI application entry point for the display client.
"""

from __future__ import annotations

import logging

import uvicorn
from fastapi import FastAPI

from frontend.config import get_settings
from frontend.routes import router

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    app = FastAPI(title="Three-Tier App Frontend", version="0.1.0")
    app.include_router(router)
    return app


app = create_app()


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    settings = get_settings()
    logger.info(
        "Frontend listening on port %s (backend at %s)",
        settings.frontend_port,
        settings.backend_url,
    )
    uvicorn.run(app, host=settings.frontend_host, port=settings.frontend_port)


if __name__ == "__main__":
    main()
