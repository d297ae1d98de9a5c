"""
HTTP routes for the display client.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from frontend.client import BackendClient
from frontend.config import get_settings
from frontend.view import load_view, render_page

router = APIRouter()

_backend_client: BackendClient | None = None


def get_backend_client() -> BackendClient:
    """
    Return a singleton backend client so the HTTP session is reused.
    """
    global _backend_client
    if _backend_client:
        return _backend_client

    settings = get_settings()
    _backend_client = BackendClient(
        base_url=settings.backend_url,
        timeout=settings.frontend_request_timeout,
    )
    return _backend_client


@router.get("/", response_class=HTMLResponse)
def index(client: BackendClient = Depends(get_backend_client)):
    view = load_view(client)
    return HTMLResponse(render_page(view, title=get_settings().component_id))
