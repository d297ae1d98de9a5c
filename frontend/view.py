"""
View state and HTML rendering for the display page.
"""

from __future__ import annotations

import html
import json
import logging
from dataclasses import dataclass
from typing import Optional

from frontend.client import BackendClient, FetchError

logger = logging.getLogger(__name__)

PAGE_TEMPLATE = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="UTF-8" />
    <title>{title}</title>
  </head>
  <body>
    <h1>{title}</h1>
    <div class="card">
      <h2>Data from Backend:</h2>
{notices}      <pre>{data}</pre>
    </div>
  </body>
</html>
"""


@dataclass
class DataView:
    """What the page shows. Starts empty; holds either data or an error."""

    data: Optional[dict] = None
    error: Optional[str] = None


def load_view(client: BackendClient) -> DataView:
    view = DataView()
    try:
        view.data = client.fetch_data()
    except FetchError as exc:
        logger.warning("Could not load backend data: %s", exc)
        view.error = str(exc)
    return view


def format_data(data: Optional[dict]) -> str:
    """Pretty-print like ``JSON.stringify(data, null, 2)``."""
    return json.dumps(data, indent=2, ensure_ascii=False)


def _notice(css_class: str, text: str) -> str:
    return f'      <p class="{css_class}">{html.escape(text)}</p>\n'


def render_page(view: DataView, title: str) -> str:
    notices = ""
    if view.error:
        notices += _notice("error", f"Failed to load data: {view.error}")
    storage_error = (view.data or {}).get("minio_error")
    if storage_error:
        notices += _notice("warning", f"Object storage unavailable: {storage_error}")
    return PAGE_TEMPLATE.format(
        title=html.escape(title),
        notices=notices,
        data=html.escape(format_data(view.data), quote=False),
    )
