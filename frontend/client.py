"""
HTTP client for the backend API.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import requests

REQUEST_TIMEOUT = 30  # seconds
DATA_PATH = "/api/data"


class FetchError(Exception):
    """Raised when the backend data could not be loaded."""


@dataclass
class BackendClient:
    base_url: str
    timeout: float = REQUEST_TIMEOUT
    session: Optional[requests.Session] = None

    def __post_init__(self):
        if self.session is None:
            self.session = requests.Session()

    @property
    def data_url(self) -> str:
        return self.base_url.rstrip("/") + DATA_PATH

    def fetch_data(self) -> dict:
        """
        Fetches the backend envelope.

        Returns:
            dict: The decoded JSON body.

        Raises:
            FetchError: If the backend is unreachable, answers with an error
                status, or sends a body that is not JSON.
        """
        try:
            response = self.session.get(self.data_url, timeout=self.timeout)
        except requests.RequestException as exc:
            raise FetchError(f"Could not reach backend: {exc}") from exc

        if not response.ok:
            raise FetchError(_error_message(response))

        try:
            return response.json()
        except ValueError as exc:
            raise FetchError(f"Backend returned invalid JSON: {exc}") from exc


def _error_message(response: requests.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get("error"):
        return str(body["error"])
    return f"Backend responded with {response.status_code} {response.reason}"
