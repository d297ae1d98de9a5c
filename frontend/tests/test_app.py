import json
import unittest
from unittest.mock import MagicMock

import requests
from fastapi.testclient import TestClient

from frontend.app import create_app
from frontend.client import BackendClient, FetchError
from frontend.routes import get_backend_client
from frontend.tests.test_client import make_response
from frontend.view import DataView, format_data, load_view, render_page

ENVELOPE = {
    "message": "Hello from Backend!",
    "db_time": "2026-10-19T12:00:00.123456Z",
    "minio_buckets": [{"name": "uploads", "creationDate": "2024-05-01T10:00:00Z"}],
    "minio_error": None,
}


class DisplayPageTests(unittest.TestCase):
    def setUp(self):
        self.session = MagicMock(spec=requests.Session)
        backend = BackendClient(base_url="http://backend.test", session=self.session)
        self.app = create_app()
        self.app.dependency_overrides[get_backend_client] = lambda: backend
        self.client = TestClient(self.app)

    def test_renders_json_in_pre(self):
        self.session.get.return_value = make_response(200, ENVELOPE)

        response = self.client.get("/")

        self.assertEqual(response.status_code, 200)
        self.assertIn("text/html", response.headers["content-type"])
        self.assertIn(f"<pre>{json.dumps(ENVELOPE, indent=2)}</pre>", response.text)
        self.assertNotIn('class="error"', response.text)

    def test_failed_fetch_keeps_initial_state(self):
        self.session.get.side_effect = requests.ConnectionError("refused")

        with self.assertLogs("frontend.view", level="WARNING"):
            response = self.client.get("/")

        self.assertEqual(response.status_code, 200)
        self.assertIn("<pre>null</pre>", response.text)
        self.assertIn('class="error"', response.text)

    def test_backend_500_shows_error_message(self):
        self.session.get.return_value = make_response(
            500, {"error": "database is down"}, reason="Internal Server Error"
        )

        with self.assertLogs("frontend.view", level="WARNING"):
            response = self.client.get("/")

        self.assertIn("<pre>null</pre>", response.text)
        self.assertIn("Failed to load data: database is down", response.text)

    def test_storage_error_is_flagged(self):
        degraded = dict(
            ENVELOPE,
            minio_buckets=[{"name": "Error connecting to MinIO", "error": "timeout"}],
            minio_error="timeout",
        )
        self.session.get.return_value = make_response(200, degraded)

        response = self.client.get("/")

        self.assertIn("Object storage unavailable: timeout", response.text)
        self.assertIn(f"<pre>{json.dumps(degraded, indent=2)}</pre>", response.text)


class ViewTests(unittest.TestCase):
    def test_load_view_success(self):
        client = MagicMock(spec=BackendClient)
        client.fetch_data.return_value = ENVELOPE
        view = load_view(client)
        self.assertEqual(view, DataView(data=ENVELOPE, error=None))

    def test_load_view_failure(self):
        client = MagicMock(spec=BackendClient)
        client.fetch_data.side_effect = FetchError("boom")
        with self.assertLogs("frontend.view", level="WARNING"):
            view = load_view(client)
        self.assertIsNone(view.data)
        self.assertEqual(view.error, "boom")

    def test_format_matches_js_stringify(self):
        self.assertEqual(format_data(None), "null")
        self.assertEqual(format_data({"a": [1, 2]}), '{\n  "a": [\n    1,\n    2\n  ]\n}')

    def test_render_escapes_markup(self):
        page = render_page(DataView(data={"name": "<b>&"}), title="<app>")
        self.assertIn("<h1>&lt;app&gt;</h1>", page)
        self.assertIn('"name": "&lt;b&gt;&amp;"', page)


if __name__ == "__main__":
    unittest.main()
