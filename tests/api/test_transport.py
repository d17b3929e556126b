#!/usr/bin/env python3
"""Tests for the HTTP transport: headers, URL building, deadlines and the error channel."""

import threading
import time
import unittest
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from unittest.mock import patch

import httpx

from contentgem import ContentGemClient
from contentgem.api import TransportError
from contentgem.api.transport import Transport
from contentgem.models import ClientConfig
from tests.helpers.mock_api import API_KEY, BASE_URL, MockApi


class TestTransportRequests(unittest.TestCase):
    def setUp(self):
        self.api = MockApi()
        self.transport = Transport(
            ClientConfig.create(API_KEY, base_url=BASE_URL, timeout=5),
            transport=self.api.transport,
        )

    def tearDown(self):
        self.transport.close()

    def test_appends_endpoint_to_base_url(self):
        self.api.queue({"success": True})
        self.transport.request("GET", "/health")
        self.assertEqual(str(self.api.last_request.url), f"{BASE_URL}/health")
        self.assertEqual(self.api.last_request.method, "GET")

    def test_sends_default_headers(self):
        self.api.queue({"success": True})
        self.transport.request("GET", "/health")
        headers = self.api.last_request.headers
        self.assertEqual(headers["X-API-Key"], API_KEY)
        self.assertEqual(headers["Content-Type"], "application/json")

    def test_caller_headers_override_defaults(self):
        self.api.queue({"success": True})
        self.transport.request("GET", "/health", headers={"X-API-Key": "other", "X-Trace": "abc"})
        headers = self.api.last_request.headers
        self.assertEqual(headers["X-API-Key"], "other")
        self.assertEqual(headers["X-Trace"], "abc")
        self.assertEqual(headers["Content-Type"], "application/json")

    def test_json_body_sent_unchanged(self):
        body = {"prompt": "Write about AI", "keywords": ["ai", "ml"], "company_info": {"name": "Acme"}}
        self.api.queue({"success": True})
        self.transport.request("POST", "/publications/generate", json_body=body)
        self.assertEqual(self.api.json_body(), body)

    def test_none_query_params_are_dropped(self):
        self.api.queue({"success": True})
        self.transport.request("GET", "/images", params={"page": 2, "limit": 5, "search": None})
        self.assertEqual(str(self.api.last_request.url), f"{BASE_URL}/images?page=2&limit=5")

    def test_success_returns_body_verbatim(self):
        payload = {"success": True, "data": {"anything": [1, 2, {"nested": None}]}}
        self.api.queue(payload)
        self.assertEqual(self.transport.request("GET", "/statistics/images"), payload)

    def test_request_timeout_bounded_by_configured_timeout(self):
        self.api.queue({"success": True})
        self.transport.request("GET", "/health")
        timeout = self.api.last_request.extensions["timeout"]
        for phase in ("connect", "read", "write", "pool"):
            self.assertGreater(timeout[phase], 0)
            self.assertLessEqual(timeout[phase], 5.0)


class TestTransportErrors(unittest.TestCase):
    def setUp(self):
        self.api = MockApi()
        self.transport = Transport(
            ClientConfig.create(API_KEY, base_url=BASE_URL),
            transport=self.api.transport,
        )

    def tearDown(self):
        self.transport.close()

    def test_error_envelope_returned_in_band(self):
        error = {"success": False, "error": "INVALID_PROMPT", "message": "Prompt is too short"}
        self.api.queue(error, status=400)
        result = self.transport.request("POST", "/publications/generate", json_body={"prompt": "AI"})
        self.assertEqual(result, error)

    def test_non_2xx_uses_message_field(self):
        self.api.queue({"message": "Invalid API key"}, status=401)
        with self.assertRaises(TransportError) as cm:
            self.transport.request("GET", "/health")
        self.assertEqual(str(cm.exception), "Request failed: Invalid API key")

    def test_non_2xx_without_json_falls_back_to_status(self):
        self.api.queue_raw(502, b"<html>bad gateway</html>")
        with self.assertRaises(TransportError) as cm:
            self.transport.request("GET", "/health")
        self.assertEqual(str(cm.exception), "Request failed: HTTP 502: Bad Gateway")

    def test_non_2xx_json_without_message_falls_back_to_status(self):
        self.api.queue({"detail": "nope"}, status=500)
        with self.assertRaises(TransportError) as cm:
            self.transport.request("GET", "/health")
        self.assertEqual(str(cm.exception), "Request failed: HTTP 500: Internal Server Error")

    def test_network_error_wrapped(self):
        self.api.queue_error(httpx.ConnectError("Network error"))
        with self.assertRaises(TransportError) as cm:
            self.transport.request("GET", "/health")
        self.assertEqual(str(cm.exception), "Request failed: Network error")
        self.assertIsInstance(cm.exception.__cause__, httpx.ConnectError)

    def test_timeout_wrapped_in_same_channel(self):
        self.api.queue_error(httpx.ReadTimeout("timed out"))
        with self.assertRaises(TransportError) as cm:
            self.transport.request("GET", "/health")
        self.assertTrue(str(cm.exception).startswith("Request failed: "))

    def test_invalid_json_on_success_wrapped(self):
        self.api.queue_raw(200, b"not json")
        with self.assertRaises(TransportError) as cm:
            self.transport.request("GET", "/health")
        self.assertTrue(str(cm.exception).startswith("Request failed: "))


class _TricklingHandler(BaseHTTPRequestHandler):
    """Sends a valid JSON body one byte at a time."""

    body = b'{"success": true, "message": "API is working"}'
    byte_delay = 0.1

    def do_GET(self):
        self.send_response(200)
        self.send_header("Content-Type", "application/json")
        self.send_header("Content-Length", str(len(self.body)))
        self.end_headers()
        try:
            for i in range(len(self.body)):
                self.wfile.write(self.body[i:i + 1])
                self.wfile.flush()
                time.sleep(self.byte_delay)
        except OSError:
            # Client gave up and closed the connection
            return

    def log_message(self, format, *args):
        pass


class TestTransportDeadline(unittest.TestCase):
    """The configured timeout bounds the whole call, not each read."""

    def setUp(self):
        self.server = ThreadingHTTPServer(("127.0.0.1", 0), _TricklingHandler)
        self.thread = threading.Thread(target=self.server.serve_forever, daemon=True)
        self.thread.start()
        self.base_url = f"http://127.0.0.1:{self.server.server_address[1]}/v1"

    def tearDown(self):
        self.server.shutdown()
        self.server.server_close()

    def test_slow_body_fails_at_deadline(self):
        client = ContentGemClient(API_KEY, base_url=self.base_url, timeout=0.5)
        start = time.monotonic()
        try:
            with self.assertRaises(TransportError) as cm:
                client.health_check()
        finally:
            client.close()
        elapsed = time.monotonic() - start

        self.assertTrue(str(cm.exception).startswith("Request failed: "))
        self.assertLess(elapsed, 1.5)

    def test_slow_body_within_deadline_succeeds(self):
        client = ContentGemClient(API_KEY, base_url=self.base_url, timeout=30)
        with patch.object(_TricklingHandler, "byte_delay", 0.001):
            try:
                result = client.health_check()
            finally:
                client.close()

        self.assertEqual(result, {"success": True, "message": "API is working"})


if __name__ == "__main__":
    unittest.main()
