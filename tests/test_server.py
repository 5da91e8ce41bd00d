"""
End-to-end tests for the HTTP server on an ephemeral local port.
"""
import json
import threading
import unittest
import urllib.error
import urllib.request

from x2colon.services.server import create_server


class TestServer(unittest.TestCase):
    def setUp(self):
        self.server = create_server('127.0.0.1', 0, {'allow_origin': 'https://example.com'})
        self.thread = threading.Thread(target=self.server.serve_forever, daemon=True)
        self.thread.start()
        host, port = self.server.server_address[:2]
        self.base = f"http://{host}:{port}"

    def tearDown(self):
        self.server.shutdown()
        self.server.server_close()
        self.thread.join(timeout=5)

    def _request(self, method, path, payload=None):
        data = json.dumps(payload).encode('utf-8') if payload is not None else None
        request = urllib.request.Request(self.base + path, data=data, method=method,
                                         headers={'Content-Type': 'application/json'})
        try:
            with urllib.request.urlopen(request, timeout=5) as response:
                body = response.read()
                return response.status, response.headers, body
        except urllib.error.HTTPError as e:
            return e.code, e.headers, e.read()

    def test_hello(self):
        status, headers, body = self._request('GET', '/')
        self.assertEqual(status, 200)
        self.assertEqual(json.loads(body), {"message": "Welcome to x2-colon!"})
        self.assertEqual(headers['Access-Control-Allow-Origin'], 'https://example.com')
        self.assertEqual(headers['Access-Control-Allow-Methods'], '*')

    def test_timestamp(self):
        status, _, body = self._request('POST', '/timestamp', {"content": "(0:00-1:23)"})
        self.assertEqual(status, 200)
        self.assertEqual(json.loads(body)["total"], {"seconds": 83, "format": "1:23"})

    def test_timestamp_error(self):
        status, _, body = self._request('POST', '/timestamp', {"content": "plain text"})
        self.assertEqual(status, 400)
        self.assertEqual(json.loads(body), {"error": "No valid timestamps found"})

    def test_clean(self):
        status, _, body = self._request('POST', '/clean', {"script": "pre(0:00-0:10)post"})
        self.assertEqual(status, 200)
        self.assertEqual(json.loads(body), {"cleaned": "pre post"})

    def test_unknown_route(self):
        status, _, body = self._request('POST', '/nope', {"script": "x"})
        self.assertEqual(status, 404)
        status, _, _ = self._request('GET', '/nope')
        self.assertEqual(status, 404)

    def test_preflight(self):
        status, headers, _ = self._request('OPTIONS', '/timestamp')
        self.assertEqual(status, 204)
        self.assertEqual(headers['Access-Control-Allow-Origin'], 'https://example.com')


if __name__ == "__main__":
    unittest.main()
