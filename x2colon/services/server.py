"""Minimal HTTP front end for the request handlers.

Uses the standard library server; every response is JSON and carries the
CORS headers from the configuration.
"""
from __future__ import annotations

import json
import logging
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Any, Dict, Optional

from . import api

logger = logging.getLogger(__name__)

DEFAULT_CORS = {
    'allow_origin': '*',
    'allow_methods': '*',
    'allow_headers': '*',
}

POST_ROUTES = {
    '/timestamp': api.handle_timestamp,
    '/clean': api.handle_clean,
}


class RequestHandler(BaseHTTPRequestHandler):
    """Routes requests to ``services.api``; CORS settings come from the server."""

    server_version = "x2colon"

    def _cors_headers(self) -> None:
        cors = getattr(self.server, 'cors', None) or DEFAULT_CORS
        self.send_header('Access-Control-Allow-Origin', cors.get('allow_origin', '*'))
        self.send_header('Access-Control-Allow-Methods', cors.get('allow_methods', '*'))
        self.send_header('Access-Control-Allow-Headers', cors.get('allow_headers', '*'))

    def _send_json(self, status: int, body: Dict[str, Any]) -> None:
        data = json.dumps(body).encode('utf-8')
        self.send_response(status)
        self.send_header('Content-Type', 'application/json')
        self.send_header('Content-Length', str(len(data)))
        self._cors_headers()
        self.end_headers()
        self.wfile.write(data)
        logger.info("%s %s -> %d", self.command, self.path, status)

    def _read_body(self) -> bytes:
        try:
            length = int(self.headers.get('Content-Length') or 0)
        except ValueError:
            length = 0
        return self.rfile.read(length) if length > 0 else b''

    def do_GET(self):
        if self.path == '/':
            self._send_json(*api.handle_hello())
        else:
            self._send_json(404, {'error': 'Not found'})

    def do_POST(self):
        handler = POST_ROUTES.get(self.path)
        body = self._read_body()
        if handler is None:
            self._send_json(404, {'error': 'Not found'})
            return
        self._send_json(*handler(body))

    def do_OPTIONS(self):
        self.send_response(204)
        self._cors_headers()
        self.send_header('Content-Length', '0')
        self.end_headers()

    def log_message(self, format, *args):
        # Request lines are logged by _send_json instead of stderr
        logger.debug(format, *args)


def create_server(host: str = '127.0.0.1', port: int = 3000,
                  cors: Optional[Dict[str, str]] = None) -> ThreadingHTTPServer:
    """Build (but do not start) a server bound to ``host:port``."""
    server = ThreadingHTTPServer((host, port), RequestHandler)
    server.cors = dict(DEFAULT_CORS, **(cors or {}))
    return server


def serve(host: str = '127.0.0.1', port: int = 3000,
          cors: Optional[Dict[str, str]] = None) -> None:
    """Run the HTTP server until interrupted."""
    server = create_server(host, port, cors)
    logger.info("Listening on http://%s:%d", *server.server_address[:2])
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        logger.info("Shutting down")
    finally:
        server.server_close()
