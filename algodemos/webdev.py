"""A tiny HTTP server that echoes the requested path."""

from __future__ import annotations

import logging
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from urllib.parse import unquote, urlsplit

log = logging.getLogger(__name__)


def greeting(path: str) -> str:
    """Return the response body for a request path."""
    return f"Hello, you've hit {path}\n"


class HelloHandler(BaseHTTPRequestHandler):
    """Answer every request with a greeting naming its path."""

    def _respond(self, include_body: bool = True) -> None:
        path = unquote(urlsplit(self.path).path)
        body = greeting(path).encode("utf-8")
        self.send_response(200)
        self.send_header("Content-Type", "text/plain; charset=utf-8")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        if include_body:
            self.wfile.write(body)

    def do_GET(self) -> None:  # noqa: N802
        self._respond()

    def do_POST(self) -> None:  # noqa: N802
        self._respond()

    def do_PUT(self) -> None:  # noqa: N802
        self._respond()

    def do_DELETE(self) -> None:  # noqa: N802
        self._respond()

    def do_PATCH(self) -> None:  # noqa: N802
        self._respond()

    def do_HEAD(self) -> None:  # noqa: N802
        self._respond(include_body=False)

    def log_message(self, format: str, *args) -> None:  # noqa: A002
        """Send request logs to the module logger instead of stderr."""
        log.debug("%s - %s", self.address_string(), format % args)


def make_server(host: str = "", port: int = 8080) -> ThreadingHTTPServer:
    """Create a server bound to host and port using HelloHandler."""
    return ThreadingHTTPServer((host, port), HelloHandler)


def serve(host: str = "", port: int = 8080) -> None:
    """Run the server until interrupted; exit with status 1 if it fails."""
    print(f"Starting server at http://localhost:{port}")
    try:
        with make_server(host, port) as server:
            server.serve_forever()
    except OSError as err:
        log.critical("%s", err)
        raise SystemExit(1) from err