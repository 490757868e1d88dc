"""HTTP server that reports the collected status of every service."""

from __future__ import annotations

import json
import logging
import re
from http import HTTPStatus
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from urllib.parse import urlsplit

from spsmonitor.config import Settings
from spsmonitor.net import FetchError
from spsmonitor.result import ResultSet, collect_results

logger = logging.getLogger(__name__)

_TIMEOUT = 10
_ESCAPES = (("<", "\\u003c"), (">", "\\u003e"), ("&", "\\u0026"),
            ("\u2028", "\\u2028"), ("\u2029", "\\u2029"))
_SURROGATE_RE = re.compile("[\ud800-\udfff]")


def _encode(document: dict) -> bytes:
    text = json.dumps(document, ensure_ascii=False, separators=(",", ":"), allow_nan=False)
    for char, escape in _ESCAPES:
        text = text.replace(char, escape)
    return _SURROGATE_RE.sub(r"\\ufffd", text).encode("utf-8")


def build_response(settings: Settings) -> tuple[int, bytes]:
    """Collect the results and return the HTTP status and JSON body."""
    try:
        data = collect_results(f"http://{settings.simulator_url()}", settings.data_path)
    except (OSError, FetchError) as exc:
        document = {"status": False, "data": ResultSet().to_dict(), "error": str(exc)}
    else:
        document = {"status": True, "data": data.to_dict(), "error": ""}
    try:
        body = _encode(document)
    except ValueError:
        return int(HTTPStatus.INTERNAL_SERVER_ERROR), b""
    return int(HTTPStatus.OK), body


class StatusRequestHandler(BaseHTTPRequestHandler):
    """Serves the status report at the root path."""

    timeout = _TIMEOUT

    def _send(self, status: int, body: bytes) -> None:
        self.send_response(status)
        self.send_header("Content-Type", "text/plain; charset=utf-8")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        if self.command != "HEAD":
            self.wfile.write(body)

    def _is_root(self) -> bool:
        return urlsplit(self.path).path == "/"

    def do_GET(self) -> None:
        if not self._is_root():
            self._send(HTTPStatus.NOT_FOUND, b"404 page not found\n")
            return
        self._send(*build_response(self.server.settings))

    def _reject(self) -> None:
        if self._is_root():
            self._send(HTTPStatus.METHOD_NOT_ALLOWED, b"")
        else:
            self._send(HTTPStatus.NOT_FOUND, b"404 page not found\n")

    do_HEAD = do_POST = do_PUT = do_PATCH = do_DELETE = do_OPTIONS = _reject

    def log_message(self, format: str, *args) -> None:
        logger.info("%s - %s", self.address_string(), format % args)


def make_server(host: str, port: int | str, settings: Settings) -> ThreadingHTTPServer:
    """Bind a status server; an empty port picks a free one."""
    server = ThreadingHTTPServer((host, int(port) if port != "" else 0), StatusRequestHandler)
    server.settings = settings
    return server


def run_server(host: str, port: int | str, settings: Settings) -> None:
    """Serve the status report until interrupted; exit with status 1 if binding fails."""
    logger.info("Start server")
    try:
        server = make_server(host, port, settings)
    except (OSError, ValueError) as exc:
        logger.critical("%s", exc)
        raise SystemExit(1) from exc
    with server:
        server.serve_forever()