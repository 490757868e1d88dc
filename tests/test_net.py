import socket
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest

from spsmonitor.net import FetchError, fetch_json


@pytest.fixture
def serve():
    servers = []

    def start(routes):
        class Handler(BaseHTTPRequestHandler):
            def do_GET(self):
                status, body = routes.get(self.path, (404, b""))
                self.send_response(status)
                self.send_header("Content-Length", str(len(body)))
                self.end_headers()
                self.wfile.write(body)

            def log_message(self, *args):
                pass

        server = ThreadingHTTPServer(("127.0.0.1", 0), Handler)
        threading.Thread(target=server.serve_forever, daemon=True).start()
        servers.append(server)
        return f"http://127.0.0.1:{server.server_port}"

    yield start
    for server in servers:
        server.shutdown()
        server.server_close()


def test_fetch_json_decodes_body(serve):
    base = serve({"/data": (200, b'[{"a": 1}, {"b": "x"}]')})
    assert fetch_json(base + "/data") == [{"a": 1}, {"b": "x"}]


def test_fetch_json_non_200_returns_none(serve):
    base = serve({"/data": (500, b"[]")})
    assert fetch_json(base + "/data") is None


def test_fetch_json_missing_route_returns_none(serve):
    base = serve({})
    assert fetch_json(base + "/nothing") is None


def test_fetch_json_invalid_body_raises(serve):
    base = serve({"/data": (200, b"not json")})
    with pytest.raises(FetchError):
        fetch_json(base + "/data")


def test_fetch_json_refused_connection_raises():
    with socket.socket() as sock:
        sock.bind(("127.0.0.1", 0))
        port = sock.getsockname()[1]
    with pytest.raises(FetchError):
        fetch_json(f"http://127.0.0.1:{port}/data")


def test_fetch_json_bad_url_raises():
    with pytest.raises(FetchError):
        fetch_json("nonsense")