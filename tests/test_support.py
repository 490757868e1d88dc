import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest

from spsmonitor.net import FetchError
from spsmonitor.support import SupportData, fetch_support, parse_support


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


def test_parse_support():
    records = [{"topic": "SMS", "active_tickets": 3}, {"topic": "MMS", "active_tickets": 7}]
    assert parse_support(records) == [SupportData("SMS", 3), SupportData("MMS", 7)]


def test_parse_support_missing_fields_default():
    assert parse_support([{}, None]) == [SupportData("", 0), SupportData("", 0)]


def test_parse_support_null_document():
    assert parse_support(None) == []


@pytest.mark.parametrize("value", [1.5, True, "3"])
def test_parse_support_rejects_non_integer(value):
    with pytest.raises(ValueError):
        parse_support([{"topic": "SMS", "active_tickets": value}])


def test_to_dict():
    assert SupportData("SMS", 3).to_dict() == {"topic": "SMS", "active_tickets": 3}


def test_fetch_support(serve):
    base = serve({"/support": (200, b'[{"topic": "Billing", "active_tickets": 4}]')})
    assert fetch_support(base + "/support") == [SupportData("Billing", 4)]


def test_fetch_support_non_200_is_empty(serve):
    base = serve({"/support": (503, b"")})
    assert fetch_support(base + "/support") == []


def test_fetch_support_bad_payload_raises(serve):
    base = serve({"/support": (200, b'"text"')})
    with pytest.raises(FetchError):
        fetch_support(base + "/support")