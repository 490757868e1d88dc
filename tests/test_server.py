import json
import threading
import urllib.error
import urllib.request
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest

from spsmonitor.config import Settings
from spsmonitor.server import build_response, make_server, run_server


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
        return server.server_port

    yield start
    for server in servers:
        server.shutdown()
        server.server_close()


ROUTES = {
    "/mms": (200, b"[]"),
    "/support": (200, b'[{"topic": "SMS", "active_tickets": 2}]'),
    "/accendent": (200, b'[{"topic": "x", "status": "active"}]'),
}


def _write_data(directory, voice="RU;40;609;E-Voice;0.86;160;36;5\n"):
    (directory / "sms.data").write_text("US;36;1576;Rond\n")
    (directory / "voice.data").write_text(voice)
    (directory / "email.data").write_text("")
    (directory / "billing.data").write_text("111111")


def _settings(tmp_path, port):
    return Settings(simulator_addr="127.0.0.1", simulator_port=str(port), data_path=str(tmp_path))


def test_build_response_success(serve, tmp_path):
    _write_data(tmp_path)
    status, body = build_response(_settings(tmp_path, serve(ROUTES)))
    document = json.loads(body)
    assert status == 200
    assert document["status"] is True
    assert document["error"] == ""
    assert document["data"]["incident"] == [{"topic": "x", "status": "active"}]
    assert document["data"]["billing"]["checkout_page"] is True


def test_build_response_failure_reports_error(tmp_path):
    settings = Settings(simulator_addr="127.0.0.1", simulator_port="1", data_path=str(tmp_path / "missing"))
    status, body = build_response(settings)
    document = json.loads(body)
    assert status == 200
    assert document["status"] is False
    assert "sms.data" in document["error"]
    assert document["data"]["sms"] is None


def test_build_response_escapes_html(tmp_path):
    settings = Settings(data_path=str(tmp_path / "a<b"))
    _, body = build_response(settings)
    assert b"<" not in body
    assert b"\\u003c" in body


def test_build_response_nan_is_server_error(serve, tmp_path):
    _write_data(tmp_path, voice="RU;40;609;E-Voice;NaN;160;36;5\n")
    assert build_response(_settings(tmp_path, serve(ROUTES))) == (500, b"")


@pytest.fixture
def status_server(serve, tmp_path):
    _write_data(tmp_path)
    server = make_server("127.0.0.1", 0, _settings(tmp_path, serve(ROUTES)))
    threading.Thread(target=server.serve_forever, daemon=True).start()
    yield f"http://127.0.0.1:{server.server_port}"
    server.shutdown()
    server.server_close()


def test_server_root(status_server):
    with urllib.request.urlopen(status_server + "/") as response:
        assert response.status == 200
        assert json.loads(response.read())["status"] is True


def test_server_unknown_path(status_server):
    with pytest.raises(urllib.error.HTTPError) as info:
        urllib.request.urlopen(status_server + "/other")
    assert info.value.code == 404


def test_server_wrong_method(status_server):
    request = urllib.request.Request(status_server + "/", data=b"", method="POST")
    with pytest.raises(urllib.error.HTTPError) as info:
        urllib.request.urlopen(request)
    assert info.value.code == 405


def test_run_server_bad_port_exits():
    with pytest.raises(SystemExit) as info:
        run_server("127.0.0.1", "not-a-port", Settings())
    assert info.value.code == 1