import socket
import threading

import pytest

from grab.cli import main

RESPONSE = b"HTTP/1.1 200 OK\r\nContent-Type: text/plain\r\n\r\nbody!"


@pytest.fixture
def server():
    listener = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    listener.bind(("127.0.0.1", 0))
    listener.listen(16)
    received = []

    def serve():
        while True:
            try:
                conn, _ = listener.accept()
            except OSError:
                return
            with conn:
                data = b""
                while b"\r\n\r\n" not in data:
                    chunk = conn.recv(4096)
                    if not chunk:
                        break
                    data += chunk
                received.append(data)
                conn.sendall(RESPONSE)

    threading.Thread(target=serve, daemon=True).start()
    yield listener.getsockname()[1], received
    listener.close()


def _free_port():
    probe = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    probe.bind(("127.0.0.1", 0))
    port = probe.getsockname()[1]
    probe.close()
    return port


def test_main_reports_successful_fetches(server, capsys):
    port, received = server
    status = main(
        ["--requests", "2", "--workers", "2", "--address", "127.0.0.1", "--port", str(port)]
    )
    out = capsys.readouterr().out
    assert status == 0
    assert "Sequential Fetch Performance Test" in out
    assert "Async Fetch Performance Test" in out
    assert "Total requests: 2" in out
    assert out.count("Fetching request") == 2
    assert out.count("Async response: 5 bytes") == 2
    assert "Total async time:" in out
    assert len(received) == 4


def test_main_reports_failures(capsys):
    port = _free_port()
    status = main(["--requests", "3", "--address", "127.0.0.1", "--port", str(port)])
    out = capsys.readouterr().out
    assert status == 0
    assert out.count("FAILED\n") - out.count("Async request FAILED\n") == 3
    assert out.count("Async request FAILED") == 3


def test_main_sends_requested_host_and_path(server, capsys):
    port, received = server
    status = main(
        [
            "--requests", "1",
            "--workers", "1",
            "--address", "127.0.0.1",
            "--port", str(port),
            "--domain", "example.com",
            "--path", "/index.html",
        ]
    )
    out = capsys.readouterr().out
    assert status == 0
    assert out.count("Async response: 5 bytes") == 1
    assert all(r.startswith(b"GET /index.html HTTP/1.1\r\n") for r in received)
    assert all(b"Host: example.com\r\n" in r for r in received)
    assert len(received) == 2


def test_main_rejects_zero_requests():
    with pytest.raises(SystemExit):
        main(["--requests", "0"])