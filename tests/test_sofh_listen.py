import io
import socket
import threading
import time

from fixwire.sofh import Frame
from fixwire.sofh_encoding import EncodingType
from fixwire.sofh_listen import main, serve


def _free_port() -> int:
    with socket.socket() as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


def _connect(port: int, deadline: float = 5.0) -> socket.socket:
    end = time.monotonic() + deadline
    while True:
        try:
            return socket.create_connection(("127.0.0.1", port), timeout=2)
        except OSError:
            if time.monotonic() > end:
                raise
            time.sleep(0.02)


def _start_server(port: int):
    out = io.StringIO()
    results = []
    thread = threading.Thread(
        target=lambda: results.append(serve("127.0.0.1", port, out)), daemon=True
    )
    thread.start()
    return thread, results, out


def test_prints_each_received_message():
    port = _free_port()
    thread, results, out = _start_server(port)
    with _connect(port) as client:
        client.sendall(Frame(EncodingType.JSON, b"{}").to_bytes())
        client.sendall(Frame(0xF000, b"hello").to_bytes())
    thread.join(timeout=5)
    assert not thread.is_alive()
    assert results == [2]
    assert out.getvalue() == "Received message '{}'\nReceived message 'hello'\n"


def test_frame_split_across_sends():
    port = _free_port()
    thread, results, out = _start_server(port)
    data = Frame(0x0001, b"split payload").to_bytes()
    with _connect(port) as client:
        client.sendall(data[:4])
        time.sleep(0.05)
        client.sendall(data[4:])
    thread.join(timeout=5)
    assert results == [1]
    assert out.getvalue() == "Received message 'split payload'\n"


def test_invalid_frame_stops_server():
    port = _free_port()
    thread, results, out = _start_server(port)
    data = (
        Frame(0xF000, b"one").to_bytes()
        + b"\x00\x00\x00\x03\x00\x00"
        + Frame(0xF000, b"two").to_bytes()
    )
    with _connect(port) as client:
        client.sendall(data)
    thread.join(timeout=5)
    assert not thread.is_alive()
    assert results == [1]
    assert out.getvalue() == "Received message 'one'\n"


def test_invalid_utf8_is_replaced():
    port = _free_port()
    thread, results, out = _start_server(port)
    with _connect(port) as client:
        client.sendall(Frame(0xF000, b"a\xffb").to_bytes())
    thread.join(timeout=5)
    assert results == [1]
    assert out.getvalue() == "Received message 'a\ufffdb'\n"


def test_trailing_incomplete_frame_is_ignored():
    port = _free_port()
    thread, results, out = _start_server(port)
    with _connect(port) as client:
        client.sendall(Frame(0xF000, b"full").to_bytes() + b"\x00\x00\x00\x10")
    thread.join(timeout=5)
    assert results == [1]
    assert out.getvalue().count("Received message") == 1


def test_main_prints_to_stdout(capsys):
    port = _free_port()
    results = []
    thread = threading.Thread(
        target=lambda: results.append(main(["--host", "127.0.0.1", "--port", str(port)])),
        daemon=True,
    )
    thread.start()
    with _connect(port) as client:
        client.sendall(Frame(0xF500, b"ping").to_bytes())
    thread.join(timeout=5)
    assert results == [0]
    assert capsys.readouterr().out == "Received message 'ping'\n"