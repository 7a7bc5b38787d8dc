"""Accept one TCP connection and print every SOFH-framed message it sends."""

from __future__ import annotations

import argparse
import socket
import sys
from typing import Iterator, Optional, Sequence, TextIO

from fixwire.sofh import Frame, SofhCodec, SofhError

_RECV_SIZE = 65536


def _frames(conn: socket.socket) -> Iterator[Frame]:
    codec = SofhCodec()
    buffer = bytearray()
    while chunk := conn.recv(_RECV_SIZE):
        buffer += chunk
        while (frame := codec.decode(buffer)) is not None:
            yield frame


def serve(host: str, port: int, out: TextIO) -> int:
    """Listen on ``host:port``, accept one client and print its messages.

    Stops when the client closes the connection or sends an invalid frame.
    Returns the number of messages received.
    """
    received = 0
    with socket.create_server((host, port)) as listener:
        conn, _ = listener.accept()
        with conn:
            try:
                for frame in _frames(conn):
                    text = frame.payload.decode("utf-8", errors="replace")
                    out.write(f"Received message '{text}'\n")
                    out.flush()
                    received += 1
            except SofhError:
                pass
    return received


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(
        description="Print SOFH-framed messages received over TCP."
    )
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8080)
    args = parser.parse_args(argv)
    serve(args.host, args.port, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())