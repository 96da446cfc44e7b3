"""A minimal listening TCP socket on the loopback interface."""

from __future__ import annotations

import contextlib
import socket
from typing import Optional


class LocalTcpServer:
    """Listens on 127.0.0.1 at a given port without ever accepting connections."""

    def __init__(self, port: int) -> None:
        self._port = port
        self._socket: Optional[socket.socket] = None

    def start(self) -> None:
        """Bind and listen; raises RuntimeError when the socket cannot be set up."""
        try:
            sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        except OSError as exc:
            raise RuntimeError("Error establishing server socket") from exc
        with contextlib.suppress(OSError):
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        try:
            sock.bind(("127.0.0.1", self._port))
        except OSError as exc:
            sock.close()
            raise RuntimeError(
                f"Error binding socket to local address: {exc.strerror or ''}"
            ) from exc
        sock.listen(3)
        self._socket = sock

    def stop(self) -> None:
        """Close the listening socket; does nothing if it is not open."""
        if self._socket is None:
            return
        with contextlib.suppress(OSError):
            self._socket.shutdown(socket.SHUT_RDWR)
        self._socket.close()
        self._socket = None

    def __enter__(self) -> "LocalTcpServer":
        self.start()
        return self

    def __exit__(self, exc_type, exc, traceback) -> None:
        self.stop()

    def __del__(self) -> None:
        with contextlib.suppress(Exception):
            self.stop()