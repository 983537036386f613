"""Thin TCP socket wrapper that reports failures as NetworkError."""

from __future__ import annotations

import socket
from types import TracebackType

AF_INET = socket.AF_INET
SOCK_STREAM = socket.SOCK_STREAM


class NetworkError(OSError):
    """A socket could not be created, connected, written or read."""


class Socket:
    """A stream socket with connect, send, receive and close operations."""

    def __init__(
        self, domain: int = AF_INET, type: int = SOCK_STREAM, protocol: int = 0
    ) -> None:
        try:
            self._sock = socket.socket(domain, type, protocol)
        except OSError as exc:
            raise NetworkError(f"failed to create socket: {exc}") from exc

    def connect(self, host: str, port: int) -> None:
        """Connect to ``host`` on ``port``."""
        try:
            self._sock.connect((host, port))
        except OSError as exc:
            raise NetworkError(f"failed to connect to {host}:{port}: {exc}") from exc

    def send(self, data: bytes) -> int:
        """Write all of ``data`` and return the number of bytes sent."""
        try:
            self._sock.sendall(data)
        except OSError as exc:
            raise NetworkError(f"failed to send: {exc}") from exc
        return len(data)

    def recv(self, size: int) -> bytes:
        """Read at most ``size`` bytes; an empty result means the peer closed."""
        try:
            return self._sock.recv(size)
        except OSError as exc:
            raise NetworkError(f"failed to receive: {exc}") from exc

    def close(self) -> None:
        """Close the socket. Closing twice is harmless."""
        self._sock.close()

    def __enter__(self) -> Socket:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()