"""Request and response data types."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

DOMAIN_SIZE = 128
FILE_SIZE = 128
KEY_SIZE = 64
CONTENT_SIZE = 256


def _check_size(name: str, value: str, size: int) -> None:
    """Reject a text field that would not fit a buffer of ``size`` bytes plus terminator."""
    if len(value.encode("utf-8")) >= size:
        raise ValueError(f"{name} must be shorter than {size} bytes: {value!r}")


class Protocol(IntEnum):
    """URL scheme."""

    HTTP = 1
    HTTPS = 2


class Method(IntEnum):
    """HTTP request method."""

    HEAD = 1
    GET = 2
    POST = 3
    PUT = 4
    DELETE = 5
    PATCH = 6


@dataclass
class Url:
    """Target of a request: scheme, host name and path."""

    domain: str
    file: str = "/"
    protocol: Protocol = Protocol.HTTP

    def __post_init__(self) -> None:
        _check_size("domain", self.domain, DOMAIN_SIZE)
        _check_size("file", self.file, FILE_SIZE)


@dataclass
class Header:
    """A single header line."""

    key: str
    content: str

    def __post_init__(self) -> None:
        _check_size("header key", self.key, KEY_SIZE)
        _check_size("header content", self.content, CONTENT_SIZE)


@dataclass
class Cookie:
    """A cookie with its expiry timestamp and secure flag."""

    key: str
    content: str
    timestamp: int = 0
    secure: bool = False

    def __post_init__(self) -> None:
        _check_size("cookie key", self.key, KEY_SIZE)
        _check_size("cookie content", self.content, CONTENT_SIZE)


@dataclass
class Request:
    """An outgoing HTTP request."""

    url: Url
    method: Method = Method.GET
    content_type: str | None = None
    cookies: list[Cookie] = field(default_factory=list)
    headers: list[Header] = field(default_factory=list)
    data: bytes = b""

    @property
    def size(self) -> int:
        """Length of the body in bytes."""
        return len(self.data)


@dataclass
class Response:
    """A parsed HTTP response."""

    status: int = 0
    content_type: str = ""
    headers: list[Header] = field(default_factory=list)
    cookies: list[Cookie] = field(default_factory=list)
    data: bytes = b""

    @property
    def size(self) -> int:
        """Length of the body in bytes."""
        return len(self.data)