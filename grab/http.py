"""Building HTTP/1.1 requests and parsing responses."""

from __future__ import annotations

from grab.models import Method, Request, Response

_CRLF = b"\r\n"
_CONTENT_TYPE = b"Content-Type:"
_CONTENT_TYPE_LIMIT = 255

_METHOD_NAMES = {
    Method.GET: "GET",
    Method.POST: "POST",
    Method.PUT: "PUT",
    Method.DELETE: "DELETE",
    Method.PATCH: "PATCH",
    Method.HEAD: "HEAD",
}


class HttpParseError(ValueError):
    """A raw response did not have the shape of an HTTP response."""


def method_to_string(method: Method | int) -> str:
    """Name of a method as it appears on the request line; unknown values give GET."""
    try:
        return _METHOD_NAMES[Method(method)]
    except ValueError:
        return "GET"


def build_http_request(req: Request) -> bytes:
    """Serialise a request: request line, fixed headers and an optional body."""
    lines = [
        f"{method_to_string(req.method)} {req.url.file} HTTP/1.1",
        f"Host: {req.url.domain}",
        "User-Agent: FetchLibC/1.0",
        "Connection: close",
    ]
    if req.data:
        lines.append(f"Content-Length: {req.size}")
        if req.content_type is not None:
            lines.append(f"Content-Type: {req.content_type}")
    head = "".join(f"{line}\r\n" for line in lines) + "\r\n"
    return head.encode("utf-8") + req.data


def _next_line(raw: bytes, pos: int) -> int:
    eol = raw.find(_CRLF, pos)
    if eol < 0:
        raise HttpParseError("unterminated line in response")
    return eol + len(_CRLF)


def parse_http_response(raw: bytes) -> Response:
    """Parse status, Content-Type and body from a raw response.

    The input is read as a NUL-terminated string: anything after the first
    NUL byte is ignored.
    """
    raw = raw.split(b"\0", 1)[0]
    resp = Response()

    space = raw.find(b" ")
    pos = len(raw) if space < 0 else space + 1
    digits_end = pos
    while digits_end < len(raw) and raw[digits_end : digits_end + 1].isdigit():
        digits_end += 1
    resp.status = int(raw[pos:digits_end] or b"0") & 0xFFFF

    pos = _next_line(raw, pos)
    while raw[pos : pos + 2] != _CRLF:
        if raw.startswith(_CONTENT_TYPE, pos):
            start = pos + len(_CONTENT_TYPE)
            while raw[start : start + 1] == b" ":
                start += 1
            stop = raw.find(b"\r", start)
            if stop < 0:
                stop = len(raw)
            stop = min(stop, start + _CONTENT_TYPE_LIMIT)
            resp.content_type = raw[start:stop].decode("latin-1")
        pos = _next_line(raw, pos)

    resp.data = raw[pos + 2 :]
    return resp