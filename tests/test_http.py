import pytest

from grab.http import (
    HttpParseError,
    build_http_request,
    method_to_string,
    parse_http_response,
)
from grab.models import Method, Request, Url


@pytest.mark.parametrize(
    "method, name",
    [
        (Method.GET, "GET"),
        (Method.POST, "POST"),
        (Method.PUT, "PUT"),
        (Method.DELETE, "DELETE"),
        (Method.PATCH, "PATCH"),
        (Method.HEAD, "HEAD"),
    ],
)
def test_method_to_string(method, name):
    assert method_to_string(method) == name


def test_unknown_method_defaults_to_get():
    assert method_to_string(99) == "GET"


def test_build_get_request():
    req = Request(url=Url(domain="www.google.com", file="/"))
    assert build_http_request(req) == (
        b"GET / HTTP/1.1\r\n"
        b"Host: www.google.com\r\n"
        b"User-Agent: FetchLibC/1.0\r\n"
        b"Connection: close\r\n"
        b"\r\n"
    )


def test_build_post_with_body_and_content_type():
    req = Request(
        url=Url(domain="example.com", file="/submit"),
        method=Method.POST,
        content_type="application/json",
        data=b'{"a":1}',
    )
    raw = build_http_request(req)
    head, body = raw.split(b"\r\n\r\n", 1)
    assert head.startswith(b"POST /submit HTTP/1.1\r\n")
    assert f"Content-Length: {len(req.data)}".encode() in head.split(b"\r\n")
    assert b"Content-Type: application/json" in head.split(b"\r\n")
    assert body == req.data


def test_content_type_omitted_without_body():
    req = Request(url=Url(domain="example.com"), content_type="text/plain")
    raw = build_http_request(req)
    assert b"Content-Type" not in raw
    assert b"Content-Length" not in raw


def test_body_without_content_type():
    req = Request(url=Url(domain="example.com"), method=Method.PUT, data=b"xyz")
    raw = build_http_request(req)
    assert b"Content-Type" not in raw
    assert raw.endswith(b"\r\n\r\nxyz")


def test_parse_response():
    raw = (
        b"HTTP/1.1 200 OK\r\n"
        b"Content-Type: text/html; charset=UTF-8\r\n"
        b"Server: test\r\n"
        b"\r\n"
        b"<html></html>"
    )
    resp = parse_http_response(raw)
    assert resp.status == 200
    assert resp.content_type == "text/html; charset=UTF-8"
    assert resp.data == b"<html></html>"
    assert resp.size == len(b"<html></html>")


def test_parse_response_without_content_type():
    resp = parse_http_response(b"HTTP/1.1 404 Not Found\r\nX-A: b\r\n\r\nmissing")
    assert resp.status == 404
    assert resp.content_type == ""
    assert resp.data == b"missing"


def test_content_type_match_is_case_sensitive():
    resp = parse_http_response(b"HTTP/1.1 200 OK\r\ncontent-type: a/b\r\n\r\n")
    assert resp.content_type == ""
    assert resp.data == b""


def test_content_type_is_truncated():
    long_type = "a" * 300
    raw = f"HTTP/1.1 200 OK\r\nContent-Type: {long_type}\r\n\r\n".encode()
    resp = parse_http_response(raw)
    assert resp.content_type == long_type[:255]


def test_body_stops_at_nul():
    resp = parse_http_response(b"HTTP/1.1 200 OK\r\n\r\nabc\0def")
    assert resp.data == b"abc"


def test_missing_status_line_terminator_raises():
    with pytest.raises(HttpParseError):
        parse_http_response(b"HTTP/1.1 200 OK")


def test_unterminated_headers_raise():
    with pytest.raises(HttpParseError):
        parse_http_response(b"HTTP/1.1 200 OK\r\nServer: test\r\n")


def test_empty_input_raises():
    with pytest.raises(HttpParseError):
        parse_http_response(b"")


def test_built_request_parses_back_as_headers_and_body():
    req = Request(
        url=Url(domain="example.com"),
        method=Method.POST,
        content_type="text/plain",
        data=b"payload",
    )
    resp = parse_http_response(build_http_request(req))
    assert resp.content_type == "text/plain"
    assert resp.data == b"payload"