"""Synchronous and pooled HTTP fetching over plain TCP."""

from __future__ import annotations

from types import TracebackType
from typing import Any, Callable, Optional

from grab.http import HttpParseError, build_http_request, parse_http_response
from grab.models import Request, Response
from grab.network import NetworkError, Socket
from grab.task_queue import Task
from grab.thread_pool import ThreadPool

DEFAULT_ADDRESS = "142.250.192.196"
HTTP_PORT = 80
REQUEST_BUFFER_SIZE = 8192
RESPONSE_BUFFER_SIZE = 65536
QUEUE_CAPACITY = 64

FetchCallback = Callable[[Optional[Response], Any], None]


class FetchError(Exception):
    """A request/response cycle failed."""


def fetch_sync(
    req: Request, address: str = DEFAULT_ADDRESS, port: int = HTTP_PORT
) -> Response:
    """Send ``req`` to ``address``:``port`` and parse the reply of a single read."""
    payload = build_http_request(req)
    if len(payload) >= REQUEST_BUFFER_SIZE:
        raise FetchError(
            f"request is {len(payload)} bytes, limit is {REQUEST_BUFFER_SIZE - 1}"
        )
    try:
        with Socket() as sock:
            sock.connect(address, port)
            sock.send(payload)
            raw = sock.recv(RESPONSE_BUFFER_SIZE - 1)
    except NetworkError as exc:
        raise FetchError(str(exc)) from exc
    try:
        return parse_http_response(raw)
    except HttpParseError as exc:
        raise FetchError(f"failed to parse response: {exc}") from exc


class AsyncFetcher:
    """Runs fetches on a worker pool and reports each result to a callback.

    The callback receives the response, or None if the fetch failed, and the
    context given with the request.
    """

    def __init__(
        self,
        num_workers: int = 4,
        address: str = DEFAULT_ADDRESS,
        port: int = HTTP_PORT,
    ) -> None:
        self.address = address
        self.port = port
        self._pool = ThreadPool(num_workers, QUEUE_CAPACITY)

    def _fetch(self, req: Request, callback: FetchCallback, context: Any) -> None:
        try:
            resp: Response | None = fetch_sync(req, self.address, self.port)
        except FetchError:
            resp = None
        callback(resp, context)

    def submit(
        self, req: Request, callback: FetchCallback, context: Any = None
    ) -> bool:
        """Queue a fetch; return False if the queue was full or the fetcher closed."""
        return self._pool.submit(
            Task(lambda _: self._fetch(req, callback, context))
        )

    def close(self) -> None:
        """Wait for every queued fetch to finish and stop the workers."""
        self._pool.shutdown()

    def __enter__(self) -> AsyncFetcher:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()