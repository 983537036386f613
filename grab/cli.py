"""Command that times sequential and pooled fetches of one page."""

from __future__ import annotations

import argparse
import copy

from grab.fetch import DEFAULT_ADDRESS, HTTP_PORT, AsyncFetcher, FetchError, fetch_sync
from grab.models import Request, Response, Url
from grab.timer import Timer

_RULE = "=" * 40


def _positive_int(text: str) -> int:
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return value


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="grab", description="Time sequential and pooled HTTP fetches."
    )
    parser.add_argument("--requests", type=_positive_int, default=10)
    parser.add_argument("--workers", type=_positive_int, default=4)
    parser.add_argument("--address", default=DEFAULT_ADDRESS)
    parser.add_argument("--port", type=int, default=HTTP_PORT)
    parser.add_argument("--domain", default="www.google.com")
    parser.add_argument("--path", default="/")
    return parser.parse_args(argv)


def _report(resp: Response | None, context: Request) -> None:
    if resp is not None:
        print(f"Async response: {resp.size} bytes")
    else:
        print("Async request FAILED")


def main(argv: list[str] | None = None) -> int:
    """Run the sequential and the pooled benchmark and print the timings."""
    args = _parse_args(argv)
    count = args.requests
    req = Request(url=Url(domain=args.domain, file=args.path))

    print(_RULE)
    print("Sequential Fetch Performance Test")
    print(_RULE)
    print(f"Making {count} requests to {args.domain}...\n")

    total_timer = Timer()
    total_timer.start()
    for n in range(1, count + 1):
        print(f"Fetching request {n}... ", end="", flush=True)
        request_timer = Timer()
        request_timer.start()
        try:
            resp = fetch_sync(req, args.address, args.port)
        except FetchError:
            request_timer.stop()
            print("FAILED")
            continue
        elapsed = request_timer.stop()
        print(f"{resp.size} bytes in {elapsed:.2f} ms")
    total_time = total_timer.stop()

    print(f"\n{_RULE}")
    print("Results:")
    print(_RULE)
    print(f"Total requests: {count}")
    print(f"Total time:     {total_time:.2f} ms ({total_time / 1000.0:.2f} seconds)")
    print(f"Avg per request: {total_time / count:.2f} ms")
    print(_RULE)

    print("Async Fetch Performance Test")
    print(_RULE)
    print(f"Making {count} requests to {args.domain}...\n")

    total_timer.start()
    with AsyncFetcher(args.workers, args.address, args.port) as fetcher:
        for _ in range(count):
            own = copy.deepcopy(req)
            fetcher.submit(own, _report, own)
    async_total = total_timer.stop()

    print(
        f"\nTotal async time: {async_total:.2f} ms ({async_total / 1000.0:.2f} seconds)"
    )
    return 0