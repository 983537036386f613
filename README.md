# grab

`grab` is a minimal HTTP/1.1 client built on plain TCP sockets. It has no dependencies outside the standard library. It provides:

- data types for requests and responses (`grab.models`),
- building raw HTTP requests and parsing raw responses (`grab.http`),
- one blocking request/response cycle (`grab.fetch.fetch_sync`),
- concurrent fetches on a pool of worker threads (`grab.fetch.AsyncFetcher`),
- a bounded, thread-safe task queue and a thread pool (`grab.task_queue`, `grab.thread_pool`),
- a monotonic millisecond timer (`grab.timer`),
- byte-order helpers and dotted IPv4 parsing (`grab.utils`),
- a benchmark command (`grab`).

## Installation

```
pip install .
```

To run the tests, install the test extra and run pytest:

```
pip install ".[test]"
pytest
```

## Command line

```
grab
```

This command runs a benchmark. It first fetches one page a number of times in sequence and prints the size and time of each response. It then prints the total and average time. Next it fetches the page the same number of times through an `AsyncFetcher`, prints one line for each response, and prints the total time for that run.

Options:

| Option | Default | Meaning |
| --- | --- | --- |
| `--requests N` | `10` | number of fetches in each run (at least 1) |
| `--workers N` | `4` | worker threads for the concurrent run (1 to 8) |
| `--address IP` | `142.250.192.196` | IPv4 address to connect to |
| `--port N` | `80` | TCP port |
| `--domain NAME` | `www.google.com` | value sent in the `Host` header |
| `--path PATH` | `/` | path on the request line |

The command does not resolve `--domain`. It always connects to `--address`.

## Library use

Build a request and fetch it synchronously:

```python
from grab.models import Method, Protocol, Request, Url
from grab.fetch import fetch_sync

req = Request(method=Method.GET, url=Url(domain="example.com", file="/", protocol=Protocol.HTTP))
resp = fetch_sync(req, "192.0.2.10", 80)
print(resp.status, resp.content_type, resp.size)
```

A failed cycle raises `grab.fetch.FetchError`. This includes:

- a request of 8192 bytes or more,
- failure to create, connect, send or receive (the underlying `grab.network.NetworkError` is chained),
- a response that cannot be parsed.

`Url`, `Header` and `Cookie` raise `ValueError` for a text field that does not fit its limit. The limits in UTF-8 bytes are: domain and path, under 128; keys, under 64; contents, under 256.

To fetch concurrently, use callbacks. The callback receives the `Response`, or `None` when the fetch failed, together with the context given to `submit`. `submit` returns `False` when the queue of 64 pending fetches is full or the fetcher is closed. Closing the fetcher waits for every queued fetch to finish:

```python
from grab.fetch import AsyncFetcher

def on_done(resp, context):
    print(context, "failed" if resp is None else f"{resp.size} bytes")

with AsyncFetcher(4, "192.0.2.10", 80) as fetcher:
    for i in range(10):
        fetcher.submit(req, on_done, i)
```

Work directly with the wire format:

```python
from grab.http import build_http_request, method_to_string, parse_http_response

raw = build_http_request(req)   # bytes: request line, Host, User-Agent, Connection: close
resp = parse_http_response(b"HTTP/1.1 200 OK\r\nContent-Type: text/plain\r\n\r\nhello")
assert (resp.status, resp.content_type, resp.data) == (200, "text/plain", b"hello")
```

`build_http_request` adds `Content-Length` only when the request has a body. It adds `Content-Type` only when there is a body and `content_type` is set. `parse_http_response` raises `grab.http.HttpParseError` when a line is not terminated by `\r\n`. It ignores everything after the first NUL byte.

Run any callable on the thread pool:

```python
from grab.task_queue import Task
from grab.thread_pool import ThreadPool

with ThreadPool(3, 10) as pool:
    pool.submit(Task(print, "Task 1"))
```

`ThreadPool` accepts 1 to 8 workers. A task submitted while the queue is full is dropped, and `submit` returns `False`. An exception raised by a task is logged, and the worker goes on. On shutdown, tasks that are already queued still run.

`TaskQueue` can be used on its own. `enqueue` never blocks. `dequeue` waits for a task, or returns `None` once the queue is closed and empty.

Time code with `grab.timer.Timer`. `start()` begins the measurement and `stop()` returns the elapsed time in milliseconds. `timer_now()` returns the current monotonic time in milliseconds.

## What it does not do

- No DNS resolution: you always give an IPv4 address, and the domain is used only for the `Host` header.
- No HTTPS: `Protocol.HTTPS` exists as a value, but every connection is plain TCP.
- The response is read with a single receive of at most 65535 bytes. There is no chunked decoding, and a longer or split response is cut short.
- Of the response headers, only `Content-Type` is parsed. `Response.headers` and `Response.cookies` stay empty.
- The `headers` and `cookies` of a `Request` are not sent.