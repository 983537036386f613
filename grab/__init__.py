"""A small HTTP/1.1 client over TCP sockets, with a bounded task queue and a worker thread pool."""

__version__ = "0.1.0"
__all__ = ["__version__"]