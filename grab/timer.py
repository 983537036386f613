"""Monotonic millisecond timing."""

from __future__ import annotations

import time

_NS_PER_MS = 1_000_000.0


def timer_now() -> float:
    """Current monotonic time in milliseconds."""
    return time.monotonic_ns() / _NS_PER_MS


class Timer:
    """Measures elapsed wall time between ``start`` and ``stop``."""

    def __init__(self) -> None:
        self._start_ns: int | None = None
        self._end_ns: int | None = None

    def start(self) -> None:
        """Record the start time."""
        self._start_ns = time.monotonic_ns()
        self._end_ns = None

    def stop(self) -> float:
        """Record the end time and return the elapsed milliseconds."""
        if self._start_ns is None:
            raise RuntimeError("timer was stopped before it was started")
        self._end_ns = time.monotonic_ns()
        return (self._end_ns - self._start_ns) / _NS_PER_MS