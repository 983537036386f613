"""A bounded, thread-safe FIFO of tasks."""

from __future__ import annotations

import threading
from collections import deque
from dataclasses import dataclass
from typing import Any, Callable


@dataclass
class Task:
    """A callable paired with the single argument it is run with."""

    function: Callable[[Any], Any]
    arg: Any = None

    def run(self) -> Any:
        """Call the function with the argument and return its result."""
        return self.function(self.arg)


class TaskQueue:
    """Bounded FIFO that many threads may share.

    ``enqueue`` never blocks: a task offered to a full queue is dropped.
    ``dequeue`` blocks until a task is available, or until the queue is
    closed and drained, in which case it returns None.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")
        self.capacity = capacity
        self._tasks: deque[Task] = deque()
        self._closed = False
        self._not_empty = threading.Condition()

    def enqueue(self, task: Task) -> bool:
        """Add a task; return False and drop it if the queue is full or closed."""
        with self._not_empty:
            if self._closed or len(self._tasks) >= self.capacity:
                return False
            self._tasks.append(task)
            self._not_empty.notify()
            return True

    def dequeue(self) -> Task | None:
        """Remove and return the oldest task, waiting while the queue is empty."""
        with self._not_empty:
            while not self._tasks and not self._closed:
                self._not_empty.wait()
            if not self._tasks:
                return None
            return self._tasks.popleft()

    def close(self) -> None:
        """Stop accepting tasks and wake every waiting consumer."""
        with self._not_empty:
            self._closed = True
            self._not_empty.notify_all()

    @property
    def closed(self) -> bool:
        with self._not_empty:
            return self._closed

    def __len__(self) -> int:
        with self._not_empty:
            return len(self._tasks)