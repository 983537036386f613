"""A fixed set of worker threads fed from a bounded task queue."""

from __future__ import annotations

import logging
import threading
from types import TracebackType

from grab.task_queue import Task, TaskQueue

MAX_WORKERS = 8

_log = logging.getLogger(__name__)


class ThreadPool:
    """Runs submitted tasks on up to ``MAX_WORKERS`` threads.

    On shutdown, tasks already queued still run before the workers exit.
    """

    def __init__(self, num_workers: int, queue_capacity: int) -> None:
        if not 1 <= num_workers <= MAX_WORKERS:
            raise ValueError(
                f"num_workers must be between 1 and {MAX_WORKERS}, got {num_workers}"
            )
        self.num_workers = num_workers
        self._queue = TaskQueue(queue_capacity)
        self._workers = [
            threading.Thread(target=self._work, name=f"grab-worker-{n}", daemon=True)
            for n in range(num_workers)
        ]
        for worker in self._workers:
            worker.start()

    def _work(self) -> None:
        while (task := self._queue.dequeue()) is not None:
            try:
                task.run()
            except Exception:
                _log.exception("task %r failed", task)

    def submit(self, task: Task) -> bool:
        """Queue a task; return False if the queue was full or the pool is shut down."""
        return self._queue.enqueue(task)

    def shutdown(self) -> None:
        """Stop accepting tasks, let queued ones finish and join the workers."""
        self._queue.close()
        for worker in self._workers:
            worker.join()

    def __enter__(self) -> ThreadPool:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.shutdown()