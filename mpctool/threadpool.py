"""A fixed-size pool of worker threads fed from a task queue."""

from __future__ import annotations

import threading
from collections import deque
from concurrent.futures import Future
from typing import Any, Callable, Deque


class ThreadPool:
    """Runs queued callables on a fixed set of threads; shutdown drains the queue."""

    def __init__(self, threads: int) -> None:
        if threads < 0:
            raise ValueError("thread count must not be negative")
        self._tasks: Deque[Callable[[], None]] = deque()
        self._condition = threading.Condition()
        self._stop = False
        self._workers = [
            threading.Thread(target=self._work, daemon=True) for _ in range(threads)
        ]
        for worker in self._workers:
            worker.start()

    def _work(self) -> None:
        while True:
            with self._condition:
                self._condition.wait_for(lambda: self._stop or bool(self._tasks))
                if self._stop and not self._tasks:
                    return
                task = self._tasks.popleft()
            task()

    def enqueue(self, fn: Callable[..., Any], *args: Any, **kwargs: Any) -> Future:
        """Queue ``fn(*args, **kwargs)`` and return a future for its result."""
        future: Future = Future()

        def run() -> None:
            if not future.set_running_or_notify_cancel():
                return
            try:
                result = fn(*args, **kwargs)
            except BaseException as exc:
                future.set_exception(exc)
            else:
                future.set_result(result)

        with self._condition:
            if self._stop:
                raise RuntimeError("enqueue on stopped ThreadPool")
            self._tasks.append(run)
            self._condition.notify()
        return future

    def size(self) -> int:
        return len(self._workers)

    def shutdown(self) -> None:
        """Stop accepting work, finish every queued task and join the workers."""
        with self._condition:
            self._stop = True
            self._condition.notify_all()
        for worker in self._workers:
            worker.join()

    def __enter__(self) -> "ThreadPool":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.shutdown()