"""A fixed-size pool of worker threads fed from a FIFO queue."""

from __future__ import annotations

import functools
import threading
from collections import deque
from concurrent.futures import Future
from typing import Any, Callable


class ThreadPool:
    """Runs queued callables on a fixed number of threads.

    Shutting down lets the workers finish every task already queued.
    """

    def __init__(self, num_threads: int) -> None:
        if num_threads < 0:
            raise ValueError("num_threads must not be negative")
        self._tasks: deque[tuple[Future, Callable[[], Any]]] = deque()
        self._cond = threading.Condition()
        self._terminating = False
        self._threads = [
            threading.Thread(target=self._worker, name=f"tpengine-worker-{n}", daemon=True)
            for n in range(num_threads)
        ]
        for thread in self._threads:
            thread.start()

    def enqueue(self, fn: Callable[..., Any], *args: Any, **kwargs: Any) -> Future:
        """Queue ``fn(*args, **kwargs)`` and return a future for its result."""
        future: Future = Future()
        with self._cond:
            if self._terminating:
                raise RuntimeError("Cannot enqueue on a stopped ThreadPool")
            self._tasks.append((future, functools.partial(fn, *args, **kwargs)))
            self._cond.notify()
        return future

    def _worker(self) -> None:
        while True:
            with self._cond:
                self._cond.wait_for(lambda: self._terminating or self._tasks)
                if not self._tasks:
                    return
                future, task = self._tasks.popleft()
            if not future.set_running_or_notify_cancel():
                continue
            try:
                result = task()
            except BaseException as exc:
                future.set_exception(exc)
            else:
                future.set_result(result)

    def shutdown(self) -> None:
        """Stop accepting tasks, drain the queue and join the workers."""
        with self._cond:
            self._terminating = True
            self._cond.notify_all()
        current = threading.current_thread()
        for thread in self._threads:
            if thread is not current:
                thread.join()

    def __enter__(self) -> ThreadPool:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.shutdown()