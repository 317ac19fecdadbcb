"""Fixed-size thread pool with a bounded backlog, and the process-wide shared pool."""

from __future__ import annotations

import logging
import os
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Callable

_log = logging.getLogger("knowhere")

_TASK_QUEUE_FACTOR = 16


class ThreadPool:
    """Runs callables on *num_threads* workers; ``push`` blocks while the backlog is full."""

    def __init__(self, num_threads: int) -> None:
        if num_threads <= 0:
            raise ValueError("num_threads should be bigger than 0")
        self._num_threads = num_threads
        self._executor = ThreadPoolExecutor(max_workers=num_threads)
        self._slots = threading.BoundedSemaphore(num_threads * (_TASK_QUEUE_FACTOR + 1))

    def push(self, func: Callable[..., Any], *args: Any, **kwargs: Any) -> Future:
        """Schedule ``func(*args, **kwargs)`` and return its future."""
        self._slots.acquire()
        try:
            future = self._executor.submit(func, *args, **kwargs)
        except BaseException:
            self._slots.release()
            raise
        future.add_done_callback(lambda _done: self._slots.release())
        return future

    def size(self) -> int:
        """Number of worker threads."""
        return self._num_threads

    def shutdown(self) -> None:
        """Wait for scheduled work to finish and refuse any further tasks."""
        self._executor.shutdown(wait=True)

    def __enter__(self) -> ThreadPool:
        return self

    def __exit__(self, *args: Any) -> None:
        self.shutdown()


_global_lock = threading.Lock()
_global_size = 0
_global_pool: ThreadPool | None = None


def init_global_thread_pool(num_threads: int) -> bool:
    """Fix the size of the shared pool; return whether the size was taken."""
    global _global_size
    if num_threads <= 0:
        _log.error("num_threads should be bigger than 0")
        return False
    with _global_lock:
        if _global_size == 0:
            _global_size = num_threads
            return True
        current = _global_size
    _log.warning("Global ThreadPool has already been initialized with threads num: %d", current)
    return False


def get_global_thread_pool() -> ThreadPool:
    """Return the shared pool, creating it on first use."""
    global _global_size, _global_pool
    with _global_lock:
        if _global_size == 0:
            _global_size = os.cpu_count() or 1
            _log.warning(
                "Global ThreadPool has not been initialized yet, init it with threads num: %d", _global_size
            )
        if _global_pool is None:
            _global_pool = ThreadPool(_global_size)
        return _global_pool