"""Worker supervisor for repofeed.

Per-file reads are I/O bound, so they run on a fixed-size thread pool.
Every submitted task still counts as its own unit of work; the pool only
caps how many of them hold a file open at the same time.
"""

from __future__ import annotations

import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Callable, Optional

DEFAULT_MAX_WORKERS = 16


class WorkerSupervisor:
    """Manage the worker threads used for parallel file reads."""

    def __init__(self, max_workers: int = DEFAULT_MAX_WORKERS, name: str = 'repofeed-worker'):
        if max_workers < 1:
            raise ValueError('max_workers must be at least 1')
        self.max_workers = max_workers
        self._executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix=name)
        self._lock = threading.Lock()
        self._submitted = 0

    @property
    def submitted(self) -> int:
        with self._lock:
            return self._submitted

    def submit(self, task: Callable[[], None]) -> 'Future[None]':
        """Queue a no-arg callable; it runs once a worker is free."""
        future = self._executor.submit(task)
        with self._lock:
            self._submitted += 1
        return future

    def close(self, wait: bool = False) -> None:
        """Stop accepting tasks.

        Tasks already queued still run to completion even when ``wait`` is
        false.
        """
        self._executor.shutdown(wait=wait)

    def __enter__(self) -> 'WorkerSupervisor':
        return self

    def __exit__(self, *exc: Optional[object]) -> None:
        self.close(wait=True)
