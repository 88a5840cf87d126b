"""
Wall-clock timing for search backends.

A Timer measures one overall span plus any number of named phases. The
CPU backend times the 'search' phase (all workers, joined) and the
'aggregate' phase (global best), and stores Timer.result() in
Result.timing.
"""

import time
from contextlib import contextmanager
from typing import Iterator


class Timer:
    """
    Overall span plus accumulating named phases.

    Usage:
        timer = Timer()
        timer.start()
        with timer.section('search'):
            per_size = run_workers()
        with timer.section('aggregate'):
            best = select_best(per_size)
        timer.stop()
        timer.result()   # {'total_seconds': ..., 'search': ..., 'aggregate': ...}

    A phase entered more than once reports the sum of its spans.
    """

    def __init__(self):
        self._phases: dict[str, float] = {}
        self._started_at: float | None = None
        self._elapsed: float | None = None

    def start(self) -> None:
        self._started_at = time.perf_counter()

    def stop(self) -> None:
        """
        Raises:
            RuntimeError: If start() was never called
        """
        if self._started_at is None:
            raise RuntimeError("Timer.stop() called before start()")
        self._elapsed = time.perf_counter() - self._started_at

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """Time the enclosed block under name; recorded even if it raises."""
        entered = time.perf_counter()
        try:
            yield
        finally:
            spent = time.perf_counter() - entered
            self._phases[name] = self._phases.get(name, 0.0) + spent

    def result(self) -> dict[str, float]:
        """
        Returns:
            'total_seconds' followed by every phase, in seconds

        Raises:
            RuntimeError: If stop() has not been called
        """
        if self._elapsed is None:
            raise RuntimeError("Timer.result() called before stop()")
        return {'total_seconds': self._elapsed, **self._phases}
