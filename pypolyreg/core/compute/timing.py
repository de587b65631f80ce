"""
Wall-clock timing for backends and the degree search.

A Timer records the total run plus named sections; the breakdown ends up
in Result.timing.
"""

import time
from contextlib import contextmanager
from typing import Iterator


class Timer:
    """
    Total wall-clock time plus named, accumulating sections.

    Either bracket the work with start()/stop() or use the timer as a
    context manager:

        with Timer() as timer:
            with timer.section('degree_2'):
                ...
        timer.result()
        # {'total_seconds': 0.0012, 'degree_2': 0.0004}
    """

    def __init__(self) -> None:
        self._began: float | None = None
        self._total: float | None = None
        self._sections: dict[str, float] = {}

    def __enter__(self) -> 'Timer':
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()

    def start(self) -> None:
        self._began = time.perf_counter()
        self._total = None

    def stop(self) -> None:
        if self._began is None:
            raise RuntimeError("Timer.stop() called before start()")
        self._total = time.perf_counter() - self._began

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """Add the elapsed time of the block to section `name`."""
        began = time.perf_counter()
        try:
            yield
        finally:
            spent = time.perf_counter() - began
            self._sections[name] = self._sections.get(name, 0.0) + spent

    def result(self) -> dict[str, float]:
        """
        Total and per-section seconds.

        Raises:
            RuntimeError: If the timer has not been stopped
        """
        if self._total is None:
            raise RuntimeError("Timer.result() called before stop()")
        return {'total_seconds': self._total, **self._sections}
