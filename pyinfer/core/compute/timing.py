"""
Wall-clock timing of backend phases.

A backend opens one Timer per solve, wraps each phase (observed statistic,
replicate loop, summaries) in a named section, and stores timer.result()
in Result.timing.
"""

import time
from contextlib import contextmanager
from typing import Iterator


class Timer:
    """
    Total elapsed time plus per-phase totals.

        timer = Timer()
        timer.start()
        with timer.section('bootstrap_replicates'):
            ...
        timer.stop()
        timer.result()   # {'total_seconds': ..., 'bootstrap_replicates': ...}

    Entering a section twice adds to its total.
    """

    def __init__(self):
        self._phases: dict[str, float] = {}
        self._t_start: float | None = None
        self._elapsed: float | None = None

    def start(self) -> None:
        self._t_start = time.perf_counter()

    def stop(self) -> None:
        if self._t_start is None:
            raise RuntimeError("Timer.stop() called before start()")
        self._elapsed = time.perf_counter() - self._t_start

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """Add the time spent inside the block to phase `name`."""
        t = time.perf_counter()
        try:
            yield
        finally:
            self._phases[name] = (
                self._phases.get(name, 0.0) + time.perf_counter() - t
            )

    def result(self) -> dict[str, float]:
        """'total_seconds' followed by the phase totals in entry order."""
        if self._elapsed is None:
            raise RuntimeError("Timer.result() called before stop()")
        return {'total_seconds': self._elapsed, **self._phases}


@contextmanager
def timed() -> Iterator[Timer]:
    """
    Time a block of user code.

        with timed() as timer:
            bootstrap(rents, 'mean', reps=10000)
        timer.result()['total_seconds']
    """
    timer = Timer()
    timer.start()
    try:
        yield timer
    finally:
        timer.stop()
