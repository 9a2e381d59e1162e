# -*- coding: utf-8 -*-
"""
Wall-clock timer for measuring solver runs.

    timer = Timer()
    soln = exhaustive_max_defense(armors, 500)
    elapsed = timer.elapsed()

or

    with Timer() as t:
        soln = greedy_max_defense(armors, 500)
    t.elapsed()   # frozen at block exit
"""

from __future__ import annotations
import time
from typing import Optional


class Timer:
    """Starts on construction. Purely observational."""

    def __init__(self) -> None:
        self._start = time.perf_counter()
        self._stop: Optional[float] = None

    def reset(self) -> None:
        self._start = time.perf_counter()
        self._stop = None

    def elapsed(self) -> float:
        """Seconds since start (or until the `with` block exited)."""
        end = self._stop if self._stop is not None else time.perf_counter()
        return end - self._start

    def __enter__(self) -> "Timer":
        self.reset()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self._stop = time.perf_counter()
