#!filepath: linfit/observability/timer.py
from __future__ import annotations

import time
from contextlib import contextmanager
from typing import Dict


class Timer:
    """
    Named stopwatch that keeps lap totals.

    start(name) / end(name) bracket one lap; end returns that lap in seconds
    and adds it to the running total for name. An end without a matching
    start, or any call on a disabled timer, yields 0.0 and records nothing.
    """

    def __init__(self, enabled: bool = True):
        self.enabled = enabled
        self._running: Dict[str, float] = {}
        self._total: Dict[str, float] = {}
        self._laps: Dict[str, int] = {}

    def start(self, name: str):
        if self.enabled:
            self._running[name] = time.perf_counter()

    def end(self, name: str) -> float:
        if not self.enabled:
            return 0.0
        started = self._running.pop(name, None)
        if started is None:
            return 0.0

        lap = time.perf_counter() - started
        self._total[name] = self._total.get(name, 0.0) + lap
        self._laps[name] = self._laps.get(name, 0) + 1
        return lap

    @contextmanager
    def lap(self, name: str):
        self.start(name)
        try:
            yield
        finally:
            self.end(name)

    def total(self, name: str) -> float:
        return self._total.get(name, 0.0)

    def laps(self, name: str) -> int:
        return self._laps.get(name, 0)

    def is_running(self, name: str) -> bool:
        return name in self._running
