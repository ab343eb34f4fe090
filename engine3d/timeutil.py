"""Elapsed and frame-delta time at millisecond resolution."""

from __future__ import annotations

import time
from typing import Callable

__all__ = ["Clock", "get_time", "get_delta_time"]

_NS_PER_MS = 1_000_000


def _seconds(elapsed_ns: int) -> float:
    return (elapsed_ns // _NS_PER_MS) / 1000.0


class Clock:
    """Measures time in whole milliseconds from an integer nanosecond source.

    Both readings start counting from their own first call.
    """

    def __init__(self, source: Callable[[], int] = time.perf_counter_ns) -> None:
        self._source = source
        self._start: int | None = None
        self._last: int | None = None

    def time(self) -> float:
        """Seconds since the first call to this method."""
        now = self._source()
        if self._start is None:
            self._start = now
        return _seconds(now - self._start)

    def delta_time(self) -> float:
        """Seconds since the previous call to this method; 0.0 the first time."""
        now = self._source()
        if self._last is None:
            self._last = now
        elapsed = now - self._last
        self._last = now
        return _seconds(elapsed)


_clock = Clock()


def get_time() -> float:
    return _clock.time()


def get_delta_time() -> float:
    return _clock.delta_time()