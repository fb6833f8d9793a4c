"""Time elapsed between successive frames."""

from __future__ import annotations

import time
from typing import Callable


class TimeDelta:
    """Tracks the time, in seconds, between consecutive calls to :meth:`next`."""

    def __init__(self, clock: Callable[[], float] = time.perf_counter) -> None:
        self._clock = clock
        self._last = clock()
        self._last_recorded_delta = 0.0

    def next(self) -> None:
        """Record the time since the previous call (or since creation)."""
        now = self._clock()
        self._last_recorded_delta = now - self._last
        self._last = now

    def delta_time(self) -> float:
        """Return the last recorded delta in seconds."""
        return self._last_recorded_delta