"""Per-frame timing records collected by a process-wide profiler."""

from __future__ import annotations

import dataclasses
import threading
import time
from contextlib import contextmanager
from dataclasses import dataclass
from typing import ClassVar, Iterator


@dataclass
class RecordData:
    """One finished measurement: a name, a start time and the time it took (seconds)."""

    name: str
    start: float
    elapsed: float = 0.0

    def duration(self) -> float:
        """Return the measured time in seconds."""
        return self.elapsed


class Record:
    """A running measurement; finish it with :meth:`end` or a ``with`` block."""

    def __init__(self, profiler: Profiler, name: str) -> None:
        self._profiler = profiler
        self._data: RecordData | None = RecordData(name=name, start=time.perf_counter())

    def end(self) -> None:
        """Stop the measurement and store it in the profiler's current frame."""
        data, self._data = self._data, None
        if data is None:
            return
        data.elapsed = time.perf_counter() - data.start
        self._profiler._push(data)

    def __enter__(self) -> Record:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.end()


class Profiler:
    """Collects records for the current frame and keeps the finished frames."""

    _instance: ClassVar[Profiler | None] = None

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._history: list[list[RecordData]] = []
        self._current: list[RecordData] | None = None

    @classmethod
    def init(cls) -> Profiler:
        """Create (or replace) the global profiler and return it."""
        cls._instance = cls()
        return cls._instance

    @classmethod
    def get(cls) -> Profiler:
        """Return the global profiler; it must have been created with :meth:`init`."""
        if cls._instance is None:
            raise RuntimeError("Profiler has not been initialized; call Profiler.init()")
        return cls._instance

    def new_frame(self) -> None:
        """Move the current frame into the history and start an empty one."""
        with self._lock:
            if self._current is None:
                return
            self._history.append(self._current)
            self._current = []

    def record(self, name: str) -> Record:
        """Start a measurement named ``name``."""
        return Record(self, name)

    def enable(self, enabled: bool) -> None:
        """Turn recording on (with an empty frame) or off (dropping the frame)."""
        with self._lock:
            self._current = [] if enabled else None

    def history(self) -> list[list[RecordData]]:
        """Return a copy of all finished frames, oldest first."""
        with self._lock:
            return [[dataclasses.replace(r) for r in frame] for frame in self._history]

    def current(self) -> list[RecordData]:
        """Return a copy of the records of the frame in progress."""
        with self._lock:
            if self._current is None:
                return []
            return [dataclasses.replace(r) for r in self._current]

    def clear(self) -> None:
        """Forget the history and empty the current frame if recording."""
        with self._lock:
            self._history.clear()
            if self._current is not None:
                self._current = []

    def _push(self, data: RecordData) -> None:
        with self._lock:
            if self._current is not None:
                self._current.append(data)


@contextmanager
def measure(name: str) -> Iterator[Record]:
    """Measure the enclosed block with the global profiler."""
    record = Profiler.get().record(name)
    try:
        yield record
    finally:
        record.end()