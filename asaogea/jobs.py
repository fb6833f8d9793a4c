"""A small pool of worker threads that run queued jobs and hand back their results."""

from __future__ import annotations

import logging
import os
import threading
from collections import deque
from typing import Any, Callable, Generic, TypeVar

R = TypeVar("R")

_log = logging.getLogger(__name__)

_PENDING: Any = object()


class OutOfTaskError(RuntimeError):
    """Raised when a worker is woken up but the queue holds no job."""


class _ResultSlot:
    __slots__ = ("cond", "value", "error")

    def __init__(self) -> None:
        self.cond = threading.Condition()
        self.value: Any = _PENDING
        self.error: BaseException | None = None


class Job(Generic[R]):
    """A callable to run once on a worker, with a slot for its result."""

    def __init__(self, callback: Callable[[], R]) -> None:
        self._callback: Callable[[], R] | None = callback
        self._slot = _ResultSlot()

    def execute(self) -> None:
        """Run the callback (only the first time) and publish its result."""
        callback, self._callback = self._callback, None
        if callback is None:
            return
        try:
            result = callback()
        except Exception as error:  # handed over to whoever waits on the job
            with self._slot.cond:
                self._slot.error = error
                self._slot.cond.notify_all()
            return
        with self._slot.cond:
            self._slot.value = result
            self._slot.cond.notify_all()


class JobHandle(Generic[R]):
    """Access to the result of a pushed job."""

    def __init__(self, slot: _ResultSlot) -> None:
        self._slot = slot

    def wait(self) -> R:
        """Block until the job has run, then take and return its result.

        An exception raised by the job is raised here instead.
        """
        slot = self._slot
        with slot.cond:
            while slot.value is _PENDING and slot.error is None:
                slot.cond.wait()
            if slot.error is not None:
                error, slot.error = slot.error, None
                raise error
            value, slot.value = slot.value, _PENDING
            return value

    def get_ref(self) -> R | None:
        """Return the result if the job has finished, otherwise None; never blocks."""
        slot = self._slot
        with slot.cond:
            return None if slot.value is _PENDING else slot.value


class JobPool:
    """FIFO queue of jobs guarded by a counting semaphore."""

    def __init__(self) -> None:
        self._jobs: deque[Job[Any]] = deque()
        self._cond = threading.Condition()
        self._available = 0

    def push(self, job: Job[R]) -> JobHandle[R]:
        """Queue a job and wake one waiting worker."""
        with self._cond:
            self._jobs.append(job)
            self._available += 1
            self._cond.notify()
        return JobHandle(job._slot)

    def pop(self) -> Job[Any]:
        """Wait for a wake-up and return the oldest job.

        Raises OutOfTaskError when woken with an empty queue.
        """
        with self._cond:
            while self._available == 0:
                self._cond.wait()
            self._available -= 1
            try:
                return self._jobs.popleft()
            except IndexError:
                raise OutOfTaskError("Out of task") from None

    def free(self, num_threads: int) -> None:
        """Wake ``num_threads`` waiters without giving them a job."""
        with self._cond:
            self._available += num_threads
            self._cond.notify(num_threads)


def _work(pool: JobPool) -> None:
    while True:
        try:
            job = pool.pop()
        except OutOfTaskError as error:
            _log.debug("Worker failed to acquire task : %s", error)
            return
        job.execute()


class JobSystem:
    """A fixed set of worker threads sharing one :class:`JobPool`."""

    def __init__(self, job_count: int) -> None:
        self._pool = JobPool()
        self._workers = [
            threading.Thread(target=_work, args=(self._pool,), daemon=True)
            for _ in range(job_count)
        ]
        for worker in self._workers:
            worker.start()
        self._closed = False

    @staticmethod
    def num_cpus() -> int:
        """Return the number of logical CPUs."""
        return os.cpu_count() or 1

    def push(self, job: Job[R]) -> JobHandle[R]:
        """Queue a job for the workers."""
        if self._closed:
            raise RuntimeError("Job system has been shut down")
        return self._pool.push(job)

    def shutdown(self) -> None:
        """Let the workers finish queued jobs, then stop and join them."""
        if self._closed:
            return
        self._closed = True
        self._pool.free(len(self._workers))
        for worker in self._workers:
            worker.join()

    def __enter__(self) -> JobSystem:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.shutdown()