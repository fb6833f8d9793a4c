"""A readers-writer lock and shared, weakly referenceable handles to it."""

from __future__ import annotations

import threading
import weakref
from typing import Generic, TypeVar

T = TypeVar("T")


class LockPoisonedError(RuntimeError):
    """Raised when a lock is used after an exception escaped a write section."""


class ReadGuard(Generic[T]):
    """Context manager holding shared access; ``value`` is the protected data."""

    def __init__(self, lock: RwSLock[T]) -> None:
        self._lock = lock
        self._held = False

    @property
    def value(self) -> T:
        if not self._held:
            raise RuntimeError("Read guard is not held")
        return self._lock._data

    def __enter__(self) -> ReadGuard[T]:
        self._lock._acquire_read()
        self._held = True
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self._held = False
        self._lock._release_read()


class WriteGuard(Generic[T]):
    """Context manager holding exclusive access; ``value`` may be read or replaced."""

    def __init__(self, lock: RwSLock[T]) -> None:
        self._lock = lock
        self._held = False

    @property
    def value(self) -> T:
        if not self._held:
            raise RuntimeError("Write guard is not held")
        return self._lock._data

    @value.setter
    def value(self, new: T) -> None:
        if not self._held:
            raise RuntimeError("Write guard is not held")
        self._lock._data = new

    def __enter__(self) -> WriteGuard[T]:
        self._lock._acquire_write()
        self._held = True
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self._held = False
        self._lock._release_write(poison=exc_type is not None)


class RwSLock(Generic[T]):
    """Readers-writer lock around a value; many readers or one writer at a time."""

    def __init__(self, data: T) -> None:
        self._data = data
        self._cond = threading.Condition()
        self._readers = 0
        self._writer = False
        self._waiting_writers = 0
        self._poisoned = False

    def read(self) -> ReadGuard[T]:
        """Return a guard granting shared access when entered."""
        return ReadGuard(self)

    def write(self) -> WriteGuard[T]:
        """Return a guard granting exclusive access when entered."""
        return WriteGuard(self)

    def _acquire_read(self) -> None:
        with self._cond:
            while self._writer or self._waiting_writers:
                self._cond.wait()
            if self._poisoned:
                self._cond.notify_all()
                raise LockPoisonedError("Read failed: lock poisoned")
            self._readers += 1

    def _release_read(self) -> None:
        with self._cond:
            self._readers -= 1
            if self._readers == 0:
                self._cond.notify_all()

    def _acquire_write(self) -> None:
        with self._cond:
            self._waiting_writers += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._waiting_writers -= 1
            if self._poisoned:
                self._cond.notify_all()
                raise LockPoisonedError("Write failed: lock poisoned")
            self._writer = True

    def _release_write(self, poison: bool) -> None:
        with self._cond:
            self._writer = False
            if poison:
                self._poisoned = True
            self._cond.notify_all()


class RwArc(Generic[T]):
    """Shared owner of a locked value."""

    def __init__(self, data: T) -> None:
        self._lock: RwSLock[T] = RwSLock(data)

    @classmethod
    def _from_lock(cls, lock: RwSLock[T]) -> RwArc[T]:
        arc = cls.__new__(cls)
        arc._lock = lock
        return arc

    def read(self) -> ReadGuard[T]:
        """Return a guard granting shared access."""
        return self._lock.read()

    def write(self) -> WriteGuard[T]:
        """Return a guard granting exclusive access."""
        return self._lock.write()

    def downgrade(self) -> RwWeak[T]:
        """Return a weak reference that can be upgraded back to a full owner."""
        return RwWeak(weakref.ref(self._lock))

    def downgrade_read_only(self) -> RwWeakReadOnly[T]:
        """Return a weak reference that upgrades to a read-only owner."""
        return RwWeakReadOnly(weakref.ref(self._lock))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, (RwArc, RwArcReadOnly)):
            return NotImplemented
        return self._lock is other._lock

    def __hash__(self) -> int:
        return id(self._lock)


class RwArcReadOnly(Generic[T]):
    """Shared owner of a locked value that only grants read access."""

    def __init__(self, lock: RwSLock[T]) -> None:
        self._lock = lock

    def read(self) -> ReadGuard[T]:
        """Return a guard granting shared access."""
        return self._lock.read()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, (RwArc, RwArcReadOnly)):
            return NotImplemented
        return self._lock is other._lock

    def __hash__(self) -> int:
        return id(self._lock)


def _resolve(ref: weakref.ReferenceType | None) -> RwSLock:
    lock = ref() if ref is not None else None
    if lock is None:
        raise ReferenceError("Base object was destroyed")
    return lock


class RwWeak(Generic[T]):
    """Weak reference to a :class:`RwArc` value."""

    def __init__(self, ref: weakref.ReferenceType | None = None) -> None:
        self._ref = ref

    def upgrade(self) -> RwArc[T]:
        """Return a full owner, or raise ReferenceError if the value is gone."""
        return RwArc._from_lock(_resolve(self._ref))


class RwWeakReadOnly(Generic[T]):
    """Weak reference that upgrades to a :class:`RwArcReadOnly`."""

    def __init__(self, ref: weakref.ReferenceType | None = None) -> None:
        self._ref = ref

    def upgrade(self) -> RwArcReadOnly[T]:
        """Return a read-only owner, or raise ReferenceError if the value is gone."""
        return RwArcReadOnly(_resolve(self._ref))