"""Owned resources with handles that notice when the owner has gone away."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

T = TypeVar("T")

_NULL: Any = object()


class ResourceDestroyedError(RuntimeError):
    """Raised when a null resource or a handle to a destroyed resource is used."""


class _Alloc:
    __slots__ = ("valid",)

    def __init__(self, valid: bool) -> None:
        self.valid = valid


def _type_name(data: object) -> str:
    return "null" if data is _NULL else type(data).__name__


class _Shared(Generic[T]):
    _data: Any
    _alloc: _Alloc

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, _Shared):
            return NotImplemented
        return (
            self.is_valid()  # type: ignore[attr-defined]
            and other.is_valid()  # type: ignore[attr-defined]
            and self._alloc is other._alloc
        )

    __hash__ = None  # type: ignore[assignment]


class Resource(_Shared[T]):
    """Sole owner of a value; handles to it become invalid once it is destroyed."""

    def __init__(self, data: T = _NULL) -> None:
        self._data = data
        self._alloc = _Alloc(data is not _NULL)

    def is_valid(self) -> bool:
        """Return True while the resource holds a value."""
        return self._data is not _NULL

    def _require(self) -> None:
        if self._data is _NULL:
            raise ResourceDestroyedError("Cannot use a null Resource")

    def take(self) -> T:
        """Remove and return the value, invalidating every handle."""
        self._require()
        data, self._data = self._data, _NULL
        self._alloc.valid = False
        self._alloc = _Alloc(False)
        return data

    def destroy(self) -> None:
        """Drop the value, invalidating every handle. A null resource is left as is."""
        if self._data is _NULL:
            return
        self._data = _NULL
        self._alloc.valid = False

    def get(self) -> T:
        """Return the owned value."""
        self._require()
        return self._data

    def handle(self) -> ResourceHandle[T]:
        """Return a read handle sharing this resource's validity."""
        self._require()
        return ResourceHandle(self._data, self._alloc)

    def handle_mut(self) -> ResourceHandleMut[T]:
        """Return a mutable handle sharing this resource's validity."""
        self._require()
        return ResourceHandleMut(self._data, self._alloc)

    def __repr__(self) -> str:
        return f"Resource({_type_name(self._data)}, valid={self.is_valid()})"


class _Handle(_Shared[T]):
    def __init__(self, data: T = _NULL, alloc: _Alloc | None = None) -> None:
        self._data = data
        self._alloc = alloc if alloc is not None else _Alloc(False)

    def _checked(self) -> T:
        if not self._alloc.valid:
            raise ResourceDestroyedError(
                f"Object of type {_type_name(self._data)} has been destroyed"
            )
        return self._data

    def __repr__(self) -> str:
        return f"{type(self).__name__}({_type_name(self._data)}, valid={self._alloc.valid})"


class ResourceHandle(_Handle[T]):
    """Read handle to a :class:`Resource`."""

    def is_valid(self) -> bool:
        """Return True while the owning resource still exists."""
        return self._alloc.valid

    def get(self) -> T:
        """Return the value of the owning resource."""
        return self._checked()


class ResourceHandleMut(_Handle[T]):
    """Mutable handle to a :class:`Resource`."""

    def is_valid(self) -> bool:
        """Return True while the owning resource still exists."""
        return self._alloc.valid

    def get(self) -> T:
        """Return the value of the owning resource."""
        return self._checked()

    def as_ref(self) -> ResourceHandle[T]:
        """Return a read handle to the same resource."""
        return ResourceHandle(self._data, self._alloc)