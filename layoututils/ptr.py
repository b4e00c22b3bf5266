"""Shared, lock-guarded pointers compared and hashed by identity."""

from __future__ import annotations

import threading
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from typing import Any, Generic, TypeVar, overload

T = TypeVar("T")


class PtrGuard(Generic[T]):
    """Write access to a pointer's value; assign `value` to replace it."""

    __slots__ = ("value",)

    def __init__(self, value: T) -> None:
        self.value = value


class Ptr(Generic[T]):
    """
    Shared pointer to a value, guarded by a lock.

    Equality and hashing are by identity: two pointers to equal values are
    distinct, while references to the same pointer compare equal. This makes
    pointers usable as keys when walking hierarchies of shared nodes.
    """

    __slots__ = ("_value", "_lock", "__weakref__")

    def __init__(self, value: T) -> None:
        self._value = value
        self._lock = threading.RLock()

    @contextmanager
    def read(self) -> Iterator[T]:
        """Hold the lock and yield the pointed-to value."""
        with self._lock:
            yield self._value

    @contextmanager
    def write(self) -> Iterator[PtrGuard[T]]:
        """Hold the lock and yield a guard whose `value` may be modified or replaced."""
        with self._lock:
            guard = PtrGuard(self._value)
            yield guard
            self._value = guard.value

    def __repr__(self) -> str:
        return f"Ptr({self._value!r})"


class PtrList(Generic[T]):
    """List of `Ptr`s, with insertion methods that return the new pointer."""

    __slots__ = ("_ptrs",)

    def __init__(self, ptrs: Iterable[Ptr[T]] | None = None) -> None:
        self._ptrs: list[Ptr[T]] = list(ptrs) if ptrs is not None else []

    @classmethod
    def from_ptrs(cls, ptrs: Iterable[Ptr[T]]) -> PtrList[T]:
        """Create from existing pointers."""
        return cls(ptrs)

    @classmethod
    def from_owned(cls, vals: Iterable[T]) -> PtrList[T]:
        """Create from plain values, wrapping each in a new pointer."""
        return cls(Ptr(v) for v in vals)

    def add(self, value: T) -> Ptr[T]:
        """Wrap `value` in a new pointer, append it, and return the pointer."""
        ptr = Ptr(value)
        self._ptrs.append(ptr)
        return ptr

    def insert(self, value: T) -> Ptr[T]:
        """Alias for `add`."""
        return self.add(value)

    def append(self, ptr: Ptr[T]) -> None:
        """Append an existing pointer."""
        if not isinstance(ptr, Ptr):
            raise TypeError(f"expected a Ptr, not {type(ptr).__name__}")
        self._ptrs.append(ptr)

    def __len__(self) -> int:
        return len(self._ptrs)

    @overload
    def __getitem__(self, index: int) -> Ptr[T]: ...

    @overload
    def __getitem__(self, index: slice) -> list[Ptr[T]]: ...

    def __getitem__(self, index: Any) -> Any:
        return self._ptrs[index]

    def __iter__(self) -> Iterator[Ptr[T]]:
        return iter(self._ptrs)

    def __repr__(self) -> str:
        return f"PtrList({self._ptrs!r})"