"""Dependency-ordering of graph-like collections."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Hashable, Iterable
from typing import Any


class DependencyCycleError(Exception):
    """Raised when a dependency cycle is detected."""


class DepOrder(ABC):
    """
    Dependency-ordering processor.

    Subclasses implement `process`, which pushes each direct dependency of `item`
    onto the given orderer. `order` then returns all items, dependencies first.
    """

    def order(self, items: Iterable[Hashable]) -> list[Any]:
        """Dependency-order all entries in `items`."""
        return DepOrderer(self).order(items)

    @abstractmethod
    def process(self, item: Any, orderer: DepOrderer) -> None:
        """Push each direct dependency of `item` onto `orderer`."""

    def fail(self) -> Exception:
        """Failure handler. Returns the error to raise for a detected cycle."""
        return DependencyCycleError(
            f"dependency cycle detected by {type(self).__name__}"
        )


class DepOrderer:
    """Depth-first ordering helper driven by a `DepOrder` processor."""

    def __init__(self, processor: DepOrder) -> None:
        self._processor = processor
        self._stack: list[Any] = []
        self._seen: set[Any] = set()
        self._pending: set[Any] = set()

    def push(self, item: Any) -> None:
        """Push `item`'s dependencies, and then `item` itself."""
        if item in self._seen:
            return
        if item in self._pending:
            raise self._processor.fail()
        self._pending.add(item)
        self._processor.process(item, self)
        if item not in self._pending:
            raise self._processor.fail()
        self._pending.remove(item)
        self._seen.add(item)
        self._stack.append(item)

    def order(self, items: Iterable[Any]) -> list[Any]:
        """Push every entry of `items` and return the ordered result."""
        for item in items:
            self.push(item)
        return list(self._stack)


class _CallableOrder(DepOrder):
    def __init__(self, dependencies: Callable[[Any], Iterable[Any]]) -> None:
        self._dependencies = dependencies

    def process(self, item: Any, orderer: DepOrderer) -> None:
        for dep in self._dependencies(item):
            orderer.push(dep)


def dep_order(
    items: Iterable[Any], dependencies: Callable[[Any], Iterable[Any]]
) -> list[Any]:
    """Dependency-order `items`, where `dependencies(item)` yields an item's direct dependencies."""
    return _CallableOrder(dependencies).order(items)