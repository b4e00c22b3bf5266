"""Enumerated conversion contexts, generally used for error reporting."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ContextKind(Enum):
    """The kinds of conversion context."""

    LIBRARY = "Library"
    CELL = "Cell"
    ABSTRACT = "Abstract"
    IMPL = "Impl"
    INSTANCE = "Instance"
    ARRAY = "Array"
    UNITS = "Units"
    GEOMETRY = "Geometry"
    UNKNOWN = "Unknown"

    @property
    def is_named(self) -> bool:
        """Whether contexts of this kind carry a name."""
        return self in _NAMED_KINDS


_NAMED_KINDS = frozenset(
    {ContextKind.LIBRARY, ContextKind.CELL, ContextKind.INSTANCE, ContextKind.ARRAY}
)


@dataclass(frozen=True)
class ErrorContext:
    """A single conversion context: a kind, plus a name for the named kinds."""

    kind: ContextKind = ContextKind.UNKNOWN
    name: str | None = None

    def __post_init__(self) -> None:
        if self.kind.is_named and self.name is None:
            raise ValueError(f"{self.kind.value} context requires a name")
        if not self.kind.is_named and self.name is not None:
            raise ValueError(f"{self.kind.value} context does not take a name")

    @classmethod
    def library(cls, name: str) -> ErrorContext:
        """Context of the library named `name`."""
        return cls(ContextKind.LIBRARY, name)

    @classmethod
    def cell(cls, name: str) -> ErrorContext:
        """Context of the cell named `name`."""
        return cls(ContextKind.CELL, name)

    @classmethod
    def instance(cls, name: str) -> ErrorContext:
        """Context of the instance named `name`."""
        return cls(ContextKind.INSTANCE, name)

    @classmethod
    def array(cls, name: str) -> ErrorContext:
        """Context of the array named `name`."""
        return cls(ContextKind.ARRAY, name)

    def __str__(self) -> str:
        if self.name is None:
            return self.kind.value
        return f"{self.kind.value}({self.name})"