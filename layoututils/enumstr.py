"""Enumerations paired with string values, as common in text layout formats."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from enum import Enum


class EnumStr(Enum):
    """Enumeration whose members each carry a paired string value."""

    def to_str(self) -> str:
        """The member's paired string value."""
        return self.value

    @classmethod
    def from_str(cls, txt: str) -> EnumStr | None:
        """The member whose string value is `txt`, case-sensitively; None if there is none."""
        for member in cls:
            if member.value == txt:
                return member
        return None

    def __str__(self) -> str:
        return self.value


def enumstr(
    name: str, pairs: Mapping[str, str] | Iterable[tuple[str, str]]
) -> type[EnumStr]:
    """Create an `EnumStr` subclass named `name` from (variant, string-value) pairs."""
    items = list(pairs.items()) if isinstance(pairs, Mapping) else list(pairs)
    for variant, strval in items:
        if not isinstance(strval, str):
            raise TypeError(f"value of {variant!r} must be a string, not {strval!r}")
    return EnumStr(name, items)