"""Error-helper utilities for conversion tree-walkers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from contextlib import contextmanager
from typing import NoReturn, TypeVar

T = TypeVar("T")


class ErrorHelper(ABC):
    """
    Mixin for types that report failures with their own state attached.

    Implementers define `err`, which builds the exception for a message.
    """

    @abstractmethod
    def err(self, msg: str) -> Exception:
        """Create the exception for message `msg`."""

    def fail(self, msg: str) -> NoReturn:
        """Raise the exception built by `err`."""
        raise self.err(msg)

    def unwrap(self, opt: T | None, msg: str) -> T:
        """Return `opt` if it is not None, and fail with `msg` otherwise."""
        if opt is None:
            self.fail(msg)
        return opt

    def check(self, b: bool, msg: str) -> None:
        """Fail with `msg` unless `b` holds."""
        if not b:
            self.fail(msg)

    @contextmanager
    def guard(self, msg: str) -> Iterator[None]:
        """Turn any exception raised in the block into this helper's error."""
        try:
            yield
        except Exception as exc:
            raise self.err(msg) from exc


def unwrapper(value: T | None | BaseException, helper: ErrorHelper, msg: str) -> T:
    """
    Unwrap `value` through `helper`.

    None and exception instances fail through `helper` with `msg`;
    any other value is returned unchanged.
    """
    if value is None:
        helper.fail(msg)
    if isinstance(value, BaseException):
        raise helper.err(msg) from value
    return value