"""Saving and loading plain data in JSON, YAML and TOML."""

from __future__ import annotations

import dataclasses
import json
import textwrap
import tomllib
from enum import Enum
from os import PathLike
from pathlib import Path
from typing import Any, TypeVar

import tomli_w
import yaml

S = TypeVar("S", bound="SerdeFile")

StrPath = str | PathLike[str]


class SerializationError(Exception):
    """Raised when data cannot be serialized, parsed, written or read."""


class SerializationFormat(Enum):
    """First-class supported serialization formats."""

    JSON = "json"
    YAML = "yaml"
    TOML = "toml"

    def to_string(self, data: Any) -> str:
        """Serialize `data` to a string in this format."""
        data = _plain(data)
        try:
            match self:
                case SerializationFormat.JSON:
                    return json.dumps(data, indent=2)
                case SerializationFormat.YAML:
                    return yaml.safe_dump(data, sort_keys=False, default_flow_style=False)
                case SerializationFormat.TOML:
                    return tomli_w.dumps(data)
        except (TypeError, ValueError, yaml.YAMLError) as exc:
            raise SerializationError(str(exc)) from exc
        raise AssertionError(self)

    def from_str(self, s: str) -> Any:
        """Parse string `s`, after removing any common leading indentation."""
        return self._parse(textwrap.dedent(s))

    def _parse(self, s: str) -> Any:
        try:
            match self:
                case SerializationFormat.JSON:
                    return json.loads(s)
                case SerializationFormat.YAML:
                    return yaml.safe_load(s)
                case SerializationFormat.TOML:
                    return tomllib.loads(s)
        except (ValueError, yaml.YAMLError) as exc:
            raise SerializationError(str(exc)) from exc
        raise AssertionError(self)

    def save(self, data: Any, fname: StrPath) -> None:
        """Save `data` to file `fname` in this format."""
        save(data, fname, self)

    def open(self, fname: StrPath) -> Any:
        """Load this format's content from file `fname`."""
        return load(fname, self)


class SerdeFile:
    """
    Mixin adding `save` and `open` to a serializable type.

    Dataclasses work as they are; other types override `to_data` and `from_data`.
    """

    def to_data(self) -> Any:
        """Plain data representing this object."""
        if dataclasses.is_dataclass(self) and not isinstance(self, type):
            return dataclasses.asdict(self)
        raise TypeError(f"{type(self).__name__} must define to_data")

    @classmethod
    def from_data(cls: type[S], data: Any) -> S:
        """Build an instance from plain data."""
        if not isinstance(data, dict):
            raise SerializationError(
                f"expected a mapping for {cls.__name__}, got {type(data).__name__}"
            )
        try:
            return cls(**data)
        except TypeError as exc:
            raise SerializationError(str(exc)) from exc

    def save(self, fname: StrPath, fmt: SerializationFormat) -> None:
        """Save in format `fmt` to file `fname`."""
        save(self, fname, fmt)

    @classmethod
    def open(cls: type[S], fname: StrPath, fmt: SerializationFormat) -> S:
        """Load an instance from `fmt`-format file `fname`."""
        return cls.from_data(load(fname, fmt))


def _plain(data: Any) -> Any:
    if isinstance(data, SerdeFile):
        return data.to_data()
    return data


def save(data: Any, fname: StrPath, fmt: SerializationFormat) -> None:
    """Save `data` to file `fname` in format `fmt`."""
    text = fmt.to_string(data)
    try:
        Path(fname).write_text(text, encoding="utf-8")
    except OSError as exc:
        raise SerializationError(str(exc)) from exc


def load(fname: StrPath, fmt: SerializationFormat) -> Any:
    """Load `fmt`-formatted content from file `fname`."""
    try:
        text = Path(fname).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise SerializationError(str(exc)) from exc
    return fmt._parse(text)