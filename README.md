# layoututils

Small building blocks for layout-processing code:

- **`layoututils.ptr`**: `Ptr` is a shared, lock-guarded reference that compares
  and hashes by identity. `PtrList` is a list of such references. Its `add` and
  `insert` return the new `Ptr`.
- **`layoututils.dep_order`**: puts graph nodes in dependency order, so that each
  item comes after everything it depends on. It raises `DependencyCycleError` when
  it finds a cycle.
- **`layoututils.enumstr`**: enums whose members pair with fixed strings
  (`to_str`, `from_str`, `str()`).
- **`layoututils.error`**: `ErrorHelper` and `unwrapper` route failures to an
  exception that the helper builds.
- **`layoututils.context`**: `ErrorContext` and `ContextKind` describe where a
  conversion failed.
- **`layoututils.ser`**: saves and loads plain data as JSON, YAML or TOML.

This is a library only. It provides no command-line program.

## Installation

```
pip install layoututils
```

## Examples

### String enums

```python
from layoututils.enumstr import enumstr

LightSwitch = enumstr("LightSwitch", {"On": "ON", "Off": "OFF"})

LightSwitch.On.to_str()          # "ON"
str(LightSwitch.Off)             # "OFF"
LightSwitch.from_str("OFF")      # LightSwitch.Off
LightSwitch.from_str("NEITHER")  # None
```

`from_str` is case-sensitive. `enumstr` also accepts a sequence of
`(variant, string)` pairs. It raises `TypeError` if any value is not a string.

### Shared pointers

```python
from layoututils.ptr import Ptr, PtrList

a, b = Ptr(43), Ptr(43)
assert a != b  # compared by identity, not by value

cells = PtrList()
p = cells.add(True)
with p.read() as value:
    assert value is True

with p.write() as guard:
    guard.value = False  # replaces the pointed-to value
```

`PtrList.from_owned(values)` wraps each value in a new `Ptr`.
`PtrList.from_ptrs(ptrs)` takes existing pointers. `append` adds an existing
`Ptr` and rejects anything else with `TypeError`.

### Dependency ordering

```python
from layoututils.dep_order import dep_order

deps = {"top": ["mid"], "mid": ["leaf"], "leaf": []}
dep_order(["top"], lambda item: deps[item])  # ["leaf", "mid", "top"]
```

For more control, subclass `DepOrder` and implement `process(item, orderer)`.
It should call `orderer.push(dep)` for each direct dependency. Then call
`order(items)` to get the ordered list.

When a cycle is found, the orderer raises the exception that `fail()` returns.
By default this is a `DependencyCycleError`. Override `fail()` to return an
error of your own.

### Error helpers

```python
from layoututils.error import ErrorHelper, unwrapper

class Converter(ErrorHelper):
    def err(self, msg):
        return ValueError(f"conversion failed: {msg}")

c = Converter()
c.unwrap(5, "missing")           # 5
c.check(1 + 1 == 2, "bad math")  # passes
unwrapper(None, c, "missing")    # raises ValueError("conversion failed: missing")

with c.guard("parsing"):
    int("x")                     # re-raised as the helper's ValueError
```

`unwrapper` also fails when it is given an exception instance. It chains that
instance as the cause.

### Error contexts

```python
from layoututils.context import ErrorContext, ContextKind

str(ErrorContext.cell("inv"))          # "Cell(inv)"
str(ErrorContext(ContextKind.UNITS))   # "Units"
```

Library, cell, instance and array contexts require a name. The other kinds must
not be given one. Breaking either rule raises `ValueError`.

### Serialization

```python
from layoututils.ser import SerializationFormat, save, load

save({"name": "lib1", "cells": 3}, "lib.yaml", SerializationFormat.YAML)
data = load("lib.yaml", SerializationFormat.YAML)

SerializationFormat.JSON.from_str('{"a": 1}')  # {"a": 1}
SerializationFormat.TOML.to_string({"a": 1})   # 'a = 1\n'
```

Each format also has `save(data, fname)` and `open(fname)` methods.
`from_str` removes any common indentation before parsing. Failures raise
`SerializationError`.

Subclassing `SerdeFile` adds `save(fname, fmt)` and the classmethod
`open(fname, fmt)` to a class. Dataclasses work as they are: they are saved via
`dataclasses.asdict` and loaded by passing the mapping's keys as keyword
arguments. Other classes override `to_data` and `from_data`.

## Running the tests

```
pip install -e ".[test]"
pytest
```