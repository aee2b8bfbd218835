"""Value model for json-diff-ng.

Values are plain Python JSON values, as produced by ``json.loads``:

    None          -> NULL
    bool          -> BOOL
    int / float   -> NUMBER
    str           -> STRING
    list / tuple  -> ARRAY
    dict          -> OBJECT

Paths are tuples of path elements: ``str`` for object keys and ``int`` for
array indices. They render as ``.key`` and ``.[index]``.
"""
from __future__ import annotations

import math
from enum import Enum
from typing import Any, Tuple, Union

PathElement = Union[str, int]
Path = Tuple[PathElement, ...]

ROOT: Path = ()


class ValueKind(str, Enum):
    """Kind of a JSON value."""

    NULL = "null"
    BOOL = "bool"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


def kind_of(value: Any) -> ValueKind:
    """Return the kind of a JSON value.

    bool is checked before int: True is never a number here.
    """
    if value is None:
        return ValueKind.NULL
    if isinstance(value, bool):
        return ValueKind.BOOL
    if isinstance(value, (int, float)):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, (list, tuple)):
        return ValueKind.ARRAY
    if isinstance(value, dict):
        return ValueKind.OBJECT
    raise TypeError(f"not a JSON value: {type(value).__name__}")


def is_nan(value: Any) -> bool:
    return isinstance(value, float) and math.isnan(value)


def render_element(element: PathElement) -> str:
    if isinstance(element, int):
        return f".[{element}]"
    return f".{element}"


def render_path(path: Path) -> str:
    """Render a path, e.g. ``("a", 0, "b")`` -> ``.a.[0].b``."""
    return "".join(render_element(e) for e in path)
