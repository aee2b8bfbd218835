"""Deterministic canonicalization (deep sort) for json-diff-ng.

Normalizes array order and object key order so that two values which only
differ in ordering compare equal.

Guarantees:
- canonicalize(v) never mutates v
- canonicalize(canonicalize(v)) == canonicalize(v)
- Arrays are sorted by compare_order over their canonicalized elements
- Object keys come out in sorted order

Ordering across kinds is fixed:

    null < object < bool < number < string < array

Within a kind: natural order for bool, number and string; arrays compare
element-wise with the shorter array first on a common prefix; objects
compare as their key-sorted (key, value) pairs, key first, then value,
shorter first on a common prefix. NaN sorts after every other number.
"""
from __future__ import annotations

import functools
from typing import Any, Dict, List

from .types import ValueKind, is_nan, kind_of

KIND_RANK: Dict[ValueKind, int] = {
    ValueKind.NULL: 0,
    ValueKind.OBJECT: 1,
    ValueKind.BOOL: 2,
    ValueKind.NUMBER: 3,
    ValueKind.STRING: 4,
    ValueKind.ARRAY: 5,
}


def canonicalize(value: Any) -> Any:
    """Return a deep-sorted copy of a JSON value."""
    kind = kind_of(value)
    if kind is ValueKind.ARRAY:
        return sorted((canonicalize(v) for v in value), key=sort_key)
    if kind is ValueKind.OBJECT:
        return {k: canonicalize(value[k]) for k in sorted(value)}
    return value


def compare_order(a: Any, b: Any) -> int:
    """Three-way comparison of two values under the canonical order.

    Arrays are compared element by element as given, so callers should pass
    canonicalized values for a result that ignores array order.

    Returns:
        -1, 0 or 1
    """
    kind_a = kind_of(a)
    kind_b = kind_of(b)
    if kind_a is not kind_b:
        return _cmp(KIND_RANK[kind_a], KIND_RANK[kind_b])
    if kind_a is ValueKind.NULL:
        return 0
    if kind_a is ValueKind.ARRAY:
        return _compare_sequences(list(a), list(b))
    if kind_a is ValueKind.OBJECT:
        return _compare_items(sorted(a.items()), sorted(b.items()))
    if kind_a is ValueKind.NUMBER:
        return _compare_numbers(a, b)
    return _cmp(a, b)


sort_key = functools.cmp_to_key(compare_order)


def _cmp(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def _compare_numbers(a: Any, b: Any) -> int:
    # NaN sorts after every other number and equal to itself.
    nan_a = is_nan(a)
    nan_b = is_nan(b)
    if nan_a or nan_b:
        return _cmp(nan_a, nan_b)
    return _cmp(a, b)


def _compare_sequences(a: List[Any], b: List[Any]) -> int:
    for x, y in zip(a, b):
        result = compare_order(x, y)
        if result:
            return result
    return _cmp(len(a), len(b))


def _compare_items(a: List[Any], b: List[Any]) -> int:
    for (key_a, value_a), (key_b, value_b) in zip(a, b):
        result = _cmp(key_a, key_b) or compare_order(value_a, value_b)
        if result:
            return result
    return _cmp(len(a), len(b))
