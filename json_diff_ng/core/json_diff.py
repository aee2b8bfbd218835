"""Recursive structural diff for json-diff-ng.

Walks two JSON values in lockstep and records every difference into a
DiffResult, labelled with the path at which it was found.

Rules:
- Same kind, equal scalars: nothing recorded
- Different kinds or unequal scalars: ValueMismatch, no recursion
- int vs float treated as the same numeric kind (1 == 1.0)
- NaN equals NaN
- dict: left keys in order (left-only or recursed), then right-only keys
- list: by index; shared indices recursed, tail entries are one-sided

Recursion depth equals nesting depth of the inputs; documents nested deeper
than the interpreter recursion limit raise RecursionError.
"""
from __future__ import annotations

from typing import Any, Optional

from .result import DiffResult, KeyOnlyInLeft, KeyOnlyInRight, ValueMismatch
from .types import ROOT, Path, ValueKind, is_nan, kind_of


def diff_values(
    left: Any, right: Any, result: Optional[DiffResult] = None, path: Path = ROOT
) -> DiffResult:
    """Diff two values, appending into ``result`` (a new one if omitted)."""
    if result is None:
        result = DiffResult()

    kind = kind_of(left)
    if kind is not kind_of(right):
        result.add(ValueMismatch(path, left, right))
        return result

    if kind is ValueKind.OBJECT:
        for key, value in left.items():
            if key in right:
                diff_values(value, right[key], result, path + (key,))
            else:
                result.add(KeyOnlyInLeft(path + (key,), value))
        for key, value in right.items():
            if key not in left:
                result.add(KeyOnlyInRight(path + (key,), value))
        return result

    if kind is ValueKind.ARRAY:
        for idx in range(max(len(left), len(right))):
            if idx >= len(right):
                result.add(KeyOnlyInLeft(path + (idx,), left[idx]))
            elif idx >= len(left):
                result.add(KeyOnlyInRight(path + (idx,), right[idx]))
            else:
                diff_values(left[idx], right[idx], result, path + (idx,))
        return result

    if left != right and not (is_nan(left) and is_nan(right)):
        result.add(ValueMismatch(path, left, right))
    return result
