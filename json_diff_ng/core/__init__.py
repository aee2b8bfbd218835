"""Core types and logic for json-diff-ng."""

from .canon import canonicalize, compare_order, sort_key
from .compare import compare_strs, compare_values, parse_json
from .errors import JsonDiffError, ParsingError, PatternError
from .json_diff import diff_values
from .key_filter import KeyFilter, compile_patterns, exclude_keys
from .result import (
    DiffEntry,
    DiffResult,
    DiffType,
    KeyOnlyInLeft,
    KeyOnlyInRight,
    ValueMismatch,
)
from .types import Path, PathElement, ValueKind, kind_of, render_path

__all__ = [
    # Value model
    "Path",
    "PathElement",
    "ValueKind",
    "kind_of",
    "render_path",
    # Errors
    "JsonDiffError",
    "ParsingError",
    "PatternError",
    # Key exclusion
    "KeyFilter",
    "compile_patterns",
    "exclude_keys",
    # Canonicalization
    "canonicalize",
    "compare_order",
    "sort_key",
    # Diff
    "diff_values",
    "DiffEntry",
    "DiffResult",
    "DiffType",
    "KeyOnlyInLeft",
    "KeyOnlyInRight",
    "ValueMismatch",
    # Entry points
    "compare_strs",
    "compare_values",
    "parse_json",
]
