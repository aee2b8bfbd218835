from .core import (
    # Diff results
    DiffEntry,
    DiffResult,
    DiffType,
    # Errors
    JsonDiffError,
    KeyOnlyInLeft,
    KeyOnlyInRight,
    ParsingError,
    PatternError,
    ValueMismatch,
    # Canonicalization
    canonicalize,
    # Entry points
    compare_strs,
    compare_values,
    # Key exclusion
    exclude_keys,
)
from .version import JSON_DIFF_NG_VERSION

__all__ = [
    # Version
    "JSON_DIFF_NG_VERSION",
    # Entry points
    "compare_strs",
    "compare_values",
    # Diff results
    "DiffEntry",
    "DiffResult",
    "DiffType",
    "KeyOnlyInLeft",
    "KeyOnlyInRight",
    "ValueMismatch",
    # Canonicalization
    "canonicalize",
    # Key exclusion
    "exclude_keys",
    # Errors
    "JsonDiffError",
    "ParsingError",
    "PatternError",
]
