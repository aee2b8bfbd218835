"""Top-level comparison entry points.

Pipeline: parse (text only) -> key exclusion -> deep sort (optional) -> diff.
"""
from __future__ import annotations

import json
import logging
from typing import Any, Iterable

from .canon import canonicalize
from .errors import ParsingError
from .json_diff import diff_values
from .key_filter import KeyFilter, PatternLike, compile_patterns
from .result import DiffResult

logger = logging.getLogger(__name__)


def parse_json(text: str, side: str) -> Any:
    """Parse JSON text, raising ParsingError that names the failing side."""
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise ParsingError(side, exc) from exc


def compare_values(
    left: Any,
    right: Any,
    sort_arrays: bool = False,
    excluded_keys: Iterable[PatternLike] = (),
) -> DiffResult:
    """
    Compare two parsed JSON values.

    Args:
        left: Left value
        right: Right value
        sort_arrays: Deep-sort arrays (and object keys) before comparing
        excluded_keys: Regexes; object entries whose key matches are ignored

    Returns:
        DiffResult with every difference found

    Raises:
        PatternError: If an exclusion pattern does not compile
    """
    key_filter = KeyFilter(compile_patterns(excluded_keys))
    logger.debug(
        "comparing with %d exclusion pattern(s), sort_arrays=%s",
        len(key_filter.patterns),
        sort_arrays,
    )

    left = key_filter.apply(left)
    right = key_filter.apply(right)
    if sort_arrays:
        left = canonicalize(left)
        right = canonicalize(right)

    result = diff_values(left, right)
    logger.debug(
        "found %d left-only, %d right-only, %d mismatched",
        len(result.left_only),
        len(result.right_only),
        len(result.unequal_values),
    )
    return result


def compare_strs(
    text1: str,
    text2: str,
    sort_arrays: bool = False,
    excluded_keys: Iterable[PatternLike] = (),
) -> DiffResult:
    """
    Compare two JSON texts.

    Raises:
        ParsingError: If either text is not well-formed JSON
        PatternError: If an exclusion pattern does not compile
    """
    left = parse_json(text1, "left")
    right = parse_json(text2, "right")
    return compare_values(left, right, sort_arrays, excluded_keys)
