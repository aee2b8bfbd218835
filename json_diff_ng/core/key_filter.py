"""
Key exclusion for json-diff-ng.

Removes object entries whose key matches any of a set of regular
expressions, recursively, before two values are compared. This is a pure
pass: the input tree is never mutated and a new tree is returned.

Matching uses ``re.search``, so patterns are unanchored unless written with
``^`` and ``$``.
"""

from __future__ import annotations

import copy
import re
from typing import Any, Dict, Iterable, List, Union

from .errors import PatternError

PatternLike = Union[str, "re.Pattern[str]"]


def compile_patterns(sources: Iterable[PatternLike]) -> List[re.Pattern[str]]:
    """
    Compile exclusion patterns.

    Args:
        sources: Regex source strings or already compiled patterns

    Returns:
        Compiled patterns, in the given order

    Raises:
        PatternError: On the first pattern that fails to compile
    """
    compiled: List[re.Pattern[str]] = []
    for source in sources:
        if isinstance(source, re.Pattern):
            compiled.append(source)
            continue
        try:
            compiled.append(re.compile(source))
        except re.error as exc:
            raise PatternError(source, exc) from exc
    return compiled


class KeyFilter:
    """
    Recursive key filter.

    An object entry is dropped when ANY pattern matches its key. Arrays are
    traversed element by element; scalars pass through unchanged.
    """

    def __init__(self, patterns: List[re.Pattern[str]]):
        self.patterns = patterns

    def matches(self, key: str) -> bool:
        return any(p.search(key) for p in self.patterns)

    def apply(self, value: Any) -> Any:
        """
        Filter a value.

        Args:
            value: JSON value to filter

        Returns:
            Filtered value (new tree, input not mutated)
        """
        if not self.patterns:
            return copy.deepcopy(value)
        return self._filter_value(value)

    def _filter_value(self, value: Any) -> Any:
        if isinstance(value, dict):
            return self._filter_dict(value)
        elif isinstance(value, (list, tuple)):
            return self._filter_list(value)
        else:
            return value

    def _filter_dict(self, d: Dict[str, Any]) -> Dict[str, Any]:
        return {
            key: self._filter_value(value)
            for key, value in d.items()
            if not self.matches(key)
        }

    def _filter_list(self, lst: Iterable[Any]) -> List[Any]:
        return [self._filter_value(item) for item in lst]


def exclude_keys(value: Any, patterns: Iterable[PatternLike]) -> Any:
    """Return ``value`` without the object entries whose key matches a pattern."""
    return KeyFilter(compile_patterns(patterns)).apply(value)
