"""Exceptions raised by json-diff-ng."""
from __future__ import annotations

import json
import re
from typing import Optional


class JsonDiffError(Exception):
    """Base exception for comparison errors."""

    pass


class ParsingError(JsonDiffError):
    """
    Raised when one of the inputs is not well-formed JSON.

    Carries which side failed ("left" or "right") and the position of the
    syntax error reported by the JSON decoder.
    """

    def __init__(self, side: str, cause: json.JSONDecodeError):
        super().__init__(
            f"Error parsing {side} json: {cause.msg} "
            f"(line {cause.lineno} column {cause.colno})"
        )
        self.side = side
        self.cause = cause
        self.lineno = cause.lineno
        self.colno = cause.colno


class PatternError(JsonDiffError):
    """Raised when an exclusion regular expression does not compile."""

    def __init__(self, pattern: str, cause: Optional[re.error] = None):
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"Invalid exclusion pattern {pattern!r}{detail}")
        self.pattern = pattern
        self.cause = cause
