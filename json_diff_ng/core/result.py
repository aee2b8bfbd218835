"""Diff result model and text rendering.

Rendered forms:

    .a.(1)                     one-sided entry (value only on one side)
    .[0].c.[1].("f" != "e")    value mismatch

Values are rendered as compact JSON.
"""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Tuple, Union

from .types import Path, render_path


class DiffType(str, Enum):
    """Category of a difference."""

    LEFT_EXTRA = "left_only"
    RIGHT_EXTRA = "right_only"
    MISMATCH = "unequal_values"

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    DiffType.LEFT_EXTRA: "Only in left",
    DiffType.RIGHT_EXTRA: "Only in right",
    DiffType.MISMATCH: "Value mismatches",
}


def render_value(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))


@dataclass(frozen=True)
class KeyOnlyInLeft:
    """A key or array index present only in the left value."""

    path: Path
    value: Any

    def __str__(self) -> str:
        return f"{render_path(self.path)}.({render_value(self.value)})"

    def to_dict(self) -> Dict[str, Any]:
        return {"path": render_path(self.path), "value": self.value}


@dataclass(frozen=True)
class KeyOnlyInRight:
    """A key or array index present only in the right value."""

    path: Path
    value: Any

    def __str__(self) -> str:
        return f"{render_path(self.path)}.({render_value(self.value)})"

    def to_dict(self) -> Dict[str, Any]:
        return {"path": render_path(self.path), "value": self.value}


@dataclass(frozen=True)
class ValueMismatch:
    """Same path on both sides, different values (or different kinds)."""

    path: Path
    left: Any
    right: Any

    def __str__(self) -> str:
        return (
            f"{render_path(self.path)}."
            f"({render_value(self.left)} != {render_value(self.right)})"
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"path": render_path(self.path), "left": self.left, "right": self.right}


DiffEntry = Union[KeyOnlyInLeft, KeyOnlyInRight, ValueMismatch]


@dataclass
class DiffResult:
    """
    Differences found by one comparison.

    Attributes:
        left_only: Entries present only on the left, in discovery order
        right_only: Entries present only on the right, in discovery order
        unequal_values: Entries present on both sides with different values
    """

    left_only: List[KeyOnlyInLeft] = field(default_factory=list)
    right_only: List[KeyOnlyInRight] = field(default_factory=list)
    unequal_values: List[ValueMismatch] = field(default_factory=list)

    def add(self, entry: DiffEntry) -> None:
        if isinstance(entry, KeyOnlyInLeft):
            self.left_only.append(entry)
        elif isinstance(entry, KeyOnlyInRight):
            self.right_only.append(entry)
        else:
            self.unequal_values.append(entry)

    def is_empty(self) -> bool:
        return not (self.left_only or self.right_only or self.unequal_values)

    def __len__(self) -> int:
        return len(self.left_only) + len(self.right_only) + len(self.unequal_values)

    def entries(self, diff_type: DiffType) -> List[DiffEntry]:
        if diff_type is DiffType.LEFT_EXTRA:
            return list(self.left_only)
        if diff_type is DiffType.RIGHT_EXTRA:
            return list(self.right_only)
        return list(self.unequal_values)

    def get_diffs(self, diff_type: DiffType) -> List[str]:
        """Rendered entries of one category, in discovery order."""
        return [str(e) for e in self.entries(diff_type)]

    def all_diffs(self) -> List[Tuple[DiffType, DiffEntry]]:
        """All entries tagged with their category: mismatches, left, right."""
        pairs: List[Tuple[DiffType, DiffEntry]] = []
        for diff_type in (DiffType.MISMATCH, DiffType.LEFT_EXTRA, DiffType.RIGHT_EXTRA):
            pairs.extend((diff_type, e) for e in self.entries(diff_type))
        return pairs

    def render(self) -> str:
        """Three-section text report. Empty categories are omitted."""
        if self.is_empty():
            return "No differences."
        lines: List[str] = []
        for diff_type in (DiffType.LEFT_EXTRA, DiffType.RIGHT_EXTRA, DiffType.MISMATCH):
            rendered = self.get_diffs(diff_type)
            if not rendered:
                continue
            if lines:
                lines.append("")
            lines.append(f"{diff_type.label}:")
            lines.extend(f"  {r}" for r in rendered)
        return "\n".join(lines)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "equal": self.is_empty(),
            "left_only": [e.to_dict() for e in self.left_only],
            "right_only": [e.to_dict() for e in self.right_only],
            "unequal_values": [e.to_dict() for e in self.unequal_values],
        }
