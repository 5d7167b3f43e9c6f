"""
Compare pipeline for semjson.

Prints both documents canonically, diffs the parsed trees, and resolves every
difference to a line on each canonical text. The result carries both texts so
a presentation layer can highlight the lines it names.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .canon import PrintPolicy, canonical_print
from .json_diff import json_diff
from .resolve import resolve_differences
from .types import Difference, DiffKind, PrintResult, Side

logger = logging.getLogger(__name__)

_KIND_LABELS = {
    DiffKind.MISSING: ("missing property", "missing properties"),
    DiffKind.TYPE: ("incorrect type", "incorrect types"),
    DiffKind.EQUALITY: ("unequal value", "unequal values"),
}


def _plural(count: int, singular: str, plural: str) -> str:
    return f"{count} {singular if count == 1 else plural}"


@dataclass(frozen=True)
class CompareResult:
    """
    Complete result of comparing two documents.

    Attributes:
        left: Canonical text and path index of the left document
        right: Canonical text and path index of the right document
        differences: Differences sorted by left line
    """

    left: PrintResult
    right: PrintResult
    differences: List[Difference] = field(default_factory=list)

    def is_identical(self) -> bool:
        """Returns True if no differences were found."""
        return not self.differences

    def count_by_kind(self) -> Dict[DiffKind, int]:
        counts = {kind: 0 for kind in DiffKind}
        for d in self.differences:
            counts[d.kind] += 1
        return counts

    def of_kind(self, *kinds: DiffKind) -> List[Difference]:
        """Differences whose kind is one of ``kinds``, in result order."""
        return [d for d in self.differences if d.kind in kinds]

    def at_line(self, line: int, side: Side = Side.BOTH) -> List[Difference]:
        """Differences touching a line of the left, right, or either text."""
        if side is Side.LEFT:
            return [d for d in self.differences if d.left_line == line]
        if side is Side.RIGHT:
            return [d for d in self.differences if d.right_line == line]
        return [
            d
            for d in self.differences
            if d.left_line == line or d.right_line == line
        ]

    def summary(self) -> str:
        """One-line human-readable report."""
        if self.is_identical():
            return "The two documents were semantically identical."
        counts = self.count_by_kind()
        parts = [
            _plural(counts[kind], *_KIND_LABELS[kind])
            for kind in (DiffKind.MISSING, DiffKind.TYPE, DiffKind.EQUALITY)
            if counts[kind]
        ]
        total = _plural(len(self.differences), "difference", "differences")
        return f"Found {total} ({', '.join(parts)})"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "identical": self.is_identical(),
            "summary": self.summary(),
            "counts": {k.value: v for k, v in self.count_by_kind().items()},
            "differences": [d.to_dict() for d in self.differences],
        }


def compare(
    left: Any, right: Any, policy: Optional[PrintPolicy] = None
) -> CompareResult:
    """Compare two parsed JSON values.

    Args:
        left: The left (baseline) document.
        right: The right (comparison) document.
        policy: Print policy for both canonical texts.

    Returns:
        CompareResult with both canonical prints and the sorted differences.

    Raises:
        PathResolutionError: If a difference cannot be located in a path index.
        TypeError: If either value is not a JSON value.
    """
    policy = policy or PrintPolicy.default()

    left_print = canonical_print(left, policy)
    right_print = canonical_print(right, policy)
    logger.debug(
        "printed left (%d paths) and right (%d paths)",
        len(left_print.path_index),
        len(right_print.path_index),
    )

    raw = json_diff(left, right)
    logger.debug("found %d raw differences", len(raw))

    differences = resolve_differences(
        raw, left_print.path_index, right_print.path_index
    )
    return CompareResult(left=left_print, right=right_print, differences=differences)
