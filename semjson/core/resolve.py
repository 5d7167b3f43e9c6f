"""Resolution of structural difference paths to canonical-text lines."""

from __future__ import annotations

from typing import List, Sequence

from .types import Difference, PathIndex, PathIndexEntry, RawDifference, Side


class SemjsonError(Exception):
    """Base exception for semjson errors."""

    pass


class PathResolutionError(SemjsonError):
    """
    Raised when a differ path has no entry in the printer's path index.

    This means the printer and the differ walked different structures. It is
    an internal consistency failure: the whole compare is aborted, nothing is
    skipped or retried.
    """

    def __init__(self, side: Side, path: str, diff_message: str):
        super().__init__(f"Unable to find line number for ({diff_message}): {path}")
        self.side = side
        self.path = path
        self.diff_message = diff_message

    def __str__(self) -> str:
        return f"PathResolutionError(side={self.side.value}, path={self.path}): {self.args[0]}"


def _locate(index: PathIndex, side: Side, raw: RawDifference) -> PathIndexEntry:
    path = raw.left_path if side is Side.LEFT else raw.right_path
    entry = index.lookup(path)
    if entry is None:
        raise PathResolutionError(side, str(path), raw.message)
    return entry


def resolve_differences(
    raw: Sequence[RawDifference], left_index: PathIndex, right_index: PathIndex
) -> List[Difference]:
    """Attach line locations to raw differences and order them.

    Args:
        raw: Differences as produced by json_diff.
        left_index: Path index of the left canonical text.
        right_index: Path index of the right canonical text.

    Returns:
        Differences stable-sorted by left line ascending.

    Raises:
        PathResolutionError: If any path is absent from its side's index.
    """
    resolved = [
        Difference(
            left=_locate(left_index, Side.LEFT, d),
            right=_locate(right_index, Side.RIGHT, d),
            kind=d.kind,
            message=d.message,
        )
        for d in raw
    ]
    resolved.sort(key=lambda d: d.left.line)
    return resolved
