"""Structural JSON diff for semjson.

Compares two parsed JSON values node by node and returns difference records
addressed by structural path on both sides. Paths are resolved to lines
later, against the path indices built by the canonical printer.

Ordering guarantees (before line sorting):
- object: keys declared by a shorter `length` member (see below), then left
  keys in collation order (missing or recursed), then right-only keys
- array: right-only tail indices, then shared indices recursed, then
  left-only tail indices
- type mismatch: one record for the node, no recursion
- int vs float compare as numbers; two NaNs are equal

The first object pass only runs when both objects carry numeric `length`
members and the left one is smaller. Plain objects never trigger it, and a
right-only key is then reported once, by the last pass. Objects that do
trigger it get that key reported by both passes.
"""
from __future__ import annotations

import math
from typing import Any, Callable, Dict, List, Optional

from .canon import sorted_keys
from .types import ROOT, DiffKind, Path, RawDifference, ValueKind, kind_of


def json_diff(
    left: Any, right: Any, left_path: Path = ROOT, right_path: Path = ROOT
) -> List[RawDifference]:
    """Produce the structural differences between two values."""
    handler = _DISPATCH[kind_of(left)]
    return handler(left, left_path, right, right_path)


def _diff(
    kind: DiffKind, left_path: Path, right_path: Path, message: str
) -> RawDifference:
    return RawDifference(
        left_path=left_path, right_path=right_path, kind=kind, message=message
    )


# ---------------------------------------------------------------------------
# Containers
# ---------------------------------------------------------------------------


def _declared_length(obj: Dict[str, Any]) -> Optional[float]:
    value = obj.get("length")
    if value is not None and kind_of(value) is ValueKind.NUMBER:
        return value
    return None


def _diff_object(
    left: Any, left_path: Path, right: Any, right_path: Path
) -> List[RawDifference]:
    if kind_of(right) is not ValueKind.OBJECT:
        return [
            _diff(DiffKind.TYPE, left_path, right_path, "Both types should be objects")
        ]

    ops: List[RawDifference] = []
    right_only = [k for k in sorted_keys(right) if k not in left]

    left_len = _declared_length(left)
    right_len = _declared_length(right)
    if left_len is not None and right_len is not None and left_len < right_len:
        for key in right_only:
            ops.append(
                _diff(
                    DiffKind.MISSING,
                    left_path,
                    right_path.key(key),
                    "The right side of this object has more items than the left side",
                )
            )

    for key in sorted_keys(left):
        if key not in right:
            ops.append(
                _diff(
                    DiffKind.MISSING,
                    left_path.key(key),
                    right_path,
                    f"Missing property '{key}' from the object on the right side",
                )
            )
        else:
            ops.extend(
                json_diff(left[key], right[key], left_path.key(key), right_path.key(key))
            )

    for key in right_only:
        ops.append(
            _diff(
                DiffKind.MISSING,
                left_path,
                right_path.key(key),
                f"Missing property '{key}' from the object on the left side",
            )
        )
    return ops


def _diff_array(
    left: Any, left_path: Path, right: Any, right_path: Path
) -> List[RawDifference]:
    if kind_of(right) is not ValueKind.ARRAY:
        return [
            _diff(DiffKind.TYPE, left_path, right_path, "Both types should be arrays")
        ]

    ops: List[RawDifference] = []
    for i in range(len(left), len(right)):
        ops.append(
            _diff(
                DiffKind.MISSING,
                left_path,
                right_path.index(i),
                f"Missing element {i} from the array on the left side",
            )
        )

    for i, item in enumerate(left):
        if i < len(right):
            ops.extend(json_diff(item, right[i], left_path.index(i), right_path.index(i)))
        else:
            ops.append(
                _diff(
                    DiffKind.MISSING,
                    left_path.index(i),
                    right_path,
                    f"Missing element {i} from the array on the right side",
                )
            )
    return ops


# ---------------------------------------------------------------------------
# Scalars
# ---------------------------------------------------------------------------


def _diff_string(
    left: Any, left_path: Path, right: Any, right_path: Path
) -> List[RawDifference]:
    if kind_of(right) is not ValueKind.STRING:
        return [
            _diff(DiffKind.TYPE, left_path, right_path, "Both types should be strings")
        ]
    if left != right:
        return [
            _diff(
                DiffKind.EQUALITY,
                left_path,
                right_path,
                "Both sides should be equal strings",
            )
        ]
    return []


def _numbers_equal(left: Any, right: Any) -> bool:
    if left == right:
        return True
    return (
        isinstance(left, float)
        and isinstance(right, float)
        and math.isnan(left)
        and math.isnan(right)
    )


def _diff_number(
    left: Any, left_path: Path, right: Any, right_path: Path
) -> List[RawDifference]:
    if kind_of(right) is not ValueKind.NUMBER:
        return [
            _diff(DiffKind.TYPE, left_path, right_path, "Both types should be numbers")
        ]
    if not _numbers_equal(left, right):
        return [
            _diff(
                DiffKind.EQUALITY,
                left_path,
                right_path,
                "Both sides should be equal numbers",
            )
        ]
    return []


def _diff_boolean(
    left: Any, left_path: Path, right: Any, right_path: Path
) -> List[RawDifference]:
    if kind_of(right) is not ValueKind.BOOLEAN:
        return [
            _diff(DiffKind.TYPE, left_path, right_path, "Both types should be booleans")
        ]
    if left == right:
        return []
    if left:
        message = "The left side is true and the right side is false"
    else:
        message = "The left side is false and the right side is true"
    return [_diff(DiffKind.EQUALITY, left_path, right_path, message)]


def _diff_null(
    left: Any, left_path: Path, right: Any, right_path: Path
) -> List[RawDifference]:
    if kind_of(right) is not ValueKind.NULL:
        return [
            _diff(DiffKind.TYPE, left_path, right_path, "Both types should be nulls")
        ]
    return []


_DISPATCH: Dict[ValueKind, Callable[[Any, Path, Any, Path], List[RawDifference]]] = {
    ValueKind.OBJECT: _diff_object,
    ValueKind.ARRAY: _diff_array,
    ValueKind.STRING: _diff_string,
    ValueKind.NUMBER: _diff_number,
    ValueKind.BOOLEAN: _diff_boolean,
    ValueKind.NULL: _diff_null,
}
