"""Core types and logic for semjson."""

from .canon import (
    PrintPolicy,
    canonical_print,
    collation_key,
    escape_string,
    iter_lines,
    sorted_keys,
)
from .compare import CompareResult, compare
from .json_diff import json_diff
from .resolve import PathResolutionError, SemjsonError, resolve_differences
from .types import (
    ROOT,
    Difference,
    DiffKind,
    Path,
    PathIndex,
    PathIndexEntry,
    PrintResult,
    RawDifference,
    Side,
    ValueKind,
    kind_of,
    normalize_path,
)

__all__ = [
    # Value model
    "ValueKind",
    "kind_of",
    "Path",
    "ROOT",
    "normalize_path",
    "PathIndex",
    "PathIndexEntry",
    "PrintResult",
    "DiffKind",
    "Side",
    "RawDifference",
    "Difference",
    # Canonical printing
    "PrintPolicy",
    "canonical_print",
    "escape_string",
    "collation_key",
    "sorted_keys",
    "iter_lines",
    # Diff
    "json_diff",
    # Resolution
    "resolve_differences",
    "SemjsonError",
    "PathResolutionError",
    # Compare
    "compare",
    "CompareResult",
]
