from .core import (
    ROOT,
    # Compare
    CompareResult,
    # Value model
    Difference,
    DiffKind,
    Path,
    PathIndex,
    PathIndexEntry,
    # Errors
    PathResolutionError,
    # Canonical printing
    PrintPolicy,
    PrintResult,
    RawDifference,
    SemjsonError,
    Side,
    ValueKind,
    canonical_print,
    compare,
    # Diff
    json_diff,
    kind_of,
    resolve_differences,
)
from .version import SEMJSON_VERSION

__all__ = [
    # Version
    "SEMJSON_VERSION",
    # Value model
    "ValueKind",
    "kind_of",
    "Path",
    "ROOT",
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
    # Diff
    "json_diff",
    "resolve_differences",
    # Compare
    "compare",
    "CompareResult",
    # Errors
    "SemjsonError",
    "PathResolutionError",
]
