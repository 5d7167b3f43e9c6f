from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional, Sequence, Tuple, Union

Segment = Union[str, int]


class ValueKind(str, Enum):
    """The six kinds of JSON value."""

    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


def kind_of(value: Any) -> ValueKind:
    """Classify a parsed JSON value.

    bool is checked before int because bool subclasses int in Python.

    Raises:
        TypeError: if the value is not something ``json.loads`` produces.
    """
    if value is None:
        return ValueKind.NULL
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, (int, float)):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, (list, tuple)):
        return ValueKind.ARRAY
    if isinstance(value, dict):
        return ValueKind.OBJECT
    raise TypeError(f"Unsupported JSON value of type {type(value).__name__}")


@dataclass(frozen=True)
class Path:
    """
    Structural locator from the document root to a node.

    Key segments serialize as ``/key`` and index segments as ``/[i]``;
    the root serializes as ``/``.
    """

    segments: Tuple[Segment, ...] = ()

    def key(self, name: str) -> "Path":
        return Path(self.segments + (name,))

    def index(self, idx: int) -> "Path":
        return Path(self.segments + (idx,))

    def __str__(self) -> str:
        if not self.segments:
            return "/"
        parts = []
        for segment in self.segments:
            if isinstance(segment, int):
                parts.append(f"/[{segment}]")
            else:
                parts.append(f"/{segment}")
        return "".join(parts)


ROOT = Path()


def normalize_path(path: str) -> str:
    """Drop one trailing '/' unless the path is the root."""
    if path != "/" and path.endswith("/"):
        return path[:-1]
    return path


@dataclass(frozen=True)
class PathIndexEntry:
    path: str
    line: int

    def to_dict(self) -> Dict[str, Any]:
        return {"path": self.path, "line": self.line}


class PathIndex:
    """
    Ordered path-to-line entries produced by one printer pass.

    A ``Path`` is looked up by its segments, so keys containing or ending
    in ``/`` resolve to their own line. A string is looked up by its
    serialized form after trailing-slash normalization; serialized forms are
    not unique, and when two entries share one the first wins.
    """

    def __init__(
        self,
        entries: Sequence[PathIndexEntry],
        paths: Optional[Sequence[Path]] = None,
    ):
        self.entries: Tuple[PathIndexEntry, ...] = tuple(entries)
        self._by_path: Dict[str, PathIndexEntry] = {}
        for entry in self.entries:
            self._by_path.setdefault(entry.path, entry)
        self._by_segments: Dict[Tuple[Segment, ...], PathIndexEntry] = {}
        if paths is not None:
            if len(paths) != len(self.entries):
                raise ValueError("PathIndex needs one Path per entry")
            for path, entry in zip(paths, self.entries):
                self._by_segments.setdefault(path.segments, entry)

    def lookup(self, path: Union[Path, str]) -> Optional[PathIndexEntry]:
        if isinstance(path, Path):
            return self._by_segments.get(path.segments)
        return self._by_path.get(normalize_path(path))

    def __iter__(self) -> Iterator[PathIndexEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PathIndex):
            return NotImplemented
        return self.entries == other.entries

    def __repr__(self) -> str:
        return f"PathIndex({len(self.entries)} entries)"

    def to_list(self) -> List[Dict[str, Any]]:
        return [e.to_dict() for e in self.entries]


@dataclass(frozen=True)
class PrintResult:
    """Canonical text of one document and the path index built while printing it."""

    text: str
    path_index: PathIndex

    @property
    def line_count(self) -> int:
        return self.text.count("\n")


class DiffKind(str, Enum):
    """Classification of a single difference."""

    EQUALITY = "eq"  # same type, different value
    TYPE = "type"  # different JSON types
    MISSING = "missing"  # present on one side only


class Side(str, Enum):
    LEFT = "left"
    RIGHT = "right"
    BOTH = "both"


@dataclass(frozen=True)
class RawDifference:
    """A difference addressed by structural paths, before line resolution."""

    left_path: Path
    right_path: Path
    kind: DiffKind
    message: str


@dataclass(frozen=True)
class Difference:
    """
    A difference located on concrete lines of both canonical texts.

    Attributes:
        left: Path index entry on the left document
        right: Path index entry on the right document
        kind: DiffKind classification
        message: Human-readable explanation
    """

    left: PathIndexEntry
    right: PathIndexEntry
    kind: DiffKind
    message: str

    @property
    def left_line(self) -> int:
        return self.left.line

    @property
    def right_line(self) -> int:
        return self.right.line

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind.value,
            "message": self.message,
            "left": self.left.to_dict(),
            "right": self.right.to_dict(),
        }
