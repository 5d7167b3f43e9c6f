"""Canonical pretty-printing for semjson values.

Serializes a parsed JSON value into deterministic, indented text and records
which output line each structural path starts on.

Guarantees:
- canonical_print(v) is deterministic: same input always yields identical
  text and an identical path index
- Object key order is irrelevant (keys are collated, never insertion ordered)
- The root path "/" is always the first index entry, on line 1
- Every newline written advances the line counter, so index lines match
  physical lines of the text
"""
from __future__ import annotations

import json
import math
import unicodedata
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Tuple

from .types import ROOT, Path, PathIndex, PathIndexEntry, PrintResult, ValueKind, kind_of

# Applied in order: the backslash must go first so later escapes keep theirs.
_ESCAPES: Tuple[Tuple[str, str], ...] = (
    ("\\", "\\\\"),
    ('"', '\\"'),
    ("\n", "\\n"),
    ("\b", "\\b"),
    ("\f", "\\f"),
    ("\r", "\\r"),
    ("\t", "\\t"),
)


@dataclass(frozen=True)
class PrintPolicy:
    """
    Configuration for the canonical printer.

    Attributes:
        indent: Spaces per nesting level.
        escape_every_occurrence: If True, every escapable character in a
            string is escaped and remaining control characters and lone
            surrogates become \\uXXXX, so the text is always valid JSON that
            encodes as UTF-8. If False, only the first occurrence of each
            escape class is restored (legacy output; repeated escapes then
            break JSON validity).
    """

    indent: int = 4
    escape_every_occurrence: bool = True

    def __post_init__(self):
        if self.indent < 0:
            raise ValueError("PrintPolicy.indent must be non-negative")

    @classmethod
    def default(cls) -> "PrintPolicy":
        """Create default print policy - always valid JSON."""
        return cls()

    @classmethod
    def legacy(cls) -> "PrintPolicy":
        """Create legacy print policy - first-occurrence escaping only."""
        return cls(escape_every_occurrence=False)


def _needs_unicode_escape(ch: str) -> bool:
    code = ord(ch)
    return code < 0x20 or 0xD800 <= code <= 0xDFFF


def escape_string(text: str, every_occurrence: bool = True) -> str:
    """Re-insert the JSON escapes that parsing removed from a string."""
    count = -1 if every_occurrence else 1
    for raw, escaped in _ESCAPES:
        text = text.replace(raw, escaped, count)
    if every_occurrence:
        text = "".join(
            f"\\u{ord(ch):04x}" if _needs_unicode_escape(ch) else ch for ch in text
        )
    return text


# Primary groups in ICU root order: spaces and controls, punctuation,
# symbols, digits, then letters and everything else.
_CATEGORY_GROUPS: Dict[str, int] = {"Z": 0, "C": 0, "P": 1, "S": 2, "N": 3}


def _primary(ch: str) -> Tuple[int, str]:
    return (_CATEGORY_GROUPS.get(unicodedata.category(ch)[0], 4), ch)


def collation_key(text: str) -> Tuple[Tuple[Tuple[int, str], ...], str, str, str]:
    """Locale-style sort key that does not depend on the process locale.

    Compares base characters first (case and accents ignored; spaces,
    punctuation, symbols and digits before letters, code-point order within
    each group), then accents, then case with lower case first, then raw
    code points.
    """
    decomposed = unicodedata.normalize("NFD", text)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    primary = tuple(_primary(ch) for ch in base.casefold())
    return (primary, decomposed.casefold(), text.swapcase(), text)


def sorted_keys(obj: Dict[str, Any]) -> List[str]:
    """Object keys in collation order."""
    for key in obj:
        if not isinstance(key, str):
            raise TypeError(
                f"JSON object keys must be strings, got {type(key).__name__}"
            )
    return sorted(obj, key=collation_key)


def canonical_print(value: Any, policy: Optional[PrintPolicy] = None) -> PrintResult:
    """Print a value canonically and build its path index.

    Args:
        value: Parsed JSON value (dict, list, str, int, float, bool, None).
        policy: Print policy. Defaults to PrintPolicy.default().

    Returns:
        PrintResult with the canonical text and its path index.

    Raises:
        TypeError: For values or keys JSON cannot hold.
        ValueError: For NaN or infinite floats.
    """
    ctx = _PrintContext(policy or PrintPolicy.default())
    ctx.mark(ROOT)

    kind = kind_of(value)
    if kind is ValueKind.OBJECT or kind is ValueKind.ARRAY:
        _print_container(ctx, value, kind, ROOT, 0)
        ctx.strip_trailing_comma()
    else:
        ctx.write(_scalar_literal(value, kind, ctx.policy))
    ctx.newline(0)

    return PrintResult(
        text="".join(ctx.chunks), path_index=PathIndex(ctx.entries, ctx.paths)
    )


# ---------------------------------------------------------------------------
# Print context
# ---------------------------------------------------------------------------


class _PrintContext:
    def __init__(self, policy: PrintPolicy):
        self.policy = policy
        self.chunks: List[str] = []
        self.entries: List[PathIndexEntry] = []
        self.paths: List[Path] = []
        self.line = 1

    def write(self, text: str) -> None:
        self.chunks.append(text)

    def newline(self, depth: int) -> None:
        self.line += 1
        self.chunks.append("\n" + " " * (self.policy.indent * depth))

    def mark(self, path: Path) -> None:
        self.paths.append(path)
        self.entries.append(PathIndexEntry(path=str(path), line=self.line))

    def strip_trailing_comma(self) -> None:
        if self.chunks and self.chunks[-1].endswith(","):
            self.chunks[-1] = self.chunks[-1][:-1]


# ---------------------------------------------------------------------------
# Visitors
# ---------------------------------------------------------------------------


def _print_value(ctx: _PrintContext, value: Any, path: Path, depth: int) -> None:
    kind = kind_of(value)
    if kind is ValueKind.OBJECT or kind is ValueKind.ARRAY:
        _print_container(ctx, value, kind, path, depth)
    else:
        ctx.write(_scalar_literal(value, kind, ctx.policy) + ",")


def _print_container(
    ctx: _PrintContext, value: Any, kind: ValueKind, path: Path, depth: int
) -> None:
    if kind is ValueKind.OBJECT:
        ctx.write("{")
        for key in sorted_keys(value):
            ctx.newline(depth + 1)
            ctx.write(f'"{_escape(key, ctx.policy)}": ')
            child = path.key(key)
            ctx.mark(child)
            _print_value(ctx, value[key], child, depth + 1)
        close = "}"
    else:
        ctx.write("[")
        for idx, item in enumerate(value):
            ctx.newline(depth + 1)
            child = path.index(idx)
            ctx.mark(child)
            _print_value(ctx, item, child, depth + 1)
        close = "]"

    ctx.strip_trailing_comma()
    ctx.newline(depth)
    ctx.write(close + ",")


def _escape(text: str, policy: PrintPolicy) -> str:
    return escape_string(text, every_occurrence=policy.escape_every_occurrence)


def _scalar_literal(value: Any, kind: ValueKind, policy: PrintPolicy) -> str:
    if kind is ValueKind.STRING:
        return f'"{_escape(value, policy)}"'
    if kind is ValueKind.NUMBER:
        if isinstance(value, int):
            return str(value)
        if not math.isfinite(value):
            raise ValueError(
                f"Non-finite number {value!r} has no JSON representation"
            )
        return json.dumps(value)
    if kind is ValueKind.BOOLEAN:
        return "true" if value else "false"
    if kind is ValueKind.NULL:
        return "null"
    raise TypeError(f"Not a scalar JSON kind: {kind.value}")


def iter_lines(text: str) -> Iterable[Tuple[int, str]]:
    """Yield (line_number, line) pairs of canonical text, 1-based."""
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    for number, line in enumerate(lines, start=1):
        yield number, line
