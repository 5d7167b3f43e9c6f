"""semjson CLI.

Entry point for the ``semjson`` command-line tool.

Usage:
    semjson diff <left.json> <right.json> [--format json|text]
                 [--kind eq|type|missing ...] [--indent N] [--legacy-escapes]
    semjson print <file.json> [--no-line-numbers] [--indent N] [--legacy-escapes]
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, NoReturn

from .core.canon import PrintPolicy, canonical_print, iter_lines
from .core.compare import CompareResult, compare
from .core.types import DiffKind
from .version import SEMJSON_VERSION

logger = logging.getLogger(__name__)

EXIT_IDENTICAL = 0
EXIT_DIFFERENT = 1
EXIT_BAD_INPUT = 2

# ---------------------------------------------------------------------------
# Input
# ---------------------------------------------------------------------------


def _load(path: str) -> Any:
    logger.debug("loading %s", path)
    with open(path, encoding="utf-8") as fh:
        return json.load(fh)


def _load_or_exit(path: str) -> Any:
    try:
        return _load(path)
    except OSError as exc:
        print(f"Error: cannot read '{path}': {exc.strerror or exc}", file=sys.stderr)
    except json.JSONDecodeError as exc:
        print(f"Error: '{path}' is not valid JSON: {exc}", file=sys.stderr)
    sys.exit(EXIT_BAD_INPUT)


def _bad_input(exc: Exception) -> NoReturn:
    print(f"Error: {exc}", file=sys.stderr)
    sys.exit(EXIT_BAD_INPUT)


def _policy(args: argparse.Namespace) -> PrintPolicy:
    return PrintPolicy(
        indent=args.indent, escape_every_occurrence=not args.legacy_escapes
    )


# ---------------------------------------------------------------------------
# Text formatter
# ---------------------------------------------------------------------------


def _gutter(text: str) -> str:
    lines = list(iter_lines(text))
    width = len(str(len(lines)))
    return "\n".join(f"{number:>{width}}. {line}" for number, line in lines)


def _format_text(result: CompareResult, kinds: list[DiffKind]) -> str:
    lines: list[str] = [result.summary()]
    shown = result.of_kind(*kinds)
    if shown:
        lines.append("")
    for d in shown:
        lines.append(
            f"  L{d.left_line} -> R{d.right_line}  [{d.kind.value}] "
            f"{d.left.path} | {d.right.path}: {d.message}"
        )
    return "\n".join(lines)


# ---------------------------------------------------------------------------
# Subcommands
# ---------------------------------------------------------------------------


def _cmd_diff(args: argparse.Namespace) -> None:
    left = _load_or_exit(args.left)
    right = _load_or_exit(args.right)

    try:
        result = compare(left, right, _policy(args))
    except ValueError as exc:
        _bad_input(exc)
    kinds = [DiffKind(k) for k in args.kind] if args.kind else list(DiffKind)

    if args.format == "json":
        payload = result.to_dict()
        payload["differences"] = [d.to_dict() for d in result.of_kind(*kinds)]
        print(json.dumps(payload, indent=2))
    else:
        print(_format_text(result, kinds))

    if not result.is_identical():
        sys.exit(EXIT_DIFFERENT)


def _cmd_print(args: argparse.Namespace) -> None:
    value = _load_or_exit(args.file)
    try:
        printed = canonical_print(value, _policy(args))
    except ValueError as exc:
        _bad_input(exc)
    if args.no_line_numbers:
        sys.stdout.write(printed.text)
    else:
        print(_gutter(printed.text))


def _add_print_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--indent", type=int, default=4, help="Spaces per nesting level (default: 4)"
    )
    parser.add_argument(
        "--legacy-escapes",
        action="store_true",
        help="Escape only the first occurrence of each escape class in strings",
    )


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="semjson",
        description="semjson: semantic diffing of JSON documents",
    )
    parser.add_argument(
        "--version", action="version", version=f"semjson {SEMJSON_VERSION}"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command")

    diff_parser = subparsers.add_parser("diff", help="Compare two JSON documents")
    diff_parser.add_argument("left", help="Path to the left (baseline) document")
    diff_parser.add_argument("right", help="Path to the right document")
    diff_parser.add_argument(
        "--format",
        choices=["json", "text"],
        default="text",
        help="Output format (default: text)",
    )
    diff_parser.add_argument(
        "--kind",
        action="append",
        choices=[k.value for k in DiffKind],
        help="Only list differences of this kind (repeatable; default: all)",
    )
    _add_print_options(diff_parser)
    diff_parser.set_defaults(func=_cmd_diff)

    print_parser = subparsers.add_parser(
        "print", help="Print a JSON document in canonical form"
    )
    print_parser.add_argument("file", help="Path to the document")
    print_parser.add_argument(
        "--no-line-numbers",
        action="store_true",
        help="Print the canonical text without the line-number gutter",
    )
    _add_print_options(print_parser)
    print_parser.set_defaults(func=_cmd_print)

    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)
    if hasattr(args, "func"):
        try:
            args.func(args)
        except UnicodeEncodeError as exc:
            # Legacy escapes and diff messages can carry lone surrogates.
            print(
                f"Error: output cannot be encoded as {exc.encoding}: {exc.reason}",
                file=sys.stderr,
            )
            sys.exit(EXIT_BAD_INPUT)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
