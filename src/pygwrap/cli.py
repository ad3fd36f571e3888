"""CLI entry point for pygwrap."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from pygwrap.errors import (
    PygmentizeDecodeError,
    PygmentizeError,
    PygmentizeExitError,
    PygmentizeNotFoundError,
    PygmentizeTimeoutError,
)
from pygwrap.formatters import FORMATTERS, get_formatter


def _error_kind(exc: PygmentizeError) -> str:
    if isinstance(exc, PygmentizeNotFoundError):
        return "not-found"
    if isinstance(exc, PygmentizeTimeoutError):
        return "timeout"
    if isinstance(exc, PygmentizeExitError):
        return "exit"
    if isinstance(exc, PygmentizeDecodeError):
        return "decode"
    return "process"


def _parse_option(text: str) -> tuple[str, str]:
    key, sep, value = text.partition("=")
    if not sep or not key:
        raise argparse.ArgumentTypeError(f"expected key=value, got {text!r}")
    return key.strip(), value


def register_render(subparsers: argparse._SubParsersAction) -> None:
    """Register the ``render`` subcommand."""
    r = subparsers.add_parser("render", help="Highlight a file or stdin")
    r.add_argument(
        "file",
        nargs="?",
        default=None,
        help="File to highlight (reads stdin if omitted)",
    )
    r.add_argument(
        "-l", "--lang",
        default=None,
        help="Lexer name (guessed by pygmentize if omitted)",
    )
    r.add_argument(
        "-f", "--format",
        choices=sorted(FORMATTERS),
        default="html",
        help="Output formatter (default: html)",
    )
    r.add_argument(
        "-O", "--option",
        dest="options",
        action="append",
        type=_parse_option,
        default=[],
        metavar="KEY=VALUE",
        help="Formatter option, may be repeated",
    )
    r.add_argument("--binary", default=None, help="Path to pygmentize")
    r.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Kill pygmentize after this many seconds",
    )
    r.add_argument(
        "--json",
        action="store_true",
        help="Print a JSON object instead of the raw output",
    )


def register_formatters(subparsers: argparse._SubParsersAction) -> None:
    """Register the ``formatters`` subcommand."""
    subparsers.add_parser(
        "formatters", help="List supported formatters and their options"
    )


def _report_error(args: argparse.Namespace, kind: str, message: str) -> int:
    """Print an error as JSON (``--json``) or a one-line message; return 1."""
    if args.json:
        json.dump({"error": kind, "message": message}, sys.stdout, indent=2)
        print()
    else:
        print(f"pygwrap: {message}", file=sys.stderr)
    return 1


def run_render(args: argparse.Namespace) -> int:
    """Highlight the input and print it; return the process exit code."""
    try:
        if args.file is not None:
            code = Path(args.file).read_text(encoding="utf-8")
        else:
            code = sys.stdin.read()
    except (OSError, UnicodeDecodeError) as exc:
        return _report_error(args, "input", f"cannot read input: {exc}")

    try:
        formatter = get_formatter(args.format, **dict(args.options))
    except TypeError as exc:
        return _report_error(args, "option", str(exc))

    try:
        output = formatter.highlight(
            code, args.lang, binary=args.binary, timeout=args.timeout
        )
    except PygmentizeError as exc:
        return _report_error(args, _error_kind(exc), str(exc))

    if args.json:
        result: dict[str, Any] = {
            "formatter": formatter.SHORT_NAME,
            "lexer": args.lang,
            "output": output,
        }
        json.dump(result, sys.stdout, indent=2)
        print()
    else:
        sys.stdout.write(output)
    return 0


def run_formatters(args: argparse.Namespace) -> int:
    result = {name: cls.option_names() for name, cls in sorted(FORMATTERS.items())}
    json.dump(result, sys.stdout, indent=2)
    print()
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="pygwrap",
        description="Syntax highlighting through pygmentize",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log the pygmentize invocation to stderr",
    )
    sub = parser.add_subparsers(dest="command")

    register_render(sub)
    register_formatters(sub)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    dispatch = {
        "render": run_render,
        "formatters": run_formatters,
    }
    return dispatch[args.command](args)


if __name__ == "__main__":
    raise SystemExit(main())
