"""Turn a finished pygmentize run into rendered text or a typed error."""

from __future__ import annotations

import ast
import logging
import re

from pygwrap.errors import PygmentizeDecodeError, PygmentizeExitError
from pygwrap.process import Completed

logger = logging.getLogger(__name__)

# a Python repr() of a str: the engine quotes names with {name!r}
_REPR = r"""('(?:[^'\\]|\\.)*'|"(?:[^"\\]|\\.)*")"""

# (reason, pattern) pairs matched against the engine's stderr
_DIAGNOSTICS = [
    ("unknown-lexer", re.compile(rf"no lexer for alias {_REPR} found")),
    ("unknown-formatter", re.compile(rf"no formatter found for name {_REPR}")),
    ("unknown-style", re.compile(rf"[Cc]ould not find style module {_REPR}")),
    ("unknown-style", re.compile(rf"[Ss]tyle {_REPR} not found")),
]


def _unrepr(quoted: str) -> str:
    try:
        value = ast.literal_eval(quoted)
    except (ValueError, SyntaxError):
        return quoted[1:-1]
    return value if isinstance(value, str) else quoted[1:-1]


def parse_diagnostic(stderr: str) -> tuple[str | None, str | None]:
    """Return (reason, name) recognised in *stderr*, or (None, None)."""
    for reason, pattern in _DIAGNOSTICS:
        m = pattern.search(stderr)
        if m:
            return reason, _unrepr(m.group(1))
    return None, None


def interpret(completed: Completed) -> str:
    """Return the decoded output of a successful run, or raise.

    Non-zero exit raises PygmentizeExitError carrying the trimmed stderr.
    Output that is not valid UTF-8 raises PygmentizeDecodeError.
    """
    if completed.returncode != 0:
        stderr = completed.stderr.decode("utf-8", errors="replace").strip()
        reason, name = parse_diagnostic(stderr)
        raise PygmentizeExitError(
            completed.returncode, stderr, reason=reason, name=name
        )

    if completed.stderr.strip():
        logger.warning(
            "pygmentize succeeded but wrote to stderr: %s",
            completed.stderr.decode("utf-8", errors="replace").strip(),
        )

    try:
        return completed.stdout.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise PygmentizeDecodeError(
            f"pygmentize output is not valid UTF-8: {exc}"
        ) from exc
