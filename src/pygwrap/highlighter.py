"""The highlight() entry point."""

from __future__ import annotations

from pygwrap.args import build_args
from pygwrap.formatters import HtmlFormatter, PygmentizeFormatter
from pygwrap.process import run_pygmentize
from pygwrap.result import interpret


def highlight(
    code: str,
    lang: str | None = None,
    formatter: PygmentizeFormatter | None = None,
    *,
    binary: str | None = None,
    timeout: float | None = None,
) -> str:
    """Apply syntax highlighting to *code* written in *lang*.

    If *lang* is None the engine guesses the language from the code, which is
    not very reliable. *formatter* selects the output format and its options
    and defaults to ``HtmlFormatter()``. *binary* overrides the configured
    pygmentize for this call only; *timeout* (seconds) kills the engine if it
    runs longer.

    Returns the rendered text. Raises a PygmentizeError subclass on failure.
    See https://pygments.org/languages/ for the lexer names the engine knows.
    """
    if formatter is None:
        formatter = HtmlFormatter()
    args = build_args(lang, formatter.SHORT_NAME, formatter.options())
    completed = run_pygmentize(args, code, binary=binary, timeout=timeout)
    return interpret(completed)
