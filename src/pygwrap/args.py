"""Build the pygmentize argument vector."""

from __future__ import annotations

from typing import Sequence


def build_args(
    lang: str | None,
    formatter_name: str,
    fragments: Sequence[str] = (),
) -> list[str]:
    """Return the argv (without the binary) for one highlight request.

    ``-l <lang>`` selects the lexer, or ``-g`` asks the engine to guess when
    no hint is given. ``-f`` selects the formatter. Fragments go into a single
    comma-joined ``-O``. The engine splits ``-O`` on commas and strips the
    whitespace around each value, so a fragment whose value holds a comma or
    has leading/trailing whitespace is passed verbatim with ``-P`` instead.

    Every element is one argv entry and the list is never joined into a
    shell string.
    """
    args: list[str] = []
    if lang is not None:
        args += ["-l", lang]
    else:
        args.append("-g")
    args += ["-f", formatter_name]

    joined: list[str] = []
    single: list[str] = []
    for fragment in fragments:
        _, _, value = fragment.partition("=")
        if "," in value or value != value.strip():
            single.append(fragment)
        else:
            joined.append(fragment)

    if joined:
        args += ["-O", ",".join(joined)]
    for fragment in single:
        args += ["-P", fragment]
    return args
