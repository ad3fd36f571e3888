"""Typed option sets for the pygmentize formatters.

Each class maps one formatter of the engine (``-f <SHORT_NAME>``) to the
options it accepts. Field names are the engine's own option names, and every
field defaults to ``None``: an unset option is left out of the command line so
that the engine's default applies.

See https://pygments.org/docs/formatters/ for what each option does.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, ClassVar, Sequence

from pygwrap.errors import UnknownFormatterError


def _format_value(value: Any) -> str:
    """Render one option value in the engine's ``key=value`` syntax."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return " ".join(str(v) for v in value)
    return str(value)


@dataclass
class PygmentizeFormatter:
    """Base class: a formatter name plus the options set on it."""

    SHORT_NAME: ClassVar[str] = ""

    def set(self, **options: Any) -> PygmentizeFormatter:
        """Set one or more options in place and return ``self`` for chaining."""
        known = self.option_names()
        for key, value in options.items():
            if key not in known:
                raise TypeError(
                    f"{type(self).__name__} has no option {key!r}"
                )
            setattr(self, key, value)
        return self

    @classmethod
    def option_names(cls) -> list[str]:
        return [f.name for f in fields(cls)]

    def options(self) -> list[str]:
        """Return the ``key=value`` fragments of every option that is set.

        Fragments follow field declaration order, so the same option set
        always serializes the same way.
        """
        fragments: list[str] = []
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                continue
            fragments.append(f"{f.name}={_format_value(value)}")
        return fragments

    def options_str(self) -> str | None:
        """Comma-joined fragments, or None when nothing is set."""
        fragments = self.options()
        return ",".join(fragments) if fragments else None

    def highlight(self, code: str, lang: str | None = None, **kwargs: Any) -> str:
        """Highlight *code* with this formatter. See :func:`pygwrap.highlight`."""
        from pygwrap.highlighter import highlight

        return highlight(code, lang, self, **kwargs)


@dataclass
class HtmlFormatter(PygmentizeFormatter):
    """Format tokens as HTML 4 ``<span>`` tags inside a ``<div class="highlight">``."""

    SHORT_NAME: ClassVar[str] = "html"

    style: str | None = None
    full: bool | None = None
    title: str | None = None
    nowrap: bool | None = None
    noclasses: bool | None = None
    classprefix: str | None = None
    cssclass: str | None = None
    cssstyles: str | None = None
    prestyles: str | None = None
    # "table" or "inline"; the engine treats any other non-empty value as "table"
    linenos: str | None = None
    hl_lines: Sequence[int] | None = None
    linenostart: int | None = None
    linenostep: int | None = None
    linenospecial: int | None = None
    nobackground: bool | None = None
    lineanchors: str | None = None
    linespans: str | None = None
    anchorlinenos: bool | None = None
    filename: str | None = None
    wrapcode: bool | None = None


@dataclass
class SvgFormatter(PygmentizeFormatter):
    """Format tokens as an SVG graphics file, one ``<text>`` element per line."""

    SHORT_NAME: ClassVar[str] = "svg"

    style: str | None = None
    fontfamily: str | None = None
    fontsize: str | None = None
    xoffset: int | None = None
    yoffset: int | None = None
    ystep: int | None = None
    spacehack: bool | None = None
    linenos: bool | None = None
    linenostart: int | None = None
    linenostep: int | None = None
    linenowidth: int | None = None


@dataclass
class LatexFormatter(PygmentizeFormatter):
    """Format tokens as LaTeX code (needs the ``fancyvrb`` and ``color`` packages)."""

    SHORT_NAME: ClassVar[str] = "latex"

    style: str | None = None
    full: bool | None = None
    title: str | None = None
    docclass: str | None = None
    preamble: str | None = None
    linenos: bool | None = None
    linenostart: int | None = None
    linenostep: int | None = None
    verboptions: str | None = None
    commandprefix: str | None = None
    texcomments: bool | None = None
    mathescape: bool | None = None
    escapeinside: str | None = None
    envname: str | None = None


@dataclass
class TerminalFormatter(PygmentizeFormatter):
    """Format tokens with ANSI color sequences for a 16-color console."""

    SHORT_NAME: ClassVar[str] = "terminal"

    # "light" or "dark"
    bg: str | None = None
    linenos: bool | None = None


@dataclass
class Terminal256Formatter(PygmentizeFormatter):
    """Format tokens with ANSI color sequences for a 256-color terminal."""

    SHORT_NAME: ClassVar[str] = "terminal256"

    style: str | None = None
    linenos: bool | None = None


@dataclass
class TerminalTrueColorFormatter(PygmentizeFormatter):
    """Format tokens with 24-bit ANSI color sequences."""

    SHORT_NAME: ClassVar[str] = "terminal16m"

    style: str | None = None
    linenos: bool | None = None


@dataclass
class BBCodeFormatter(PygmentizeFormatter):
    """Format tokens with BBcodes, as used by many bulletin boards."""

    SHORT_NAME: ClassVar[str] = "bbcode"

    style: str | None = None
    codetag: bool | None = None
    monofont: bool | None = None


@dataclass
class RtfFormatter(PygmentizeFormatter):
    """Format tokens as RTF markup."""

    SHORT_NAME: ClassVar[str] = "rtf"

    style: str | None = None
    fontface: str | None = None
    fontsize: int | None = None
    linenos: bool | None = None
    lineno_fontsize: int | None = None
    lineno_padding: int | None = None
    linenostart: int | None = None
    linenostep: int | None = None
    hl_lines: Sequence[int] | None = None


@dataclass
class IRCFormatter(PygmentizeFormatter):
    """Format tokens with IRC color sequences."""

    SHORT_NAME: ClassVar[str] = "irc"

    bg: str | None = None
    linenos: bool | None = None


FORMATTERS: dict[str, type[PygmentizeFormatter]] = {
    cls.SHORT_NAME: cls
    for cls in (
        HtmlFormatter,
        SvgFormatter,
        LatexFormatter,
        TerminalFormatter,
        Terminal256Formatter,
        TerminalTrueColorFormatter,
        BBCodeFormatter,
        RtfFormatter,
        IRCFormatter,
    )
}


def get_formatter(name: str, **options: Any) -> PygmentizeFormatter:
    """Build the formatter registered under *name* with the given options."""
    cls = FORMATTERS.get(name)
    if cls is None:
        raise UnknownFormatterError(name)
    return cls().set(**options)
