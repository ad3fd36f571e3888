"""pygwrap – syntax highlighting through the pygmentize command-line tool.

Public API
----------
- highlight(code, lang=None, formatter=None, *, binary=None, timeout=None) -> str
- set_binary_path(path) / get_binary_path() -> str
- HtmlFormatter, SvgFormatter, LatexFormatter, TerminalFormatter,
  Terminal256Formatter, TerminalTrueColorFormatter, BBCodeFormatter,
  RtfFormatter, IRCFormatter
- get_formatter(name, **options) -> PygmentizeFormatter
"""

from pygwrap.args import build_args  # noqa: F401
from pygwrap.config import get_binary_path, set_binary_path  # noqa: F401
from pygwrap.errors import (  # noqa: F401
    PygmentizeDecodeError,
    PygmentizeError,
    PygmentizeExitError,
    PygmentizeNotFoundError,
    PygmentizeProcessError,
    PygmentizeTimeoutError,
    UnknownFormatterError,
)
from pygwrap.formatters import (  # noqa: F401
    FORMATTERS,
    BBCodeFormatter,
    HtmlFormatter,
    IRCFormatter,
    LatexFormatter,
    PygmentizeFormatter,
    RtfFormatter,
    SvgFormatter,
    Terminal256Formatter,
    TerminalFormatter,
    TerminalTrueColorFormatter,
    get_formatter,
)
from pygwrap.highlighter import highlight  # noqa: F401
from pygwrap.process import Completed, run_pygmentize  # noqa: F401
from pygwrap.result import interpret  # noqa: F401
