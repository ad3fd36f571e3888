"""Tests for turning a finished run into output or an error."""

import logging

import pytest

from pygwrap.errors import PygmentizeDecodeError, PygmentizeExitError
from pygwrap.process import Completed
from pygwrap.result import interpret, parse_diagnostic


def _completed(returncode=0, stdout=b"", stderr=b""):
    return Completed(args=["pygmentize"], returncode=returncode, stdout=stdout, stderr=stderr)


# ---------------------------------------------------------------------------
# parse_diagnostic: pure function
# ---------------------------------------------------------------------------
class TestParseDiagnostic:
    def test_unknown_lexer(self):
        reason, name = parse_diagnostic("Error: no lexer for alias 'klingon' found")
        assert reason == "unknown-lexer"
        assert name == "klingon"

    def test_unknown_formatter(self):
        reason, name = parse_diagnostic("Error: no formatter found for name 'pdf'")
        assert reason == "unknown-formatter"
        assert name == "pdf"

    def test_unknown_style(self):
        msg = "Error: Could not find style module 'nosuch', though it should be builtin."
        assert parse_diagnostic(msg) == ("unknown-style", "nosuch")

    def test_name_with_apostrophe_is_double_quoted(self):
        msg = "Error: no lexer for alias \"o'caml\" found"
        assert parse_diagnostic(msg) == ("unknown-lexer", "o'caml")

    def test_name_with_both_quotes_and_backslash(self):
        name = "a'b\"c\\d"
        msg = f"Error: no formatter found for name {name!r}"
        assert parse_diagnostic(msg) == ("unknown-formatter", name)

    def test_style_name_with_apostrophe(self):
        msg = "Error: Could not find style module \"it's\"."
        assert parse_diagnostic(msg) == ("unknown-style", "it's")

    def test_unrecognised(self):
        assert parse_diagnostic("Traceback (most recent call last): ...") == (None, None)


# ---------------------------------------------------------------------------
# interpret
# ---------------------------------------------------------------------------
class TestInterpret:
    def test_success_returns_text(self):
        out = interpret(_completed(stdout='<div class="highlight">é</div>\n'.encode()))
        assert out == '<div class="highlight">é</div>\n'

    def test_empty_output(self):
        assert interpret(_completed()) == ""

    def test_invalid_utf8(self):
        with pytest.raises(PygmentizeDecodeError) as exc_info:
            interpret(_completed(stdout=b"ok \xff\xfe"))
        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)

    def test_nonzero_exit_carries_stderr(self):
        completed = _completed(
            returncode=1,
            stdout=b"partial",
            stderr=b"Error: no lexer for alias 'klingon' found\n",
        )
        with pytest.raises(PygmentizeExitError) as exc_info:
            interpret(completed)
        err = exc_info.value
        assert err.returncode == 1
        assert err.stderr == "Error: no lexer for alias 'klingon' found"
        assert err.reason == "unknown-lexer"
        assert err.name == "klingon"
        assert "klingon" in str(err)

    def test_nonzero_exit_with_undecodable_stderr(self):
        with pytest.raises(PygmentizeExitError) as exc_info:
            interpret(_completed(returncode=2, stderr=b"bad \xff byte"))
        assert exc_info.value.stderr.startswith("bad ")
        assert exc_info.value.reason is None

    def test_killed_by_signal(self):
        with pytest.raises(PygmentizeExitError) as exc_info:
            interpret(_completed(returncode=-9))
        assert exc_info.value.returncode == -9
        assert exc_info.value.stderr == ""

    def test_stderr_on_success_is_logged(self, caplog):
        with caplog.at_level(logging.WARNING, logger="pygwrap.result"):
            out = interpret(_completed(stdout=b"out", stderr=b"DeprecationWarning: x\n"))
        assert out == "out"
        assert "DeprecationWarning: x" in caplog.text
