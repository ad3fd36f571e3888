"""Shared exception classes for pygwrap."""

from __future__ import annotations


class PygmentizeError(Exception):
    """Base class for every error raised while highlighting."""


class PygmentizeNotFoundError(PygmentizeError):
    """Raised when the pygmentize binary is not installed or cannot be spawned."""

    def __init__(self, binary: str) -> None:
        self.binary = binary
        super().__init__(
            f"pygmentize was not found or not installed (looked for {binary!r}).\n"
            "Install it with:\n"
            "  pip:           pip install Pygments\n"
            "  Ubuntu/Debian: sudo apt-get install python3-pygments\n"
            "  macOS:         brew install pygments\n"
            "Or point pygwrap at it with set_binary_path() or $PYGWRAP_PYGMENTIZE."
        )


class PygmentizeProcessError(PygmentizeError):
    """Raised when communicating with the pygmentize process fails."""


class PygmentizeTimeoutError(PygmentizeProcessError):
    """Raised when pygmentize does not finish within the caller's timeout."""

    def __init__(self, timeout: float) -> None:
        self.timeout = timeout
        super().__init__(f"pygmentize did not finish within {timeout} seconds")


class PygmentizeExitError(PygmentizeError):
    """Raised when pygmentize exits with a non-zero status.

    ``stderr`` holds the engine's trimmed diagnostic text. ``reason`` is one of
    ``"unknown-lexer"``, ``"unknown-formatter"``, ``"unknown-style"`` or
    ``None`` when the message was not recognised; ``name`` is the offending
    lexer/formatter/style name when one could be extracted.
    """

    def __init__(
        self,
        returncode: int,
        stderr: str,
        *,
        reason: str | None = None,
        name: str | None = None,
    ) -> None:
        self.returncode = returncode
        self.stderr = stderr
        self.reason = reason
        self.name = name
        super().__init__(f"pygmentize exited with status {returncode}: {stderr}")


class PygmentizeDecodeError(PygmentizeError):
    """Raised when pygmentize output is not valid UTF-8."""


class UnknownFormatterError(PygmentizeError, KeyError):
    """Raised when a formatter name is not in the local registry."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"Unknown formatter: {self.name!r}"
