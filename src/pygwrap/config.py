"""Location of the pygmentize binary.

The path is resolved at invocation time from, in order: the ``binary``
argument of the call, the process-wide override set with
:func:`set_binary_path`, the ``PYGWRAP_PYGMENTIZE`` environment variable, and
finally the plain name ``pygmentize`` looked up on ``PATH``.
"""

from __future__ import annotations

import os
import threading

DEFAULT_BINARY = "pygmentize"
ENV_BINARY = "PYGWRAP_PYGMENTIZE"

_lock = threading.Lock()
_override: str | None = None


def set_binary_path(path: str | os.PathLike[str] | None) -> None:
    """Override the pygmentize binary for all subsequent invocations.

    Pass ``None`` to drop the override.
    """
    global _override
    with _lock:
        _override = os.fspath(path) if path is not None else None


def get_binary_path() -> str:
    """Return the configured binary (override, environment, or default name)."""
    with _lock:
        override = _override
    if override is not None:
        return override
    return os.getenv(ENV_BINARY) or DEFAULT_BINARY
