"""Run pygmentize as a subprocess.

The source text is fed through stdin and both output streams are captured.
``Popen.communicate`` services stdin, stdout and stderr concurrently, so a
large payload cannot deadlock on a full pipe buffer while the engine is still
writing output.
"""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
from dataclasses import dataclass
from typing import Sequence

from pygwrap.config import get_binary_path
from pygwrap.errors import (
    PygmentizeNotFoundError,
    PygmentizeProcessError,
    PygmentizeTimeoutError,
)

logger = logging.getLogger(__name__)


@dataclass
class Completed:
    """Raw outcome of one pygmentize run."""

    args: list[str]
    returncode: int
    stdout: bytes
    stderr: bytes


def resolve_binary(binary: str | None = None) -> str:
    """Return an executable path for pygmentize, or raise.

    Bare names are looked up on ``PATH``; anything with a directory part is
    used as given and fails at spawn time if it does not exist.
    """
    name = binary if binary is not None else get_binary_path()
    if not name:
        raise PygmentizeNotFoundError(name)
    if os.path.dirname(name):
        return name
    path = shutil.which(name)
    if path is None:
        raise PygmentizeNotFoundError(name)
    return path


def _child_env() -> dict[str, str]:
    env = os.environ.copy()
    # pygmentize encodes for sys.stdout, which is a pipe here
    env["PYTHONIOENCODING"] = "utf-8"
    return env


def run_pygmentize(
    args: Sequence[str],
    source: str,
    *,
    binary: str | None = None,
    timeout: float | None = None,
) -> Completed:
    """Spawn pygmentize with *args*, write *source* to stdin, collect output.

    Raises PygmentizeNotFoundError when the binary cannot be found or spawned,
    PygmentizeProcessError when the pipes fail, and PygmentizeTimeoutError when
    *timeout* expires. A non-zero exit status is returned, not raised.
    """
    exe = resolve_binary(binary)
    argv = [exe, *args]
    payload = source.encode("utf-8")
    logger.debug("running %r (%d bytes on stdin)", argv, len(payload))

    try:
        proc = subprocess.Popen(
            argv,
            stdin=subprocess.PIPE,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            env=_child_env(),
        )
    except (FileNotFoundError, PermissionError, NotADirectoryError) as exc:
        raise PygmentizeNotFoundError(exe) from exc
    except OSError as exc:
        raise PygmentizeProcessError(f"failed to start {exe}: {exc}") from exc

    with proc:
        try:
            stdout, stderr = proc.communicate(payload, timeout=timeout)
        except subprocess.TimeoutExpired as exc:
            proc.kill()
            proc.communicate()
            raise PygmentizeTimeoutError(timeout) from exc
        except OSError as exc:
            proc.kill()
            proc.wait()
            raise PygmentizeProcessError(
                f"I/O error while talking to {exe}: {exc}"
            ) from exc

    logger.debug(
        "%s exited with %d (%d bytes stdout, %d bytes stderr)",
        exe, proc.returncode, len(stdout), len(stderr),
    )
    return Completed(
        args=argv,
        returncode=proc.returncode,
        stdout=stdout,
        stderr=stderr,
    )
