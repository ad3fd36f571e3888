"""Shared test fixtures for pygwrap tests."""

import os
import shutil
import sys
import textwrap
from pathlib import Path

import pytest

from pygwrap.config import ENV_BINARY, set_binary_path


@pytest.fixture(autouse=True)
def reset_binary(monkeypatch):
    """Every test starts with no binary override and no env variable."""
    monkeypatch.delenv(ENV_BINARY, raising=False)
    set_binary_path(None)
    yield
    set_binary_path(None)


@pytest.fixture
def pygmentize_bin():
    """Path to the real pygmentize installed alongside Pygments."""
    path = shutil.which("pygmentize")
    if path is None:
        candidate = Path(sys.executable).parent / "pygmentize"
        if candidate.exists():
            path = str(candidate)
    if path is None:
        pytest.skip("pygmentize is not installed")
    return path


@pytest.fixture
def fake_engine(tmp_path):
    """Factory for stand-in engines: small executable Python scripts.

    Usage:
        binary = fake_engine('''
            import sys
            sys.stdout.write(sys.stdin.read())
        ''')
    """
    if sys.platform == "win32":
        pytest.skip("fake engines rely on shebang scripts")

    counter = {"n": 0}

    def make(body: str) -> str:
        counter["n"] += 1
        script = tmp_path / f"fake-pygmentize-{counter['n']}"
        script.write_text(f"#!{sys.executable}\n" + textwrap.dedent(body))
        os.chmod(script, 0o755)
        return str(script)

    return make
