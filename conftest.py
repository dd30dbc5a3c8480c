"""Shared pytest fixtures."""

from pathlib import Path

import pytest


@pytest.fixture
def write_file(tmp_path):
    """Write a text file under tmp_path, creating parent directories."""
    def _write(relative: str, content: str) -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
        return path
    return _write


@pytest.fixture
def nested_dir(tmp_path):
    """An a/b/c directory chain under tmp_path; returns the innermost dir."""
    path = tmp_path / "a" / "b" / "c"
    path.mkdir(parents=True)
    return path
