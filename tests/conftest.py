"""Shared pytest fixtures for calcolatrice tests."""

from pathlib import Path

import pytest


@pytest.fixture
def write_config(tmp_path: Path):
    """Return a helper that writes calcolatrice.toml into tmp_path."""

    def _write(content: str, name: str = "calcolatrice.toml") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
