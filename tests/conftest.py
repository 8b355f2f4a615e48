"""Shared test fixtures for abc-gate tests."""

import os
import textwrap
from typing import Optional

import pytest

from abc_gate.scanning import parse_source


@pytest.fixture
def make_file(tmp_path):
    """Write a dedented Ruby snippet to a fresh file and return its path."""
    counter = {"n": 0}

    def _make(source: str, name: Optional[str] = None) -> str:
        counter["n"] += 1
        path = tmp_path / (name or f"file_{counter['n']}.rb")
        path.write_text(textwrap.dedent(source))
        return str(path)

    return _make


@pytest.fixture
def parse():
    """Parse a dedented Ruby snippet."""

    def _parse(source: str):
        return parse_source(textwrap.dedent(source))

    return _parse


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Run with no global/project config files and no ABC_GATE_* variables."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(tmp_path)
    for key in list(os.environ):
        if key.startswith("ABC_GATE_"):
            monkeypatch.delenv(key)
    return tmp_path
