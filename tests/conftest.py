"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from goldsearch.core.problem import Problem


@pytest.fixture
def tmp_root(tmp_path: Path) -> Path:
    """Create a temporary project root whose settings select sin(x) on [4;5]."""
    (tmp_path / "goldsearch.yaml").write_text(
        "function: 1\n"
        "left: 4.0\n"
        "right: 5.0\n"
        "precision: 6\n"
    )
    return tmp_path


@pytest.fixture
def problem() -> Problem:
    return Problem()
