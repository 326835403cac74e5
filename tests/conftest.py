# SPDX-License-Identifier: MIT
"""Pytest configuration and fixtures for loose-semver tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from loose_semver.config import MODE_ENV_VAR


@pytest.fixture(autouse=True)
def clean_mode_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a parse mode set in the outer environment out of the tests."""
    monkeypatch.delenv(MODE_ENV_VAR, raising=False)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def strict_project(tmp_path: Path) -> Path:
    """Create a project directory whose pyproject.toml selects strict parsing."""
    project_dir = tmp_path / "strict_project"
    project_dir.mkdir()
    (project_dir / "pyproject.toml").write_text(
        """[project]
name = "strict-project"
version = "1.0.0"

[tool.loose-semver]
mode = "strict"
"""
    )
    return project_dir
