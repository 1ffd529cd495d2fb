# SPDX-License-Identifier: MIT
"""Pytest configuration and fixtures for semver_codec tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def temp_project(tmp_path: Path) -> Path:
    """Create a temporary project whose pyproject.toml selects the member form."""
    project_dir = tmp_path / "test_project"
    project_dir.mkdir()

    pyproject = project_dir / "pyproject.toml"
    pyproject.write_text(
        """[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "test-project"
version = "1.0.0"

[tool.semver-codec]
encoding-strategy = "memberForm"
decoding-strategy = "memberForm"
"""
    )

    return project_dir


@pytest.fixture
def plain_project(tmp_path: Path) -> Path:
    """Create a temporary project without a [tool.semver-codec] table."""
    project_dir = tmp_path / "plain_project"
    project_dir.mkdir()

    (project_dir / "pyproject.toml").write_text(
        """[project]
name = "plain-project"
version = "0.1.0"
"""
    )

    return project_dir
