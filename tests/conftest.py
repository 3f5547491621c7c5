# SPDX-License-Identifier: MIT
"""Pytest configuration and fixtures for strict_semver tests."""

from __future__ import annotations

from pathlib import Path
from typing import Generator

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def temp_project(tmp_path: Path) -> Generator[Path, None, None]:
    """Create a temporary project directory with pyproject.toml."""
    project_dir = tmp_path / "test_project"
    project_dir.mkdir()

    pyproject = project_dir / "pyproject.toml"
    pyproject.write_text(
        """[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "test-project"
version = "1.4.2"
description = "Test project"
"""
    )

    yield project_dir


@pytest.fixture
def tagged_project(tmp_path: Path) -> Generator[Path, None, None]:
    """Create a project overriding the version and tag prefix in [tool.strict-semver]."""
    project_dir = tmp_path / "tagged_project"
    project_dir.mkdir()

    (project_dir / "pyproject.toml").write_text(
        """[project]
name = "tagged-project"
version = "0.0.0"

[tool.strict-semver]
current-version = "2.0.0-rc.1+build.5"
tag-prefix = "release-"
"""
    )

    yield project_dir
