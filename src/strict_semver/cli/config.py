# SPDX-License-Identifier: MIT
"""CLI configuration loading from pyproject.toml."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from ..exceptions import InvalidVersionError
from ..semver import Version

TOOL_TABLE = "strict-semver"
DEFAULT_TAG_PREFIX = "v"


class ConfigError(Exception):
    """Raised when configuration loading fails."""

    pass


@dataclass
class CLIConfig:
    """Release configuration loaded from pyproject.toml.

    Attributes:
        project_dir: Directory containing pyproject.toml
        name: Project name
        version_text: Declared version, parsed on demand by require_version
        tag_prefix: Prefix prepended to versions when printing tag names
    """

    project_dir: Path
    name: str = ""
    version_text: str = ""
    tag_prefix: str = DEFAULT_TAG_PREFIX

    @classmethod
    def from_pyproject(cls, project_dir: str | Path) -> "CLIConfig":
        """Load configuration from pyproject.toml.

        Args:
            project_dir: Directory containing pyproject.toml

        Returns:
            CLIConfig instance

        Raises:
            ConfigError: If the file is invalid
            FileNotFoundError: If pyproject.toml doesn't exist
        """
        project_path = Path(project_dir)
        pyproject_path = project_path / "pyproject.toml"

        if not pyproject_path.exists():
            raise FileNotFoundError(f"pyproject.toml not found in {project_path}")

        try:
            with open(pyproject_path, "rb") as f:
                pyproject = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML syntax: {e}") from e

        return cls.from_pyproject_dict(pyproject, project_path)

    @classmethod
    def from_pyproject_dict(
        cls,
        pyproject: dict[str, Any],
        project_dir: Path,
    ) -> "CLIConfig":
        """Create CLIConfig from a parsed pyproject.toml dictionary.

        ``[tool.strict-semver] current-version`` takes precedence over
        ``[project] version``.

        Raises:
            ConfigError: If the tag prefix is malformed
        """
        project = pyproject.get("project", {})
        tool = pyproject.get("tool", {}).get(TOOL_TABLE, {})

        version_text = tool.get("current-version") or project.get("version") or ""

        tag_prefix = tool.get("tag-prefix", DEFAULT_TAG_PREFIX)
        if not isinstance(tag_prefix, str):
            raise ConfigError(f"tag-prefix must be a string, got {type(tag_prefix).__name__}")

        return cls(
            project_dir=project_dir,
            name=project.get("name", ""),
            version_text=version_text,
            tag_prefix=tag_prefix,
        )

    def require_version(self) -> Version:
        """Return the current version, failing if the project declares none.

        Raises:
            ConfigError: If no version is configured or it is not a
                semantic version
        """
        if not self.version_text:
            raise ConfigError(
                f"No version found in {self.project_dir / 'pyproject.toml'} "
                f"(set [project] version or [tool.{TOOL_TABLE}] current-version)"
            )
        try:
            return Version.from_string(self.version_text)
        except InvalidVersionError as e:
            raise ConfigError(f"Project version is not a semantic version: {e}") from e


def find_project_root(start_dir: Optional[str | Path] = None) -> Path:
    """Find the project root by looking for pyproject.toml.

    Args:
        start_dir: Directory to start searching from (defaults to cwd)

    Returns:
        Path to the project root directory

    Raises:
        ConfigError: If no project root is found
    """
    current = Path(start_dir) if start_dir else Path.cwd()
    current = current.resolve()

    while current != current.parent:
        if (current / "pyproject.toml").exists():
            return current
        current = current.parent

    raise ConfigError("Could not find project root (no pyproject.toml found)")


def load_config(project_dir: Optional[str | Path] = None) -> CLIConfig:
    """Load CLI configuration from the project directory.

    Args:
        project_dir: Project directory (defaults to finding project root)

    Raises:
        ConfigError: If configuration cannot be loaded
        FileNotFoundError: If pyproject.toml doesn't exist
    """
    if project_dir is None:
        project_dir = find_project_root()

    return CLIConfig.from_pyproject(project_dir)
