# SPDX-License-Identifier: MIT
"""Coding configuration loading from pyproject.toml.

Projects choose how versions are written to and read from structured data
with a ``[tool.semver-codec]`` table:

    [tool.semver-codec]
    encoding-strategy = "memberForm"
    decoding-strategy = "stringForm"
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from .coding import DEFAULT_STRATEGY, CodingContext, CodingStrategy

logger = logging.getLogger(__name__)

TOOL_TABLE = "semver-codec"


class ConfigError(Exception):
    """Raised when configuration loading fails."""

    pass


def _strategy_option(table: dict[str, Any], key: str) -> CodingStrategy:
    value = table.get(key)
    if value is None:
        return DEFAULT_STRATEGY

    valid = {member.value for member in CodingStrategy}
    if not isinstance(value, str) or value not in valid:
        raise ConfigError(
            f"Invalid {key} {value!r} in [tool.{TOOL_TABLE}]; "
            f"expected one of: {', '.join(sorted(valid))}"
        )
    return CodingStrategy(value)


@dataclass
class SemverConfig:
    """Semantic version configuration loaded from pyproject.toml.

    Attributes:
        project_dir: Directory containing pyproject.toml
        encoding_strategy: Structured form written when encoding versions
        decoding_strategy: Structured form expected when decoding versions
    """

    project_dir: Path
    encoding_strategy: CodingStrategy = DEFAULT_STRATEGY
    decoding_strategy: CodingStrategy = DEFAULT_STRATEGY

    @classmethod
    def from_pyproject(cls, project_dir: str | Path) -> "SemverConfig":
        """Load configuration from pyproject.toml.

        Args:
            project_dir: Directory containing pyproject.toml

        Returns:
            SemverConfig instance

        Raises:
            ConfigError: If the file is invalid or holds an unknown strategy
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

        logger.debug("Loaded coding configuration from %s", pyproject_path)
        return cls.from_pyproject_dict(pyproject, project_path)

    @classmethod
    def from_pyproject_dict(
        cls,
        pyproject: dict[str, Any],
        project_dir: Path,
    ) -> "SemverConfig":
        """Create SemverConfig from a parsed pyproject.toml dictionary."""
        tool = pyproject.get("tool", {})
        table = tool.get(TOOL_TABLE, {}) if isinstance(tool, dict) else None
        if not isinstance(table, dict):
            raise ConfigError(f"[tool.{TOOL_TABLE}] must be a table")

        return cls(
            project_dir=project_dir,
            encoding_strategy=_strategy_option(table, "encoding-strategy"),
            decoding_strategy=_strategy_option(table, "decoding-strategy"),
        )

    def coding_context(self) -> CodingContext:
        """Return the CodingContext described by this configuration."""
        return CodingContext(
            encoding_strategy=self.encoding_strategy,
            decoding_strategy=self.decoding_strategy,
        )


def find_project_root(start_dir: Optional[str | Path] = None) -> Optional[Path]:
    """Find the nearest directory containing pyproject.toml.

    Args:
        start_dir: Directory to start searching from (defaults to cwd)

    Returns:
        Path to the project root directory, or None if there is none
    """
    current = Path(start_dir) if start_dir else Path.cwd()
    current = current.resolve()

    while current != current.parent:
        if (current / "pyproject.toml").exists():
            return current
        current = current.parent

    return None


def load_config(project_dir: Optional[str | Path] = None) -> SemverConfig:
    """Load configuration for a project.

    Args:
        project_dir: Project directory (defaults to finding project root)

    Returns:
        SemverConfig instance; defaults when no pyproject.toml is found

    Raises:
        ConfigError: If configuration cannot be loaded
    """
    if project_dir is None:
        project_dir = find_project_root()
        if project_dir is None:
            return SemverConfig(project_dir=Path.cwd())

    project_path = Path(project_dir)

    if (project_path / "pyproject.toml").exists():
        return SemverConfig.from_pyproject(project_path)

    return SemverConfig(project_dir=project_path)
