# SPDX-License-Identifier: MIT
"""Tests for loading coding configuration from pyproject.toml."""

from __future__ import annotations

from pathlib import Path

import pytest

from semver_codec import CodingStrategy, ConfigError, SemverConfig, load_config
from semver_codec.config import find_project_root


class TestSemverConfig:
    """Tests for SemverConfig."""

    def test_from_pyproject(self, temp_project: Path) -> None:
        """Test loading strategies from [tool.semver-codec]."""
        config = SemverConfig.from_pyproject(temp_project)

        assert config.project_dir == temp_project
        assert config.encoding_strategy is CodingStrategy.MEMBERWISE
        assert config.decoding_strategy is CodingStrategy.MEMBERWISE

    def test_defaults_without_table(self, plain_project: Path) -> None:
        """Test that a missing table gives the string form."""
        config = SemverConfig.from_pyproject(plain_project)

        assert config.encoding_strategy is CodingStrategy.SEMVER_STRING
        assert config.decoding_strategy is CodingStrategy.SEMVER_STRING

    def test_directions_configured_separately(self, tmp_path: Path) -> None:
        """Test that each direction is read on its own."""
        pyproject = {"tool": {"semver-codec": {"encoding-strategy": "memberForm"}}}
        config = SemverConfig.from_pyproject_dict(pyproject, tmp_path)

        assert config.encoding_strategy is CodingStrategy.MEMBERWISE
        assert config.decoding_strategy is CodingStrategy.SEMVER_STRING

    def test_coding_context(self, temp_project: Path) -> None:
        """Test converting the configuration to a CodingContext."""
        context = SemverConfig.from_pyproject(temp_project).coding_context()

        assert context.encoding_strategy is CodingStrategy.MEMBERWISE
        assert context.decoding_strategy is CodingStrategy.MEMBERWISE

    def test_unknown_strategy(self, tmp_path: Path) -> None:
        """Test that an unrecognized strategy is a configuration error."""
        pyproject = {"tool": {"semver-codec": {"decoding-strategy": "xmlForm"}}}

        with pytest.raises(ConfigError, match="decoding-strategy"):
            SemverConfig.from_pyproject_dict(pyproject, tmp_path)

    def test_non_string_strategy(self, tmp_path: Path) -> None:
        """Test that an array or inline table strategy is a configuration error."""
        (tmp_path / "pyproject.toml").write_text(
            '[tool.semver-codec]\nencoding-strategy = ["memberForm"]\n'
        )

        with pytest.raises(ConfigError, match="encoding-strategy"):
            load_config(tmp_path)

        pyproject = {"tool": {"semver-codec": {"decoding-strategy": {"form": "memberForm"}}}}
        with pytest.raises(ConfigError, match="decoding-strategy"):
            SemverConfig.from_pyproject_dict(pyproject, tmp_path)

    def test_table_must_be_a_table(self, tmp_path: Path) -> None:
        """Test that a non-table [tool.semver-codec] is a configuration error."""
        (tmp_path / "pyproject.toml").write_text('[tool]\nsemver-codec = "memberForm"\n')

        with pytest.raises(ConfigError, match="must be a table"):
            load_config(tmp_path)

    def test_invalid_toml(self, tmp_path: Path) -> None:
        """Test that invalid TOML raises ConfigError."""
        (tmp_path / "pyproject.toml").write_text("[tool.semver-codec\n")

        with pytest.raises(ConfigError, match="Invalid TOML"):
            SemverConfig.from_pyproject(tmp_path)

    def test_missing_pyproject(self, tmp_path: Path) -> None:
        """Test that a missing pyproject.toml raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            SemverConfig.from_pyproject(tmp_path)


class TestLoadConfig:
    """Tests for load_config and find_project_root."""

    def test_load_from_directory(self, temp_project: Path) -> None:
        """Test loading configuration for an explicit directory."""
        config = load_config(temp_project)

        assert config.encoding_strategy is CodingStrategy.MEMBERWISE

    def test_directory_without_pyproject(self, tmp_path: Path) -> None:
        """Test that a directory without pyproject.toml gives defaults."""
        config = load_config(tmp_path)

        assert config.project_dir == tmp_path
        assert config.encoding_strategy is CodingStrategy.SEMVER_STRING

    def test_find_project_root_from_subdirectory(self, temp_project: Path) -> None:
        """Test finding the project root from a nested directory."""
        nested = temp_project / "src" / "pkg"
        nested.mkdir(parents=True)

        assert find_project_root(nested) == temp_project.resolve()

    def test_load_searches_from_cwd(
        self, temp_project: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test that load_config without arguments searches upward from cwd."""
        nested = temp_project / "docs"
        nested.mkdir()
        monkeypatch.chdir(nested)

        config = load_config()

        assert config.project_dir == temp_project.resolve()
        assert config.decoding_strategy is CodingStrategy.MEMBERWISE
