# SPDX-License-Identifier: MIT
"""Tests for parser configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from loose_semver import ConfigError, ParseMode, ParserConfig, load_config
from loose_semver.config import MODE_ENV_VAR


class TestParserConfig:
    """Tests for ParserConfig defaults and environment overrides."""

    def test_defaults(self) -> None:
        """Test that parsing is tolerant by default."""
        config = ParserConfig()
        assert config.mode is ParseMode.TOLERANT
        assert config.strict is False

    def test_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test reading the mode from the environment."""
        monkeypatch.setenv(MODE_ENV_VAR, "Strict")
        config = ParserConfig.from_env()
        assert config.mode is ParseMode.STRICT
        assert config.strict is True

    def test_from_env_unset_keeps_base(self) -> None:
        """Test that an unset variable keeps the base configuration."""
        base = ParserConfig(mode=ParseMode.STRICT)
        assert ParserConfig.from_env(base).mode is ParseMode.STRICT

    def test_from_env_does_not_modify_base(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that environment overrides produce a new configuration."""
        monkeypatch.setenv(MODE_ENV_VAR, "tolerant")
        base = ParserConfig(mode=ParseMode.STRICT)
        assert ParserConfig.from_env(base).mode is ParseMode.TOLERANT
        assert base.mode is ParseMode.STRICT

    def test_from_env_invalid(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that an unknown mode raises ConfigError."""
        monkeypatch.setenv(MODE_ENV_VAR, "lenient")
        with pytest.raises(ConfigError, match="Invalid parse mode"):
            ParserConfig.from_env()


class TestPyprojectConfig:
    """Tests for reading [tool.loose-semver] from pyproject.toml."""

    def test_strict_project(self, strict_project: Path) -> None:
        """Test reading the mode from pyproject.toml."""
        assert ParserConfig.from_pyproject(strict_project).mode is ParseMode.STRICT

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test that a missing pyproject.toml yields defaults."""
        assert ParserConfig.from_pyproject(tmp_path) == ParserConfig()

    def test_missing_table(self, tmp_path: Path) -> None:
        """Test that a pyproject.toml without the table yields defaults."""
        (tmp_path / "pyproject.toml").write_text('[project]\nname = "x"\n')
        assert ParserConfig.from_pyproject(tmp_path) == ParserConfig()

    def test_invalid_toml(self, tmp_path: Path) -> None:
        """Test that invalid TOML raises ConfigError."""
        (tmp_path / "pyproject.toml").write_text("[tool.loose-semver\nmode = ")
        with pytest.raises(ConfigError, match="Invalid TOML syntax"):
            ParserConfig.from_pyproject(tmp_path)

    def test_invalid_mode(self, tmp_path: Path) -> None:
        """Test that an unknown mode in pyproject.toml raises ConfigError."""
        (tmp_path / "pyproject.toml").write_text('[tool.loose-semver]\nmode = "exact"\n')
        with pytest.raises(ConfigError, match="exact"):
            ParserConfig.from_pyproject(tmp_path)

    def test_table_must_be_table(self) -> None:
        """Test that a non-table value raises ConfigError."""
        with pytest.raises(ConfigError, match="must be a table"):
            ParserConfig.from_pyproject_dict({"tool": {"loose-semver": "strict"}})


class TestLoadConfig:
    """Tests for load_config function."""

    def test_pyproject(self, strict_project: Path) -> None:
        """Test loading from pyproject.toml."""
        assert load_config(strict_project).mode is ParseMode.STRICT

    def test_environment_overrides_pyproject(
        self, strict_project: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test that the environment wins over pyproject.toml."""
        monkeypatch.setenv(MODE_ENV_VAR, "tolerant")
        assert load_config(strict_project).mode is ParseMode.TOLERANT

    def test_defaults_to_cwd(self, strict_project: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that the current directory is searched by default."""
        monkeypatch.chdir(strict_project)
        assert load_config().mode is ParseMode.STRICT
