# SPDX-License-Identifier: MIT
"""Parser configuration from pyproject.toml and the environment."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from .semver import ParseMode

# Environment variable overriding the configured parse mode
MODE_ENV_VAR = "LOOSE_SEMVER_MODE"

# Table read from pyproject.toml: [tool.loose-semver]
TOOL_TABLE = "loose-semver"


class ConfigError(Exception):
    """Raised when configuration loading fails."""

    pass


def _parse_mode(value: Any, source: str) -> ParseMode:
    try:
        return ParseMode(str(value).strip().lower())
    except ValueError:
        choices = ", ".join(m.value for m in ParseMode)
        raise ConfigError(
            f"Invalid parse mode {value!r} in {source} (expected one of: {choices})"
        ) from None


@dataclass
class ParserConfig:
    """Configuration for version parsing.

    Attributes:
        mode: Whether major, minor and patch must be integers
    """

    mode: ParseMode = ParseMode.TOLERANT

    @property
    def strict(self) -> bool:
        return self.mode is ParseMode.STRICT

    @classmethod
    def from_env(cls, base: Optional["ParserConfig"] = None) -> "ParserConfig":
        """Create configuration from environment variables.

        Args:
            base: Configuration to start from (defaults to built-in defaults)
        """
        config = cls(mode=base.mode) if base is not None else cls()

        if mode := os.getenv(MODE_ENV_VAR):
            config.mode = _parse_mode(mode, MODE_ENV_VAR)

        return config

    @classmethod
    def from_pyproject(cls, project_dir: str | Path) -> "ParserConfig":
        """Load configuration from [tool.loose-semver] in pyproject.toml.

        A missing file or table yields the defaults.

        Raises:
            ConfigError: If the file is not valid TOML or holds invalid values
        """
        pyproject_path = Path(project_dir) / "pyproject.toml"
        if not pyproject_path.exists():
            return cls()

        try:
            with open(pyproject_path, "rb") as f:
                pyproject = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML syntax in {pyproject_path}: {e}") from e

        return cls.from_pyproject_dict(pyproject, source=str(pyproject_path))

    @classmethod
    def from_pyproject_dict(
        cls, pyproject: dict[str, Any], source: str = "pyproject.toml"
    ) -> "ParserConfig":
        """Create configuration from a parsed pyproject.toml dictionary."""
        tool_config = pyproject.get("tool", {}).get(TOOL_TABLE, {})
        if not isinstance(tool_config, dict):
            raise ConfigError(f"[tool.{TOOL_TABLE}] must be a table in {source}")

        config = cls()
        if "mode" in tool_config:
            config.mode = _parse_mode(tool_config["mode"], source)
        return config


def load_config(project_dir: Optional[str | Path] = None) -> ParserConfig:
    """Load configuration from pyproject.toml, then apply environment overrides.

    Args:
        project_dir: Directory containing pyproject.toml (defaults to cwd)
    """
    project_path = Path(project_dir) if project_dir is not None else Path.cwd()
    return ParserConfig.from_env(ParserConfig.from_pyproject(project_path))
