# SPDX-License-Identifier: MIT
"""Loose semantic version parsing, comparison and upgrade classification.

Versions look like vMAJOR.MINOR[.PATCH[.SUFFIX]]. Components are kept as
text and ordered by their leading integer, then by the remaining text.

Example:
    >>> from loose_semver import parse_version, compare_versions, upgrade_kind
    >>>
    >>> version = parse_version("v1.2.3.rc1")
    >>> version.suffix
    'rc1'
    >>> str(version)
    'v1.2.3rc1'
    >>>
    >>> compare_versions("v1.1.1", "v1.2.0")
    -1
    >>> upgrade_kind("v1.1.1", "v1.2.0").level
    'minor'
"""

__version__ = "0.1.0"

from .semver import (
    Version,
    ParseMode,
    parse_version,
    is_valid_version,
    VersionError,
    InvalidVersionError,
    InvalidComponentError,
)
from .compare import (
    UpgradeKind,
    split_component,
    compare_parts,
    compare_versions,
    upgrade_kind,
    version_key,
)
from .config import (
    ParserConfig,
    ConfigError,
    load_config,
)

__all__ = [
    # Version parsing
    "Version",
    "ParseMode",
    "parse_version",
    "is_valid_version",
    "VersionError",
    "InvalidVersionError",
    "InvalidComponentError",
    # Version comparison
    "UpgradeKind",
    "split_component",
    "compare_parts",
    "compare_versions",
    "upgrade_kind",
    "version_key",
    # Configuration
    "ParserConfig",
    "ConfigError",
    "load_config",
]
