# SPDX-License-Identifier: MIT
"""Version comparison and upgrade classification.

Each component is ordered by its leading integer value first and then by
the remaining text in code point order, so "2b" < "10" and "2a" < "2b".
An empty component sorts before any present one.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator, Optional, Union

from .semver import (
    COMPONENTS,
    InvalidComponentError,
    Version,
    digit_run_value,
    parse_version,
)

VersionLike = Union[str, bytes, Version]

# Leading digit run, then the rest of the component (no line breaks)
_COMPONENT_PATTERN = re.compile(r"(?P<digits>[0-9]*)(?P<rest>.*)")

# Weights used to fold the four component comparisons into one ordering
_WEIGHTS = (1000, 100, 10, 1)


def split_component(component: str) -> tuple[int, str]:
    """Split a component into its leading integer and trailing text.

    Args:
        component: A single version component, e.g. "12", "2b" or "alpha"

    Returns:
        A tuple of (int_part, str_part)

    Raises:
        InvalidComponentError: If the component cannot be decomposed or its
            leading integer is out of range

    Examples:
        >>> split_component("2b")
        (2, 'b')
        >>> split_component("alpha")
        (0, 'alpha')
        >>> split_component("")
        (0, '')
    """
    if not isinstance(component, str):
        raise InvalidComponentError(
            str(component), f"Version part must be a string, got {type(component).__name__}"
        )

    match = _COMPONENT_PATTERN.fullmatch(component)
    if not match:
        raise InvalidComponentError(component)

    digits = match.group("digits")
    int_part = digit_run_value(digits)
    if int_part is None:
        raise InvalidComponentError(component, f"Invalid integer part: {component!r}")

    return int_part, match.group("rest")


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def compare_parts(part1: str, part2: str) -> int:
    """Compare two version components.

    Returns:
        -1 if part1 < part2
        0 if part1 == part2
        1 if part1 > part2

    Examples:
        >>> compare_parts("2b", "10")
        -1
        >>> compare_parts("2b", "2a")
        1
    """
    int1, str1 = split_component(part1)
    int2, str2 = split_component(part2)

    if int1 != int2:
        return -1 if int1 < int2 else 1
    if str1 != str2:
        return -1 if str1 < str2 else 1
    return 0


def _as_version(version: VersionLike) -> Version:
    if isinstance(version, Version):
        return version
    return parse_version(version)


def _component_cmps(version1: Version, version2: Version) -> tuple[int, ...]:
    return tuple(
        compare_parts(getattr(version1, name), getattr(version2, name)) for name in COMPONENTS
    )


def compare_versions(version1: VersionLike, version2: VersionLike) -> int:
    """Compare two versions component by component.

    Args:
        version1: First version (Version object, string or bytes)
        version2: Second version (Version object, string or bytes)

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        InvalidVersionError: If either version text cannot be parsed
        InvalidComponentError: If a component cannot be split

    Examples:
        >>> compare_versions("v1.1.1", "v1.2.0")
        -1
        >>> compare_versions("v1.2.3.alpha", "v1.2.3.beta")
        -1
        >>> compare_versions("v1.2", "1.2")
        0
    """
    v1 = _as_version(version1)
    v2 = _as_version(version2)

    folded = sum(weight * cmp for weight, cmp in zip(_WEIGHTS, _component_cmps(v1, v2)))
    return _sign(folded)


@dataclass(frozen=True, slots=True)
class UpgradeKind:
    """Which component boundaries were crossed going from one version to another.

    Crossing a boundary implies all less significant ones, so a minor upgrade
    also reports patch and suffix.
    """

    major: bool = False
    minor: bool = False
    patch: bool = False
    suffix: bool = False

    def __iter__(self) -> Iterator[bool]:
        return iter((self.major, self.minor, self.patch, self.suffix))

    def __bool__(self) -> bool:
        return any(self)

    @property
    def level(self) -> Optional[str]:
        """Return the most significant crossed boundary, or None."""
        for name, crossed in zip(COMPONENTS, self):
            if crossed:
                return name
        return None

    def to_dict(self) -> dict[str, bool]:
        """Return the flags as a dictionary keyed by component name."""
        return dict(zip(COMPONENTS, self))


def upgrade_kind(version1: VersionLike, version2: VersionLike) -> UpgradeKind:
    """Classify the upgrade from version1 to version2.

    Components are checked from major down to suffix and the first one that
    increased decides the result. Equal versions, and downgrades where no
    component increased, yield all flags False.

    Raises:
        InvalidVersionError: If either version text cannot be parsed
        InvalidComponentError: If a component cannot be split

    Examples:
        >>> upgrade_kind("v1.1.1", "v1.2.0")
        UpgradeKind(major=False, minor=True, patch=True, suffix=True)
        >>> upgrade_kind("v1.2", "v1.1").level is None
        True
    """
    v1 = _as_version(version1)
    v2 = _as_version(version2)

    # Every component is checked so malformed ones always raise
    ups = _component_cmps(v2, v1)

    for index, up in enumerate(ups):
        if up > 0:
            flags = [False] * index + [True] * (len(COMPONENTS) - index)
            return UpgradeKind(*flags)
    return UpgradeKind()


def version_key(version: VersionLike) -> tuple:
    """Return a sort key for a version, consistent with compare_versions.

    Examples:
        >>> sorted(["v1.10", "v1.2.3", "v1.2"], key=version_key)
        ['v1.2', 'v1.2.3', 'v1.10']
    """
    v = _as_version(version)
    return tuple(split_component(getattr(v, name)) for name in COMPONENTS)
