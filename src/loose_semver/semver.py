# SPDX-License-Identifier: MIT
"""Loose semantic version parsing.

Supports vMAJOR.MINOR[.PATCH[.SUFFIX]] where every component is kept as text:
- Tolerant mode accepts any component text: v1.2.3, 1.2.3.rc1, vA1.2.3
- Strict mode requires integer major, minor and patch: v1.2, v01.2.3.beta
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union

VERSION_PREFIX = "v"
PART_SEPARATOR = "."

# Components always appear in this order, most significant first
COMPONENTS = ("major", "minor", "patch", "suffix")

_STRICT_INTEGER = re.compile(r"[0-9]+")

# Largest leading integer accepted in a component (signed 64-bit)
MAX_COMPONENT_INT = 2**63 - 1
_MAX_COMPONENT_DIGITS = len(str(MAX_COMPONENT_INT))


class VersionError(ValueError):
    """Base class for version parsing and comparison errors."""

    def __init__(self, value: str, message: str = ""):
        self.value = value
        self.message = message or f"Invalid version: {value}"
        super().__init__(self.message)


class InvalidVersionError(VersionError):
    """Raised when text cannot be parsed into a version."""

    def __init__(self, value: str, message: str = ""):
        super().__init__(value, message or f"Invalid version, expecting semver string: {value!r}")


class InvalidComponentError(VersionError):
    """Raised when a version component cannot be split into digits and text."""

    def __init__(self, value: str, message: str = ""):
        super().__init__(value, message or f"Invalid version part: {value!r}")


class ParseMode(str, Enum):
    """How strictly major, minor and patch components are checked."""

    TOLERANT = "tolerant"
    STRICT = "strict"


@dataclass(frozen=True, slots=True)
class Version:
    """Represents a parsed loose semantic version.

    Attributes:
        major: Major component text (required)
        minor: Minor component text (required)
        patch: Patch component text, empty when absent
        suffix: Free-form trailing identifier, empty when absent
    """

    major: str
    minor: str
    patch: str = ""
    suffix: str = ""

    def __str__(self) -> str:
        """Return the canonical string representation of the version.

        The suffix is appended without a separator; any separator must
        already be part of the stored suffix.
        """
        version = f"{VERSION_PREFIX}{self.major}.{self.minor}"
        if not self.patch:
            return version
        version += f".{self.patch}"
        if self.suffix:
            version += self.suffix
        return version

    @property
    def is_strict(self) -> bool:
        """Return True if major, minor and any patch are plain integers."""
        components = [self.major, self.minor]
        if self.patch:
            components.append(self.patch)
        return all(_STRICT_INTEGER.fullmatch(component) for component in components)

    def to_dict(self) -> dict[str, str]:
        """Return the version as a dictionary, omitting empty patch and suffix."""
        data = {"major": self.major, "minor": self.minor}
        if self.patch:
            data["patch"] = self.patch
        if self.suffix:
            data["suffix"] = self.suffix
        return data

    def to_json(self) -> bytes:
        """Serialize the version as compact JSON bytes.

        Examples:
            >>> Version("1", "2", "3").to_json()
            b'{"major":"1","minor":"2","patch":"3"}'
        """
        text = json.dumps(self.to_dict(), separators=(",", ":"), ensure_ascii=False)
        return text.encode("utf-8")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Version":
        """Create a Version from a dictionary produced by to_dict().

        Raises:
            InvalidVersionError: If required fields are missing or not strings
        """
        if not isinstance(data, dict):
            raise InvalidVersionError(
                repr(data), f"Version data must be an object, got {type(data).__name__}"
            )

        for name in ("major", "minor"):
            if name not in data:
                raise InvalidVersionError(repr(data), f"Missing required field: {name}")

        fields: dict[str, str] = {}
        for name in COMPONENTS:
            value = data.get(name, "")
            if not isinstance(value, str):
                raise InvalidVersionError(
                    repr(data), f"Field '{name}' must be a string, got {type(value).__name__}"
                )
            fields[name] = value

        if not fields["major"]:
            raise InvalidVersionError(repr(data), "Major value cannot be empty")

        return cls(**fields)

    @classmethod
    def from_json(cls, data: Union[str, bytes]) -> "Version":
        """Create a Version from JSON text produced by to_json()."""
        try:
            loaded = json.loads(data)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise InvalidVersionError(str(data), f"Invalid version JSON: {e}") from e
        return cls.from_dict(loaded)


def _decode(text: Union[str, bytes]) -> str:
    if isinstance(text, bytes):
        try:
            return text.decode("utf-8")
        except UnicodeDecodeError as e:
            raise InvalidVersionError(repr(text), f"Version is not valid UTF-8: {e}") from e
    if not isinstance(text, str):
        raise InvalidVersionError(
            str(text), f"Version must be a string or bytes, got {type(text).__name__}"
        )
    return text


def digit_run_value(digits: str) -> Optional[int]:
    """Return the value of a run of ASCII digits, or None if it is out of range."""
    significant = digits.lstrip("0")
    if len(significant) > _MAX_COMPONENT_DIGITS:
        return None
    value = int(significant) if significant else 0
    if value > MAX_COMPONENT_INT:
        return None
    return value


def _parse_mode(mode: Union[ParseMode, str]) -> ParseMode:
    if isinstance(mode, ParseMode):
        return mode
    return ParseMode(str(mode).strip().lower())


def _strict_integer(value: str, name: str, original: str) -> str:
    number = digit_run_value(value) if _STRICT_INTEGER.fullmatch(value) else None
    if number is None:
        raise InvalidVersionError(original, f"{name.capitalize()} value must be an integer")
    return str(number)


def parse_version(
    text: Union[str, bytes],
    mode: Union[ParseMode, str] = ParseMode.TOLERANT,
) -> Version:
    """Parse a loose semantic version string into a Version object.

    Args:
        text: Version text or UTF-8 bytes, optionally prefixed with a single "v"
        mode: ParseMode.TOLERANT accepts any component text,
            ParseMode.STRICT requires integer major, minor and patch

    Returns:
        A Version object with the parsed components

    Raises:
        InvalidVersionError: If the text yields no usable parts, or a strict
            mode check fails
        ValueError: If mode is not a known ParseMode value

    Examples:
        >>> parse_version("v1.2.3")
        Version(major='1', minor='2', patch='3', suffix='')

        >>> parse_version("1.2.3.rc1")
        Version(major='1', minor='2', patch='3', suffix='rc1')

        >>> parse_version("vA1.2")
        Version(major='A1', minor='2', patch='', suffix='')
    """
    mode = _parse_mode(mode)
    original = _decode(text).strip()

    source = original
    if source.startswith(VERSION_PREFIX):
        source = source[len(VERSION_PREFIX) :]
    if not source:
        raise InvalidVersionError(original, "Version string cannot be empty")

    # Parts past the fourth are ignored
    parts = source.split(PART_SEPARATOR)[: len(COMPONENTS)]
    fields = dict(zip(COMPONENTS, parts))

    if not fields["major"]:
        raise InvalidVersionError(original, "Major value cannot be empty")

    if mode is ParseMode.STRICT:
        if "minor" not in fields:
            raise InvalidVersionError(original)
        for name in ("major", "minor", "patch"):
            if name in fields:
                fields[name] = _strict_integer(fields[name], name, original)

    return Version(
        major=fields["major"],
        minor=fields.get("minor", ""),
        patch=fields.get("patch", ""),
        suffix=fields.get("suffix", ""),
    )


def is_valid_version(
    text: Union[str, bytes],
    mode: Union[ParseMode, str] = ParseMode.TOLERANT,
) -> bool:
    """Check if text parses as a version.

    Examples:
        >>> is_valid_version("v1.2")
        True
        >>> is_valid_version("v")
        False
        >>> is_valid_version("vA1.2.3", ParseMode.STRICT)
        False
    """
    try:
        parse_version(text, mode)
    except InvalidVersionError:
        return False
    return True
