# SPDX-License-Identifier: MIT
"""Semantic version parsing and rendering.

Supports MAJOR.MINOR.PATCH format with optional pre-release and build metadata,
as defined by SemVer 2.0.0, plus a single optional leading ``v``:
- Pre-release: -alpha, -alpha.1, -0.3.7, -x.7.z.92, -0A.is.legal
- Build metadata: +build, +build.123, +20240101, +001
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Optional

# Semantic versioning regex pattern (SemVer 2.0.0 compliant)
# https://semver.org/#is-there-a-suggested-regular-expression-regex-to-check-a-semver-string
# Digits are spelled [0-9] because \d also matches non-ASCII digits.
SEMVER_PATTERN = re.compile(
    r"v?"
    r"(?P<major>0|[1-9][0-9]*)"
    r"\.(?P<minor>0|[1-9][0-9]*)"
    r"\.(?P<patch>0|[1-9][0-9]*)"
    r"(?:-(?P<prerelease>(?:0|[1-9][0-9]*|[0-9]*[a-zA-Z-][0-9a-zA-Z-]*)"
    r"(?:\.(?:0|[1-9][0-9]*|[0-9]*[a-zA-Z-][0-9a-zA-Z-]*))*))?"
    r"(?:\+(?P<buildmetadata>[0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?"
)


class InvalidVersionError(Exception):
    """Raised when a version string does not follow semantic versioning."""

    def __init__(self, version: str, message: str = ""):
        self.version = version
        self.message = message or f"Invalid semantic version: {version}"
        super().__init__(self.message)


def match_groups(text: Any) -> Optional[tuple[str, str, str, str, str]]:
    """Match ``text`` against the SemVer grammar.

    The whole string must match. Absent pre-release or build sections are
    returned as empty strings.

    Returns:
        ``(major, minor, patch, prerelease, build)`` as matched text, or None
    """
    if not isinstance(text, str):
        return None

    match = SEMVER_PATTERN.fullmatch(text)
    if match is None:
        return None

    return (
        match.group("major"),
        match.group("minor"),
        match.group("patch"),
        match.group("prerelease") or "",
        match.group("buildmetadata") or "",
    )


@dataclass(frozen=True, slots=True)
class Version:
    """Represents a semantic version.

    Instances built directly are not validated; only :func:`parse` and
    :func:`parse_version` guarantee a value that satisfies the grammar.

    Equality and hashing cover all five fields, while ``<``, ``<=``, ``>``
    and ``>=`` follow SemVer precedence, which ignores build metadata. Two
    versions differing only in build metadata are therefore unequal but
    neither is greater than the other.

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
        prerelease: Pre-release identifiers (e.g., "alpha.1", "rc.2"), or ""
        build: Build metadata (e.g., "build.123", "20240101"), or ""
    """

    major: int
    minor: int
    patch: int
    prerelease: str = ""
    build: str = ""

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        version = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            version += f"-{self.prerelease}"
        if self.build:
            version += f"+{self.build}"
        return version

    @classmethod
    def parse(cls, text: str) -> Optional["Version"]:
        """Parse ``text``, returning None when it is not a semantic version."""
        return parse(text)

    def _compare(self, other: object) -> Optional[int]:
        if not isinstance(other, Version):
            return None
        from .compare import compare_versions

        return compare_versions(self, other)

    def __lt__(self, other: object) -> Any:
        result = self._compare(other)
        return NotImplemented if result is None else result < 0

    def __le__(self, other: object) -> Any:
        result = self._compare(other)
        return NotImplemented if result is None else result <= 0

    def __gt__(self, other: object) -> Any:
        result = self._compare(other)
        return NotImplemented if result is None else result > 0

    def __ge__(self, other: object) -> Any:
        result = self._compare(other)
        return NotImplemented if result is None else result >= 0

    @property
    def is_stable(self) -> bool:
        """Return True if there are no pre-release identifiers."""
        return not self.prerelease

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return not self.is_stable

    @property
    def is_major_release(self) -> bool:
        """Return True for stable X.0.0 releases with X > 0."""
        return self.is_stable and self.major > 0 and self.minor == 0 and self.patch == 0

    @property
    def is_minor_release(self) -> bool:
        """Return True for stable x.Y.0 releases with Y > 0."""
        return self.is_stable and self.minor > 0 and self.patch == 0

    @property
    def is_patch_release(self) -> bool:
        """Return True for stable x.y.Z releases with Z > 0."""
        return self.is_stable and self.patch > 0

    @property
    def is_initial_release(self) -> bool:
        """Return True if this is exactly 0.0.0."""
        return self == Version(0, 0, 0)

    @property
    def base_version(self) -> str:
        """Return the base version without pre-release or build metadata."""
        return f"{self.major}.{self.minor}.{self.patch}"

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: Any) -> Any:
        from .coding import version_core_schema

        return version_core_schema()


def parse(text: str) -> Optional[Version]:
    """Parse a semantic version string, returning None if it does not match.

    Examples:
        >>> parse("v1.2.3-beta1+build5")
        Version(major=1, minor=2, patch=3, prerelease='beta1', build='build5')

        >>> parse("01.2.3") is None
        True
    """
    groups = match_groups(text)
    if groups is None:
        return None

    major, minor, patch, prerelease, build = groups
    return Version(int(major), int(minor), int(patch), prerelease, build)


def render(version: Version) -> str:
    """Return the canonical string form of ``version`` (never has a leading v)."""
    return str(version)


def parse_version(version_string: str) -> Version:
    """Parse a semantic version string into a Version object.

    Args:
        version_string: A string following semantic versioning format
            ([v]MAJOR.MINOR.PATCH[-prerelease][+build])

    Returns:
        A Version object with parsed components

    Raises:
        InvalidVersionError: If the string does not follow semantic versioning

    Examples:
        >>> parse_version("1.2.3")
        Version(major=1, minor=2, patch=3, prerelease='', build='')

        >>> parse_version("2.0.0-rc.1+build.456")
        Version(major=2, minor=0, patch=0, prerelease='rc.1', build='build.456')
    """
    if not isinstance(version_string, str):
        raise InvalidVersionError(
            str(version_string), f"Version must be a string, got {type(version_string).__name__}"
        )

    if not version_string:
        raise InvalidVersionError(version_string, "Version string cannot be empty")

    version = parse(version_string)
    if version is None:
        raise InvalidVersionError(version_string)

    return version


def is_valid_semver(version_string: str) -> bool:
    """Check if a string is a valid semantic version.

    Examples:
        >>> is_valid_semver("1.0.0")
        True
        >>> is_valid_semver("1.0")
        False
        >>> is_valid_semver("v1.0.0-alpha")
        True
    """
    return match_groups(version_string) is not None
