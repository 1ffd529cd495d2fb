# SPDX-License-Identifier: MIT
"""Semantic Versioning 2.0 parsing, ordering and structured coding.

This package parses and renders SemVer 2.0.0 version strings (allowing a
leading ``v``), orders versions by SemVer precedence, and encodes versions
to and from structured data either as a single string or member by member.

Example:
    >>> from semver_codec import Version, parse, compare_versions
    >>>
    >>> version = parse("v1.2.3-alpha.1+build.456")
    >>> version.major
    1
    >>> version.prerelease
    'alpha.1'
    >>> str(version)
    '1.2.3-alpha.1+build.456'
    >>>
    >>> Version(1, 0, 0, "rc.1") < Version(1, 0, 0)
    True
    >>> compare_versions("1.0.0+a", "1.0.0+b")
    0
"""

__version__ = "0.1.0"

from .semver import (
    Version,
    parse,
    render,
    parse_version,
    is_valid_semver,
    match_groups,
    InvalidVersionError,
    SEMVER_PATTERN,
)
from .compare import (
    compare_versions,
    version_key,
)
from .coding import (
    CodingContext,
    CodingStrategy,
    DEFAULT_STRATEGY,
    DecodingError,
    DataCorruptedError,
    KeyNotFoundError,
    TypeMismatchError,
    encode_version,
    decode_version,
    dumps,
    loads,
)
from .config import (
    SemverConfig,
    ConfigError,
    load_config,
)

__all__ = [
    # Version parsing
    "Version",
    "parse",
    "render",
    "parse_version",
    "is_valid_semver",
    "match_groups",
    "InvalidVersionError",
    "SEMVER_PATTERN",
    # Version comparison
    "compare_versions",
    "version_key",
    # Structured coding
    "CodingContext",
    "CodingStrategy",
    "DEFAULT_STRATEGY",
    "DecodingError",
    "DataCorruptedError",
    "KeyNotFoundError",
    "TypeMismatchError",
    "encode_version",
    "decode_version",
    "dumps",
    "loads",
    # Configuration
    "SemverConfig",
    "ConfigError",
    "load_config",
]
