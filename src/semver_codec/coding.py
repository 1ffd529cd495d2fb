# SPDX-License-Identifier: MIT
"""Structured encoding and decoding of semantic versions.

A :class:`~semver_codec.semver.Version` has two structured forms:

- ``stringForm``: the canonical version string, e.g. ``"1.2.3-rc.1+build.5"``
- ``memberForm``: an object with ``major``, ``minor``, ``patch``,
  ``preRelease`` and ``build`` members

The form is chosen per call through a :class:`CodingContext` (or, inside
pydantic models, through the ``context`` passed to validation and
serialization), never through module state.

Example:
    >>> from semver_codec import Version, CodingContext, CodingStrategy
    >>> encode_version(Version(1, 2, 3))
    '1.2.3'
    >>> ctx = CodingContext(encoding_strategy=CodingStrategy.MEMBERWISE)
    >>> encode_version(Version(1, 2, 3), ctx)["major"]
    1
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import Any, Optional, Union

from pydantic import TypeAdapter
from pydantic_core import PydanticCustomError, core_schema

from .semver import Version, parse

logger = logging.getLogger(__name__)

# Keys of the memberwise form, in decoding order
MEMBER_KEYS = ("major", "minor", "patch", "preRelease", "build")

MALFORMED_VERSION_MESSAGE = "Expected valid semver 2.0 string"

# Keys read from pydantic's validation / serialization context
STRATEGY_CONTEXT_KEY = "semver_strategy"
CODING_CONTEXT_KEY = "coding"


class CodingStrategy(str, Enum):
    """How a version is represented in structured data."""

    SEMVER_STRING = "stringForm"
    MEMBERWISE = "memberForm"

    @classmethod
    def from_option(cls, value: Any) -> "CodingStrategy":
        """Resolve a configuration value to a strategy.

        Accepts a member, a member value (``"stringForm"``) or a member name
        (``"memberwise"``, any case). Anything else resolves to
        :data:`DEFAULT_STRATEGY`.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for member in cls:
                if value == member.value or value.upper() == member.name:
                    return member
        return DEFAULT_STRATEGY


# Versions are written and read as plain strings unless configured otherwise.
DEFAULT_STRATEGY = CodingStrategy.SEMVER_STRING


@dataclass(frozen=True)
class CodingContext:
    """Per-call coding configuration.

    Attributes:
        encoding_strategy: Form produced when encoding
        decoding_strategy: Form expected when decoding
    """

    encoding_strategy: CodingStrategy = DEFAULT_STRATEGY
    decoding_strategy: CodingStrategy = DEFAULT_STRATEGY

    @classmethod
    def using(cls, strategy: Union[CodingStrategy, str, None]) -> "CodingContext":
        """Return a context that encodes and decodes with the same strategy."""
        resolved = CodingStrategy.from_option(strategy)
        return cls(encoding_strategy=resolved, decoding_strategy=resolved)

    @classmethod
    def from_mapping(cls, mapping: Optional[Mapping[str, Any]]) -> "CodingContext":
        """Build a context from a pydantic ``context`` dictionary.

        A ``CodingContext`` stored under ``"coding"`` wins; otherwise the
        ``"semver_strategy"`` value applies to both directions.
        """
        if not mapping:
            return cls()
        coding = mapping.get(CODING_CONTEXT_KEY)
        if isinstance(coding, CodingContext):
            return coding
        return cls.using(mapping.get(STRATEGY_CONTEXT_KEY))

    def as_pydantic_context(self) -> dict[str, Any]:
        """Return this context in the shape pydantic passes to validators."""
        return {CODING_CONTEXT_KEY: self}


class DecodingError(Exception):
    """Raised when structured data cannot be decoded into a Version.

    Attributes:
        path: Keys leading from the document root to the offending value
        message: Human readable description of the problem
    """

    def __init__(self, path: Sequence[str], message: str):
        self.path = list(path)
        self.message = message
        super().__init__(f"{message} (at {format_path(self.path)})")


class DataCorruptedError(DecodingError):
    """Raised when a string-form value is not a valid version string."""

    def __init__(self, path: Sequence[str]):
        super().__init__(path, MALFORMED_VERSION_MESSAGE)


class KeyNotFoundError(DecodingError):
    """Raised when a member-form object lacks a required key.

    Attributes:
        key: Name of the missing member
    """

    def __init__(self, key: str, path: Sequence[str]):
        self.key = key
        super().__init__(path, f"No value associated with key '{key}'")


class TypeMismatchError(DecodingError):
    """Raised when a value has the wrong type for the selected form."""


def format_path(path: Sequence[str]) -> str:
    """Render a decoding path as dotted keys, ``<root>`` when empty."""
    return ".".join(str(part) for part in path) if path else "<root>"


def encode_version(
    version: Version, context: Optional[CodingContext] = None
) -> Union[str, dict[str, Any]]:
    """Encode a version into its structured form.

    Args:
        version: The version to encode
        context: Coding configuration (defaults to :data:`DEFAULT_STRATEGY`)

    Returns:
        The canonical string, or a dict with the five members
    """
    context = context or CodingContext()

    if context.encoding_strategy is CodingStrategy.MEMBERWISE:
        return {
            "major": version.major,
            "minor": version.minor,
            "patch": version.patch,
            "preRelease": version.prerelease,
            "build": version.build,
        }
    return str(version)


def decode_version(
    data: Any,
    context: Optional[CodingContext] = None,
    path: Sequence[str] = (),
) -> Version:
    """Decode a version from its structured form.

    Args:
        data: A version string or a member-form mapping
        context: Coding configuration (defaults to :data:`DEFAULT_STRATEGY`)
        path: Location of ``data`` within the enclosing document

    Returns:
        The decoded Version

    Raises:
        DataCorruptedError: If a string-form value does not parse
        KeyNotFoundError: If a member-form object lacks a member
        TypeMismatchError: If ``data`` or one of its members has the wrong type
    """
    context = context or CodingContext()

    if context.decoding_strategy is CodingStrategy.MEMBERWISE:
        return _decode_members(data, path)

    if not isinstance(data, str):
        raise TypeMismatchError(path, f"Expected a version string, got {type(data).__name__}")

    version = parse(data)
    if version is None:
        logger.debug("Rejected version string %r at %s", data, format_path(path))
        raise DataCorruptedError(path)
    return version


def _decode_members(data: Any, path: Sequence[str]) -> Version:
    if not isinstance(data, Mapping):
        raise TypeMismatchError(path, f"Expected a version object, got {type(data).__name__}")

    values: list[Any] = []
    for key in MEMBER_KEYS:
        if key not in data:
            logger.debug("Version object at %s has no %r member", format_path(path), key)
            raise KeyNotFoundError(key, path)

        value = data[key]
        expected = str if key in ("preRelease", "build") else int
        # bool is an int subclass but never a valid version number
        if isinstance(value, bool) or not isinstance(value, expected):
            raise TypeMismatchError(
                [*path, key],
                f"Expected {expected.__name__} for '{key}', got {type(value).__name__}",
            )
        values.append(value)

    return Version(*values)


# =============================================================================
# Pydantic integration
# =============================================================================


def _validate(value: Any, info: core_schema.ValidationInfo) -> Version:
    if isinstance(value, Version):
        return value

    context = CodingContext.from_mapping(info.context)
    try:
        return decode_version(value, context)
    except DataCorruptedError as e:
        raise PydanticCustomError("semver_malformed", MALFORMED_VERSION_MESSAGE) from e
    except KeyNotFoundError as e:
        raise PydanticCustomError(
            "semver_missing_field", "Missing field '{field}'", {"field": e.key}
        ) from e
    except TypeMismatchError as e:
        raise PydanticCustomError("semver_type_mismatch", "{reason}", {"reason": e.message}) from e


def _serialize(value: Version, info: core_schema.SerializationInfo) -> Any:
    return encode_version(value, CodingContext.from_mapping(info.context))


def version_core_schema() -> core_schema.CoreSchema:
    """Return the pydantic-core schema used for ``Version`` fields."""
    return core_schema.with_info_plain_validator_function(
        _validate,
        serialization=core_schema.plain_serializer_function_ser_schema(
            _serialize, info_arg=True, when_used="always"
        ),
    )


# =============================================================================
# JSON helpers
# =============================================================================


@lru_cache(maxsize=None)
def _adapter(type_: Any) -> TypeAdapter:
    return TypeAdapter(type_)


def dumps(
    value: Any,
    context: Optional[CodingContext] = None,
    *,
    type_: Any = Version,
    indent: Optional[int] = None,
) -> str:
    """Serialize a version (or any pydantic-compatible ``type_``) to JSON.

    Examples:
        >>> dumps(Version(1, 2, 3))
        '"1.2.3"'
        >>> dumps([Version(1, 0, 0)], type_=list[Version])
        '["1.0.0"]'
    """
    context = context or CodingContext()
    data = _adapter(type_).dump_json(
        value, context=context.as_pydantic_context(), indent=indent
    )
    return data.decode("utf-8")


def loads(
    data: Union[str, bytes],
    context: Optional[CodingContext] = None,
    *,
    type_: Any = Version,
) -> Any:
    """Deserialize JSON into a version (or any pydantic-compatible ``type_``).

    Raises:
        pydantic.ValidationError: If the document does not decode; each error's
            ``loc`` is the path to the offending value
    """
    context = context or CodingContext()
    return _adapter(type_).validate_json(data, context=context.as_pydantic_context())
