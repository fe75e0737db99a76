"""
Core exception types raised by version parsing, grammar helpers, and record validation.

Provides typed exceptions for core-domain failures:
- VersionParseError (and its InvalidCharacter / InvalidPrecedingZero variants) for
  the first grammar violation found while scanning a version string.
- GrammarError for unknown dialect or part names passed to normalization helpers.
- SchemaError for VersionRecord payloads whose fields disagree with their text.

Notes:
    - This module uses only the Python standard library and has no side effects.
    - A parse error always means "no Version was produced". There is no partial result
      and no error accumulation; the first violation wins.
    - Parse errors compare equal when kind and part match, so callers can assert on
      ``InvalidPrecedingZero(PartType.MINOR)`` directly.

Examples:
    Catch a parse failure and inspect its location.

    >>> from semparse.core import parse
    >>> from semparse.core.errors import VersionParseError
    >>> try:
    ...     parse("12.019.1")
    ... except VersionParseError as e:
    ...     where = e.part.value
    >>> where
    'minor'
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .grammar import PartType

__all__ = [
    "ErrorKind",
    "VersionParseError",
    "InvalidCharacter",
    "InvalidPrecedingZero",
    "GrammarError",
    "SchemaError",
]


class ErrorKind(Enum):
    """Violation kinds reported by the scanner."""

    INVALID_CHARACTER = "invalid_character"
    INVALID_PRECEDING_ZERO = "invalid_preceding_zero"


class VersionParseError(ValueError):
    """
    A version string violates the grammar of the dialect it was parsed under.

    Attributes:
        kind (ErrorKind): What was violated.
        part (PartType): The part being scanned when the violation was found.
    """

    kind: ErrorKind

    def __init__(self, kind: ErrorKind, part: PartType) -> None:
        self.kind = kind
        self.part = part
        super().__init__(f"{kind.value.replace('_', ' ')} in {part.label}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VersionParseError):
            return NotImplemented
        return (self.kind, self.part) == (other.kind, other.part)

    def __hash__(self) -> int:
        return hash((self.kind, self.part))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.kind!s}, {self.part!s})"


class InvalidCharacter(VersionParseError):
    """A byte cannot legally appear in the current part."""

    def __init__(self, part: PartType) -> None:
        super().__init__(ErrorKind.INVALID_CHARACTER, part)

    def __repr__(self) -> str:
        return f"InvalidCharacter({self.part!s})"


class InvalidPrecedingZero(VersionParseError):
    """A numeric part (major, minor or patch) starts with a redundant zero."""

    def __init__(self, part: PartType) -> None:
        super().__init__(ErrorKind.INVALID_PRECEDING_ZERO, part)

    def __repr__(self) -> str:
        return f"InvalidPrecedingZero({self.part!s})"


class GrammarError(ValueError):
    """Grammar/naming normalization failure (e.g., unknown dialect or part name)."""


class SchemaError(ValueError):
    """Record-level validation failure (structured fields disagree with the version text)."""
