"""
Canonical version-string grammar vocabulary and helpers.

Defines the part model (PartType), the dialect selector (Dialect), the byte classes and
delimiters the scanner consults, and zero-IO normalization helpers for enum-like strings.

Responsibilities
- Define the five version parts in scan order and the dialect selector enum.
- Provide byte-class predicates shared by dialect policies (ASCII only).
- Provide normalization helpers that turn free-form names into enum members.

Design principles
-----------------
1) One naming standard:
   - Enum classes: PascalCase
   - Enum member names: UPPER_SNAKE (Python constants)
   - Enum serialized values (config/JSON/CLI): lower_snake

2) Bytes, not characters:
   - The grammar is defined over bytes. A non-ASCII byte is simply a byte that fails
     every character class; there is no separate encoding error.

Grammar (standard dialect)
--------------------------
    version        = major [ "." minor [ "." patch [ "-" prerelease ] [ "+" build ] ] ] ;
    major          = numeric ;
    minor          = numeric ;
    patch          = numeric ;
    numeric        = "0" | nonzero_digit { digit } ;
    prerelease     = identifier { "." identifier } ;
    identifier     = ( alnum | "-" ) { alnum | "-" } ;
    build          = ( alnum | "-" | "." ) { alnum | "-" | "." } ;

Examples
--------
>>> from semparse.core.grammar import PartType, dialect_from_value, Dialect
>>> PartType.BUILD_METADATA.label
'build metadata'
>>> dialect_from_value("Standard") is Dialect.STANDARD
True

Tags
----
grammar, enums, normalization, bytes, lower_snake
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from enum import Enum
from typing import Final

from .errors import GrammarError

__all__ = [
    "PartType",
    "Dialect",
    "NUMERIC_PARTS",
    "DOT",
    "HYPHEN",
    "PLUS",
    # helpers/validators
    "is_ascii_digit",
    "is_ascii_alphanumeric",
    "is_lower_snake",
    "dialect_from_value",
    "ensure_all_enum_values_lower_snake",
]


# ============================================================================
# PARTS AND DIALECTS
# ============================================================================


class PartType(Enum):
    """
    The component parts of a version string, in scan order.

    Used both as the scanner's state marker and as the location carried by parse
    errors. The listed order is the order parts are visited; PRERELEASE may repeat
    (one visit per dot-separated component).

    Examples:
      In "1.9.8-alpha.1+a14": major=1, minor=9, patch=8,
      prerelease=alpha.1, build_metadata=a14.
    """

    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"
    PRERELEASE = "prerelease"
    BUILD_METADATA = "build_metadata"

    @property
    def label(self) -> str:
        """Human-readable name used in error messages."""
        return self.value.replace("_", " ")

    @property
    def is_numeric(self) -> bool:
        return self in NUMERIC_PARTS


class Dialect(Enum):
    """
    Selector for the rules used to parse, order and format a version.

    The dialect is attached to every parsed Version and decides which policy governs
    its comparisons and rendering. Only the standard dialect (Semantic Versioning
    2.0.0) is defined.
    """

    STANDARD = "standard"


NUMERIC_PARTS: Final[frozenset[PartType]] = frozenset(
    {PartType.MAJOR, PartType.MINOR, PartType.PATCH}
)

# Delimiter bytes.
DOT: Final[int] = ord(".")
HYPHEN: Final[int] = ord("-")
PLUS: Final[int] = ord("+")

_ZERO: Final[int] = ord("0")
_NINE: Final[int] = ord("9")


# ============================================================================
# Byte classes (zero I/O)
# ============================================================================


def is_ascii_digit(byte: int) -> bool:
    return _ZERO <= byte <= _NINE


def is_ascii_alphanumeric(byte: int) -> bool:
    """
    Check whether a byte is an ASCII letter or digit.

    Args:
      byte (int): Byte value (0-255).

    Returns:
      bool: True for 0-9, A-Z and a-z; False for everything else, including any
      byte of a multi-byte UTF-8 sequence.
    """
    return is_ascii_digit(byte) or 65 <= byte <= 90 or 97 <= byte <= 122


# ============================================================================
# Helpers & Validators (zero I/O)
# ============================================================================

_LOWER_SNAKE_RE: Final[re.Pattern[str]] = re.compile(r"^[a-z0-9]+(?:_[a-z0-9]+)*$")


def is_lower_snake(value: str) -> bool:
    """
    Check whether a string is lower_snake.

    Examples:
      >>> is_lower_snake("build_metadata")
      True
      >>> is_lower_snake("BuildMetadata")
      False
    """
    return bool(_LOWER_SNAKE_RE.match(value or ""))


def _normalize(value: str) -> str:
    return (value or "").strip().lower().replace("-", "_").replace(" ", "_")


def dialect_from_value(s: str | Dialect) -> Dialect:
    """
    Parse a free-form dialect name into a Dialect.

    Args:
      s (str | Dialect): Dialect name (case-insensitive) or an existing member.

    Returns:
      Dialect: Parsed dialect.

    Raises:
      GrammarError: If s does not name a known dialect.

    Examples:
      >>> dialect_from_value("STANDARD")
      <Dialect.STANDARD: 'standard'>
    """
    if isinstance(s, Dialect):
        return s
    value = _normalize(s)
    allowed = {d.value for d in Dialect}
    if value not in allowed:
        raise GrammarError(f"dialect must be one of {sorted(allowed)} (got {s!r})")
    return Dialect(value)


def ensure_all_enum_values_lower_snake(enums: Iterable[type[Enum]]) -> None:
    """
    Assert that every enum member's value is lower_snake.

    Raises:
      AssertionError: If any enum member has a non-lower_snake value.

    Examples:
      >>> ensure_all_enum_values_lower_snake([PartType, Dialect])
    """
    for E in enums:
        for m in E:
            if not is_lower_snake(m.value):
                raise AssertionError(
                    f"{E.__name__}.{m.name} has non-lower_snake value: {m.value!r}"
                )
