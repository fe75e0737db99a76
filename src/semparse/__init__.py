"""
semparse: dialect-driven Semantic Versioning parser, comparator and formatter.

## Public API
- parse(version_text, dialect=Dialect.STANDARD) -> Version
- Version: immutable result; ordering and equality scoped to its dialect.
- Dialect, PartType: enums for dialect selection and error locations.
- InvalidCharacter, InvalidPrecedingZero: first-error parse failures.

## Layers
- semparse.core: zero-IO contracts (grammar, dialects, scanner, parser, Version).
- semparse.cli: configuration (env > TOML > defaults) and the ``semparse`` command.
"""

from __future__ import annotations

from .core import (
    Dialect,
    InvalidCharacter,
    InvalidPrecedingZero,
    NumericComponent,
    PartType,
    StringComponent,
    Version,
    VersionParseError,
    parse,
)

__version__ = "0.1.0"

__all__ = [
    "Dialect",
    "InvalidCharacter",
    "InvalidPrecedingZero",
    "NumericComponent",
    "PartType",
    "StringComponent",
    "Version",
    "VersionParseError",
    "parse",
    "__version__",
]
