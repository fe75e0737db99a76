"""
Core package aggregator for semparse contracts (grammar, errors, components, dialects,
scanner, parser, Version, record schema).

## Contracts (single source of truth)
- Grammar: PartType and Dialect enums, byte classes, normalization helpers.
- Errors: VersionParseError family (kind + part), GrammarError, SchemaError.
- Components: NumericComponent / StringComponent prerelease union.
- Dialect: policy objects: per-byte rule, compare, equals, format.
- Scanner/Parser: one-pass byte scan and the ``parse`` assembler.
- Version: immutable parsed value with dialect-scoped ordering.
- Schema: pydantic VersionRecord for JSON exchange.

## Notes
- Zero‑IO policy: stdlib + pydantic only; no file/network IO.
- Naming policy: enum `.value` names are lower_snake.
- First error wins: a failed parse raises and returns nothing.

## Examples
```python
from semparse.core import Dialect, PartType, InvalidPrecedingZero, parse

v = parse("10.2.1-alpha.1+build-1", Dialect.STANDARD)
(v.major, v.minor, v.patch)  # (10, 2, 1)
str(v)  # '10.2.1-alpha.1+build-1'

parse("1.0.1-beta.2") < parse("1.0.1-beta.10")  # True

try:
    parse("1.001.0")
except InvalidPrecedingZero as e:
    e.part is PartType.MINOR  # True
```
"""

from __future__ import annotations

from .components import (
    BuildMetadata,
    NumericComponent,
    Prerelease,
    PrereleaseComponent,
    StringComponent,
)
from .dialect import DialectPolicy, StandardDialect, policy_for
from .errors import (
    ErrorKind,
    GrammarError,
    InvalidCharacter,
    InvalidPrecedingZero,
    SchemaError,
    VersionParseError,
)
from .grammar import Dialect, PartType
from .parser import parse
from .version import Version

__all__ = [
    "BuildMetadata",
    "Dialect",
    "DialectPolicy",
    "ErrorKind",
    "GrammarError",
    "InvalidCharacter",
    "InvalidPrecedingZero",
    "NumericComponent",
    "PartType",
    "Prerelease",
    "PrereleaseComponent",
    "SchemaError",
    "StandardDialect",
    "StringComponent",
    "Version",
    "VersionParseError",
    "parse",
    "policy_for",
]
