"""
Dialect policies: per-byte grammar, ordering, equality and formatting.

A dialect policy is a capability bundle with four operations:

1. ``parse_byte``: decide, for the next single byte, whether it continues the current
   part (None), ends it and starts another (the next PartType), or violates the grammar
   (raises a VersionParseError).
2. ``compare``: total order between two versions of the same dialect (-1, 0, 1).
3. ``equals``: equality between two versions of the same dialect.
4. ``format``: canonical string rendering.

DialectPolicy carries the Semantic Versioning 2.0.0 behaviour as its default
implementation of every operation, so an alternate dialect can override any one of them
independently. Policies are looked up by the Dialect tag stored on each Version
(``policy_for``); a Version never subclasses per dialect.

Standard transitions (checked before the per-part character rules):

| current part   | "."                  | "-"          | "+"            |
|----------------|----------------------|--------------|----------------|
| major          | minor                | -            | -              |
| minor          | patch                | -            | -              |
| patch          | (invalid character)  | prerelease   | build_metadata |
| prerelease     | prerelease (split)   | (content)    | build_metadata |
| build_metadata | (content)            | (content)    | -              |

Examples:
    >>> from semparse.core.dialect import policy_for
    >>> from semparse.core.grammar import Dialect, PartType
    >>> policy = policy_for(Dialect.STANDARD)
    >>> policy.parse_byte(ord("."), PartType.MAJOR, b"1", b"2.3")
    <PartType.MINOR: 'minor'>
    >>> policy.parse_byte(ord("7"), PartType.MINOR, b"", b".3") is None
    True
"""

from __future__ import annotations

from collections.abc import Hashable, Sequence
from typing import TYPE_CHECKING, Final

from .components import NumericComponent, PrereleaseComponent
from .errors import InvalidCharacter, InvalidPrecedingZero
from .grammar import (
    DOT,
    HYPHEN,
    PLUS,
    Dialect,
    PartType,
    is_ascii_alphanumeric,
    is_ascii_digit,
)

if TYPE_CHECKING:
    from .version import Version

__all__ = [
    "DialectPolicy",
    "StandardDialect",
    "policy_for",
]

_ZERO: Final[int] = ord("0")

# (current part, delimiter byte) -> next part. Anything missing is content.
_STANDARD_TRANSITIONS: Final[dict[tuple[PartType, int], PartType]] = {
    (PartType.MAJOR, DOT): PartType.MINOR,
    (PartType.MINOR, DOT): PartType.PATCH,
    (PartType.PATCH, HYPHEN): PartType.PRERELEASE,
    (PartType.PATCH, PLUS): PartType.BUILD_METADATA,
    # A dot inside a prerelease closes the component, not the part.
    (PartType.PRERELEASE, DOT): PartType.PRERELEASE,
    (PartType.PRERELEASE, PLUS): PartType.BUILD_METADATA,
}


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


class DialectPolicy:
    """
    Rules for parsing, ordering, equality and formatting under one dialect.

    Every method has a default implementation following Semantic Versioning 2.0.0.
    Subclasses override only what their dialect changes.
    """

    transitions: dict[tuple[PartType, int], PartType] = _STANDARD_TRANSITIONS

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------

    def parse_byte(
        self,
        byte: int,
        part: PartType,
        captured: bytes | bytearray,
        remaining: bytes | memoryview,
    ) -> PartType | None:
        """
        Decide what the next byte means for the part being scanned.

        Args:
            byte (int): The byte under consideration.
            part (PartType): The part currently being accumulated.
            captured (bytes | bytearray): Bytes already accepted for this part.
            remaining (bytes | memoryview): Bytes after ``byte``; only the first one is
                ever read (leading-zero look-ahead).

        Returns:
            PartType | None: The next part when ``byte`` is a delimiter (the delimiter
            belongs to neither part), or None when ``byte`` is content to append.

        Raises:
            InvalidCharacter: If ``byte`` cannot appear in ``part``.
            InvalidPrecedingZero: If ``byte`` is a redundant leading zero.
        """
        next_part = self.transitions.get((part, byte))
        if next_part is not None:
            return next_part
        self.validate_byte(byte, part, captured, remaining)
        return None

    def validate_byte(
        self,
        byte: int,
        part: PartType,
        captured: bytes | bytearray,
        remaining: bytes | memoryview,
    ) -> None:
        if part.is_numeric:
            if not is_ascii_digit(byte):
                # Major, minor and patch can only be digits
                raise InvalidCharacter(part)
            if byte == _ZERO and not captured and not self.ends_numeric_part(part, remaining):
                raise InvalidPrecedingZero(part)
        elif part is PartType.PRERELEASE:
            if not (is_ascii_alphanumeric(byte) or byte == HYPHEN):
                raise InvalidCharacter(part)
        elif not (is_ascii_alphanumeric(byte) or byte == HYPHEN or byte == DOT):
            raise InvalidCharacter(part)

    def ends_numeric_part(self, part: PartType, remaining: bytes | memoryview) -> bool:
        """
        Whether the byte just examined is the last digit of a numeric part.

        Major and minor end at "." or end of input. Patch ends at "-", "+" or end of
        input; a "." after patch is not an ending, so "1.0.0.1" reports the zero.
        """
        if not remaining:
            return True
        following = remaining[0]
        if part is PartType.PATCH:
            return following == HYPHEN or following == PLUS
        return following == DOT

    def close_part(self, part: PartType, captured: bytes | bytearray) -> None:
        """
        Validate a part once its last byte has been consumed.

        Raises:
            InvalidCharacter: If the part was reached but captured nothing (for
                example "1.", "1.0.0-" or "1.0.0-a..b").
        """
        if not captured:
            raise InvalidCharacter(part)

    # ------------------------------------------------------------------
    # Ordering / equality
    # ------------------------------------------------------------------

    def compare(self, a: Version, b: Version) -> int:
        """
        Order two versions: -1 if a < b, 0 if equal precedence, 1 if a > b.

        Major, minor and patch decide first. With equal cores a release outranks any
        prerelease. Two prereleases compare component by component. Build metadata
        never participates.
        """
        if a.core != b.core:
            return -1 if a.core < b.core else 1
        if a.prerelease is None:
            return 0 if b.prerelease is None else 1
        if b.prerelease is None:
            return -1
        return self.compare_prerelease(a.prerelease, b.prerelease)

    def compare_prerelease(
        self, a: Sequence[PrereleaseComponent], b: Sequence[PrereleaseComponent]
    ) -> int:
        for left, right in zip(a, b):
            result = self.compare_component(left, right)
            if result:
                return result
        # A strict prefix ranks lower.
        return _sign(len(a) - len(b))

    def compare_component(self, a: PrereleaseComponent, b: PrereleaseComponent) -> int:
        """Numeric by value, strings by natural order, numeric always below string."""
        a_numeric = isinstance(a, NumericComponent)
        b_numeric = isinstance(b, NumericComponent)
        if a_numeric and b_numeric:
            return _sign(a.value - b.value)  # type: ignore[operator]
        if a_numeric:
            return -1
        if b_numeric:
            return 1
        return (a.value > b.value) - (a.value < b.value)  # type: ignore[operator]

    def equality_key(self, version: Version) -> Hashable:
        """Fields that decide equality (and hashing) under this dialect."""
        return (version.major, version.minor, version.patch, version.prerelease)

    def equals(self, a: Version, b: Version) -> bool:
        return self.equality_key(a) == self.equality_key(b)

    # ------------------------------------------------------------------
    # Formatting
    # ------------------------------------------------------------------

    def format(self, version: Version) -> str:
        """Render ``major.minor.patch[-prerelease][+build_metadata]``."""
        text = f"{version.major}.{version.minor}.{version.patch}"
        if version.prerelease is not None:
            text += "-" + ".".join(str(component) for component in version.prerelease)
        if version.build_metadata is not None:
            text += "+" + version.build_metadata
        return text


class StandardDialect(DialectPolicy):
    """Semantic Versioning 2.0.0, exactly the defaults of DialectPolicy."""


_POLICIES: Final[dict[Dialect, DialectPolicy]] = {
    Dialect.STANDARD: StandardDialect(),
}


def policy_for(dialect: Dialect) -> DialectPolicy:
    """
    Return the policy governing a dialect.

    Raises:
        KeyError: If no policy is registered for ``dialect``.
    """
    try:
        return _POLICIES[dialect]
    except KeyError as exc:
        raise KeyError(f"No policy registered for dialect: {dialect!r}") from exc
