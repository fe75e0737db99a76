"""
The parsed Version value and its dialect-driven comparison protocol.

A Version is immutable and remembers the dialect it was parsed under. Equality,
ordering, hashing and string rendering are all delegated to that dialect's policy, and
are only defined between versions sharing the same dialect:

- ``==`` is False across dialects (never a guess).
- ``<``, ``<=``, ``>``, ``>=`` return NotImplemented across dialects, so Python raises
  TypeError; ``compare`` returns None instead.

Examples:
    >>> from semparse.core.version import Version
    >>> v = Version.parse("0.1.4-beta+exp.sha.5114f85")
    >>> (v.major, v.minor, v.patch, str(v))
    (0, 1, 4, '0.1.4-beta+exp.sha.5114f85')
    >>> Version.parse("1.0.0-alpha") < Version.parse("1.0.0")
    True
"""

from __future__ import annotations

from dataclasses import dataclass

from .components import (
    BuildMetadata,
    NumericComponent,
    Prerelease,
    StringComponent,
)
from .dialect import DialectPolicy, policy_for
from .grammar import DOT, HYPHEN, Dialect, is_ascii_alphanumeric, is_ascii_digit

__all__ = [
    "Version",
]


def _check_prerelease_component(component: object) -> None:
    # Only components the standard scanner can produce.
    if isinstance(component, NumericComponent):
        return
    if not isinstance(component, StringComponent):
        raise ValueError(
            "Version prerelease components must be NumericComponent or StringComponent, "
            f"got {type(component).__name__}"
        )
    data = component.value.encode("utf-8")
    if not all(is_ascii_alphanumeric(b) or b == HYPHEN for b in data):
        raise ValueError(
            f"Version prerelease component {component.value!r} may only hold ASCII "
            "alphanumerics and hyphens"
        )
    if all(is_ascii_digit(b) for b in data):
        raise ValueError(
            f"Version prerelease component {component.value!r} is all digits; "
            "use NumericComponent"
        )


def _check_build_metadata(build_metadata: object) -> None:
    if not isinstance(build_metadata, str) or not build_metadata:
        raise ValueError("Version build_metadata must be None or a non-empty string")
    data = build_metadata.encode("utf-8")
    if not all(is_ascii_alphanumeric(b) or b == HYPHEN or b == DOT for b in data):
        raise ValueError(
            f"Version build_metadata {build_metadata!r} may only hold ASCII alphanumerics, "
            "hyphens and dots"
        )


@dataclass(frozen=True, slots=True, eq=False)
class Version:
    """
    Immutable semantic version tagged with the dialect it follows.

    Attributes:
        major (int): Non-negative major number.
        minor (int): Non-negative minor number.
        patch (int): Non-negative patch number.
        prerelease (tuple[PrereleaseComponent, ...] | None): Ordered, non-empty
            components, or None when absent.
        build_metadata (str | None): Opaque build text, or None when absent. Never
            part of equality or ordering.
        dialect (Dialect): Dialect whose policy governs this value.

    Raises:
        ValueError: If a number is negative, prerelease is empty or holds a component
            the standard grammar could not produce (a non-component, an all-digit or
            non-alphanumeric string), or build_metadata is empty or holds bytes other
            than ASCII alphanumerics, "-" and ".". Every valid Version formats to text
            that parses back to an equal Version.
    """

    major: int
    minor: int
    patch: int
    prerelease: Prerelease = None
    build_metadata: BuildMetadata = None
    dialect: Dialect = Dialect.STANDARD

    def __post_init__(self) -> None:
        for name in ("major", "minor", "patch"):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"Version {name} must be non-negative, got {value}")
        if self.prerelease is not None:
            if not isinstance(self.prerelease, tuple):
                object.__setattr__(self, "prerelease", tuple(self.prerelease))
            if not self.prerelease:
                raise ValueError("Version prerelease must be None or non-empty")
            for component in self.prerelease:
                _check_prerelease_component(component)
        if self.build_metadata is not None:
            _check_build_metadata(self.build_metadata)

    @classmethod
    def parse(
        cls,
        version_text: str | bytes | bytearray | memoryview,
        dialect: Dialect | str = Dialect.STANDARD,
    ) -> Version:
        """Parse ``version_text`` under ``dialect``; see semparse.core.parser.parse."""
        from .parser import parse

        return parse(version_text, dialect)

    @property
    def core(self) -> tuple[int, int, int]:
        return (self.major, self.minor, self.patch)

    @property
    def is_prerelease(self) -> bool:
        return self.prerelease is not None

    @property
    def policy(self) -> DialectPolicy:
        return policy_for(self.dialect)

    def _same_dialect(self, other: object) -> bool:
        return isinstance(other, Version) and other.dialect == self.dialect

    def compare(self, other: Version) -> int | None:
        """
        Three-way comparison under this version's dialect.

        Returns:
            int | None: -1, 0 or 1, or None when ``other`` follows another dialect
            and the two are not comparable.

        Raises:
            TypeError: If ``other`` is not a Version.
        """
        if not isinstance(other, Version):
            raise TypeError(f"cannot compare Version with {type(other).__name__}")
        if not self._same_dialect(other):
            return None
        return self.policy.compare(self, other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        if not self._same_dialect(other):
            return False
        return self.policy.equals(self, other)

    def __hash__(self) -> int:
        return hash((self.dialect, self.policy.equality_key(self)))

    def __lt__(self, other: object) -> bool:
        if not self._same_dialect(other):
            return NotImplemented
        return self.policy.compare(self, other) < 0  # type: ignore[arg-type]

    def __le__(self, other: object) -> bool:
        if not self._same_dialect(other):
            return NotImplemented
        return self.policy.compare(self, other) <= 0  # type: ignore[arg-type]

    def __gt__(self, other: object) -> bool:
        if not self._same_dialect(other):
            return NotImplemented
        return self.policy.compare(self, other) > 0  # type: ignore[arg-type]

    def __ge__(self, other: object) -> bool:
        if not self._same_dialect(other):
            return NotImplemented
        return self.policy.compare(self, other) >= 0  # type: ignore[arg-type]

    def __str__(self) -> str:
        return self.policy.format(self)
