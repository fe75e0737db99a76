"""
Prerelease components and the optional-value aliases used by Version.

A prerelease identifier such as ``alpha.12`` is split on dots into components, and each
component is classified once, after it has been captured in full:

- NumericComponent when every byte is an ASCII digit (``12`` -> 12).
- StringComponent otherwise, kept verbatim (``alpha``).

The union lists the numeric variant first. Standard ordering relies on that as an
explicit rule: numeric identifiers always rank below alphanumeric ones.

Examples:
    >>> from semparse.core.components import classify_component
    >>> classify_component(b"12")
    NumericComponent(value=12)
    >>> classify_component(b"rc1")
    StringComponent(value='rc1')
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .grammar import is_ascii_digit

__all__ = [
    "NumericComponent",
    "StringComponent",
    "PrereleaseComponent",
    "Prerelease",
    "BuildMetadata",
    "classify_component",
    "component_value",
]


@dataclass(frozen=True, slots=True)
class NumericComponent:
    """A prerelease component made only of digits, e.g. the ``1`` in ``alpha.1``."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError(f"NumericComponent must be non-negative, got {self.value}")

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, slots=True)
class StringComponent:
    """A prerelease component containing at least one non-digit, e.g. ``alpha``."""

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("StringComponent must not be empty")

    def __str__(self) -> str:
        return self.value


PrereleaseComponent = Union[NumericComponent, StringComponent]

# None means absent; a present prerelease always holds at least one component.
Prerelease = Union[tuple[PrereleaseComponent, ...], None]

# None means absent; otherwise the opaque text after "+".
BuildMetadata = Union[str, None]


def classify_component(raw: bytes) -> PrereleaseComponent:
    """
    Classify one captured prerelease segment.

    Args:
        raw (bytes): Bytes between two prerelease delimiters (already validated).

    Returns:
        PrereleaseComponent: NumericComponent iff every byte is an ASCII digit,
        StringComponent with the decoded text otherwise.

    Notes:
        Leading zeros are accepted and dropped (``01`` -> 1); such inputs format back
        to an equal, not byte-identical, string.
    """
    if raw and all(is_ascii_digit(b) for b in raw):
        return NumericComponent(int(raw))
    return StringComponent(raw.decode("ascii"))


def component_value(component: PrereleaseComponent) -> int | str:
    """Return the plain Python value of a component (int or str)."""
    return component.value
