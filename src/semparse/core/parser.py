"""
Version assembler: drives the scanner and builds the typed Version.

``parse`` is the sole entry point for turning text into a Version. It scans parts in
order (major, minor, patch, zero or more prerelease components, optional build
metadata), converts each captured byte group into its typed field, and tags the result
with the dialect it was parsed under.

Notes:
    - Numeric parts that are never reached default to 0 ("1" parses as 1.0.0).
    - Prerelease components are classified numeric/string only after capture.
    - The first violation raised by the scanner is the result of the whole parse;
      partially captured parts are discarded with the failed call.
    - Logs one DEBUG record per call through ``logging.getLogger(__name__)``; the
      library never configures handlers.
"""

from __future__ import annotations

import logging

from .components import PrereleaseComponent, classify_component
from .dialect import policy_for
from .errors import VersionParseError
from .grammar import Dialect, PartType, dialect_from_value
from .scanner import iter_parts
from .version import Version

__all__ = [
    "parse",
]

logger = logging.getLogger(__name__)


def _to_bytes(version_text: str | bytes | bytearray | memoryview) -> bytes:
    """Make sure text is encoded to bytes."""
    if isinstance(version_text, str):
        return version_text.encode("utf-8")
    if isinstance(version_text, (bytes, bytearray, memoryview)):
        return bytes(version_text)
    raise TypeError(f"version must be str or bytes, got {type(version_text).__name__}")


def parse(
    version_text: str | bytes | bytearray | memoryview,
    dialect: Dialect | str = Dialect.STANDARD,
) -> Version:
    """
    Parse a version string under a dialect.

    Args:
        version_text (str | bytes | bytearray | memoryview): Version text; str input is
            UTF-8 encoded first, binary input is read as is.
        dialect (Dialect | str): Dialect member or name (e.g. "standard").

    Returns:
        Version: Immutable parsed version tagged with ``dialect``.

    Raises:
        InvalidCharacter: A byte (or an empty part) is not allowed where it appears.
        InvalidPrecedingZero: Major, minor or patch starts with a redundant zero.
        GrammarError: ``dialect`` names no known dialect.
        TypeError: ``version_text`` is neither str nor a bytes-like object.

    Examples:
        >>> v = parse("12.19.1-alpha.12+build1234")
        >>> v.prerelease
        (StringComponent(value='alpha'), NumericComponent(value=12))
        >>> v.build_metadata
        'build1234'
        >>> parse("1")
        Version(major=1, minor=0, patch=0, prerelease=None, build_metadata=None, dialect=<Dialect.STANDARD: 'standard'>)
    """
    selected = dialect_from_value(dialect)
    data = _to_bytes(version_text)
    policy = policy_for(selected)

    numbers: dict[PartType, int] = {PartType.MAJOR: 0, PartType.MINOR: 0, PartType.PATCH: 0}
    prerelease: list[PrereleaseComponent] = []
    build_metadata: str | None = None

    try:
        for part, captured in iter_parts(data, policy):
            if part.is_numeric:
                numbers[part] = int(captured)
            elif part is PartType.PRERELEASE:
                prerelease.append(classify_component(captured))
            else:
                build_metadata = captured.decode("ascii")
    except VersionParseError as exc:
        logger.debug("Rejected %r (%s dialect): %s", version_text, selected.value, exc)
        raise

    version = Version(
        major=numbers[PartType.MAJOR],
        minor=numbers[PartType.MINOR],
        patch=numbers[PartType.PATCH],
        prerelease=tuple(prerelease) if prerelease else None,
        build_metadata=build_metadata,
        dialect=selected,
    )
    logger.debug("Parsed %r (%s dialect) as %s", version_text, selected.value, version)
    return version
