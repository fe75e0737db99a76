"""
Single-pass part scanner for version strings.

Walks the input bytes once, left to right, asking the dialect policy about every byte.
Each call to ``scan_part`` captures one part and reports the part that follows it;
``iter_parts`` chains those calls from MAJOR until the input ends.

Notes:
    - O(n) in the input length; no backtracking and no rewinds.
    - The only look-ahead is the byte right after the current one, exposed to the
      policy as a zero-copy memoryview of the unconsumed tail.
    - The first violation raises immediately; nothing after it is examined.
    - Delimiters are consumed but belong to neither neighbouring part.
"""

from __future__ import annotations

from collections.abc import Iterator

from .dialect import DialectPolicy
from .grammar import PartType

__all__ = [
    "scan_part",
    "iter_parts",
]


def scan_part(
    data: bytes, start: int, part: PartType, policy: DialectPolicy
) -> tuple[bytes, int, PartType | None]:
    """
    Capture one part starting at ``data[start]``.

    Args:
        data (bytes): The whole version string.
        start (int): Index of the first unconsumed byte.
        part (PartType): The part being captured.
        policy (DialectPolicy): Dialect deciding each byte.

    Returns:
        tuple[bytes, int, PartType | None]: The captured bytes, the index right after
        the terminating delimiter (or ``len(data)``), and the next part (None at end
        of input).

    Raises:
        VersionParseError: On the first byte (or empty part) the policy rejects.
    """
    view = memoryview(data)
    captured = bytearray()
    for index in range(start, len(data)):
        byte = data[index]
        next_part = policy.parse_byte(byte, part, captured, view[index + 1 :])
        if next_part is not None:
            policy.close_part(part, captured)
            return bytes(captured), index + 1, next_part
        captured.append(byte)
    policy.close_part(part, captured)
    return bytes(captured), len(data), None


def iter_parts(data: bytes, policy: DialectPolicy) -> Iterator[tuple[PartType, bytes]]:
    """
    Yield ``(part, captured)`` for each part of ``data`` in scan order.

    A prerelease with several dot-separated components yields one PRERELEASE item
    per component. Scanning is lazy: an error surfaces when the offending part is
    reached, after every earlier part has been yielded.

    Examples:
        >>> from semparse.core.dialect import policy_for
        >>> from semparse.core.grammar import Dialect
        >>> [(p.value, b) for p, b in iter_parts(b"1.2.3-rc.1", policy_for(Dialect.STANDARD))]
        [('major', b'1'), ('minor', b'2'), ('patch', b'3'), ('prerelease', b'rc'), ('prerelease', b'1')]
    """
    part: PartType | None = PartType.MAJOR
    index = 0
    while part is not None:
        captured, index, next_part = scan_part(data, index, part, policy)
        yield part, captured
        part = next_part
