"""Frame size calculation utilities.

This module provides functions to calculate the size of an encoded frame
without actually encoding it.
"""

from __future__ import annotations

from ..chars import DEFAULT_CHARS, SpecialChars

# Limits enforced by Sensirion SHDLC devices
SHDLC_MAX_PAYLOAD_SIZE = 260
SHDLC_MAX_FRAME_SIZE = 1000


def escaped_count(payload: bytes, chars: SpecialChars | None = None) -> int:
    """Count the payload bytes that will be escaped.

    Args:
        payload: Payload to inspect
        chars: Reserved bytes (default: 0x7E flag, 0x7D escape)

    Returns:
        Number of reserved bytes in the payload

    Example:
        >>> escaped_count(b"\\x7e\\x01\\x7d")
        2
    """
    if chars is None:
        chars = DEFAULT_CHARS

    reserved = chars.escape_map().keys()
    return sum(1 for byte in payload if byte in reserved)


def frame_size(payload: bytes, chars: SpecialChars | None = None) -> int:
    """Calculate the encoded frame size of a payload in bytes.

    Always equal to ``len(encode(payload, chars))``.

    Args:
        payload: Payload to inspect
        chars: Reserved bytes (default: 0x7E flag, 0x7D escape)

    Returns:
        Size in bytes, including both flag bytes

    Example:
        >>> frame_size(b"")
        2
        >>> frame_size(b"\\x7e")
        4
    """
    return 2 + len(payload) + escaped_count(payload, chars)


def worst_case_frame_size(payload_size: int) -> int:
    """Largest frame a payload of the given size can produce.

    Every payload byte escaped, plus the two flag bytes.

    Args:
        payload_size: Payload length in bytes

    Returns:
        Maximum frame size in bytes

    Raises:
        ValueError: If payload_size is negative

    Example:
        >>> worst_case_frame_size(SHDLC_MAX_PAYLOAD_SIZE)
        522
    """
    if payload_size < 0:
        raise ValueError(f"payload_size must be >= 0, got {payload_size}")

    return 2 + 2 * payload_size
