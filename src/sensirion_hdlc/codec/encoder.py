"""Frame encoder for Sensirion HDLC.

This module provides the encode() function that wraps a payload in flag bytes
and escapes every reserved byte inside it.
"""

from __future__ import annotations

from ..chars import DEFAULT_CHARS, SpecialChars
from ..exceptions import PayloadTooLargeError


def encode(
    payload: bytes,
    chars: SpecialChars | None = None,
    *,
    max_payload_size: int | None = None,
) -> bytes:
    """Encode a payload into a self-delimited frame.

    The frame structure is:
    - [FLAG] [payload, reserved bytes replaced by ESCAPE + substitute] [FLAG]

    Args:
        payload: Bytes to frame (any value 0x00-0xFF, may be empty)
        chars: Reserved bytes to use (default: 0x7E flag, 0x7D escape)
        max_payload_size: If set, reject payloads longer than this

    Returns:
        Encoded frame

    Raises:
        PayloadTooLargeError: If max_payload_size is set and exceeded

    Example:
        >>> encode(b"\\x01\\x7e\\x02").hex(" ")
        '7e 01 7d 5e 02 7e'
        >>> encode(b"")
        b'~~'
    """
    if chars is None:
        chars = DEFAULT_CHARS

    if max_payload_size is not None and len(payload) > max_payload_size:
        raise PayloadTooLargeError(
            f"Payload is {len(payload)} bytes, limit is {max_payload_size} bytes"
        )

    escape_map = chars.escape_map()

    result = bytearray()
    result.append(chars.flag)

    for byte in payload:
        substitute = escape_map.get(byte)
        if substitute is None:
            result.append(byte)
        else:
            result.append(chars.escape)
            result.append(substitute)

    result.append(chars.flag)

    return bytes(result)
