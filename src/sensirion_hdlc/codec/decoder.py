"""Frame decoder for Sensirion HDLC.

This module provides the decode() function that validates a received frame and
reverses the byte stuffing applied by encode().

The interior of the frame is scanned with a two-state machine:

    NORMAL --ESCAPE--> ESCAPE_PENDING --substitute--> NORMAL

Any other transition out of ESCAPE_PENDING, an unescaped flag while NORMAL, or
ending the scan in ESCAPE_PENDING rejects the frame.
"""

from __future__ import annotations

import enum
import logging

from ..chars import DEFAULT_CHARS, SpecialChars
from ..exceptions import (
    FrameError,
    FrameTooLargeError,
    InvalidEscapeSequenceError,
    MissingEndFlagError,
    MissingStartFlagError,
    TruncatedEscapeSequenceError,
    UnexpectedFlagInPayloadError,
)

logger = logging.getLogger(__name__)


class ScanState(enum.Enum):
    """State of the interior scan."""

    NORMAL = "normal"
    ESCAPE_PENDING = "escape_pending"


def decode(
    frame: bytes,
    chars: SpecialChars | None = None,
    *,
    max_frame_size: int | None = None,
    max_payload_size: int | None = None,
) -> bytes:
    """Decode a frame back into its payload.

    Args:
        frame: Received frame, including both flag bytes
        chars: Reserved bytes the frame was encoded with (default: 0x7E/0x7D)
        max_frame_size: If set, reject frames longer than this
        max_payload_size: If set, reject frames whose payload is longer than this

    Returns:
        Original payload

    Raises:
        MissingStartFlagError: Frame is empty or does not start with the flag
        MissingEndFlagError: Frame is shorter than two bytes or does not end with the flag
        UnexpectedFlagInPayloadError: Unescaped flag before the terminating flag
        InvalidEscapeSequenceError: Double escape, or escape followed by an unknown substitute
        TruncatedEscapeSequenceError: Frame ends between an escape and its substitute
        FrameTooLargeError: A size limit was set and exceeded

    Example:
        >>> decode(bytes.fromhex("7e 01 7d 5e 02 7e"))
        b'\\x01~\\x02'
    """
    if chars is None:
        chars = DEFAULT_CHARS

    # Bytes-like input only; an int is a TypeError, not a zero-filled frame
    data = memoryview(frame).tobytes()

    try:
        return _decode(data, chars, max_frame_size, max_payload_size)
    except FrameError as e:
        logger.debug("Rejected frame (%s at %s): %s", type(e).__name__, e.position, e)
        raise


def _decode(
    frame: bytes,
    chars: SpecialChars,
    max_frame_size: int | None,
    max_payload_size: int | None,
) -> bytes:
    if not frame or frame[0] != chars.flag:
        raise MissingStartFlagError("Frame does not start with a flag byte", position=0)

    if len(frame) < 2 or frame[-1] != chars.flag:
        raise MissingEndFlagError(
            "Frame does not end with a flag byte", position=len(frame) - 1
        )

    if max_frame_size is not None and len(frame) > max_frame_size:
        raise FrameTooLargeError(
            f"Frame is {len(frame)} bytes, limit is {max_frame_size} bytes"
        )

    unescape_map = chars.unescape_map()
    payload = bytearray()
    state = ScanState.NORMAL

    # Interior starts at index 1; the last byte is the terminating flag
    for position in range(1, len(frame) - 1):
        byte = frame[position]

        if state is ScanState.ESCAPE_PENDING:
            if byte == chars.escape:
                raise InvalidEscapeSequenceError(
                    "Escape byte followed by another escape byte", position=position
                )
            original = unescape_map.get(byte)
            if original is None:
                raise InvalidEscapeSequenceError(
                    f"Escape byte followed by invalid substitute 0x{byte:02X}",
                    position=position,
                )
            payload.append(original)
            state = ScanState.NORMAL
        elif byte == chars.escape:
            state = ScanState.ESCAPE_PENDING
        elif byte == chars.flag:
            raise UnexpectedFlagInPayloadError(
                "Unescaped flag byte inside frame", position=position
            )
        else:
            payload.append(byte)

    if state is ScanState.ESCAPE_PENDING:
        raise TruncatedEscapeSequenceError(
            "Frame ends in the middle of an escape sequence", position=len(frame) - 1
        )

    if max_payload_size is not None and len(payload) > max_payload_size:
        raise FrameTooLargeError(
            f"Decoded payload is {len(payload)} bytes, limit is {max_payload_size} bytes"
        )

    return bytes(payload)
