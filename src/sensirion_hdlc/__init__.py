"""sensirion_hdlc: Sensirion HDLC Framing

A Python library for the byte-stuffing framing used by Sensirion sensors over
serial links (SHDLC). It only frames the data: payload contents, checksums and
the transport itself are left to the caller.

Key Features:
- Flag-delimited frames with 0x7E / 0x7D escaping
- Classified decode errors for resynchronising on a byte stream
- Configurable reserved bytes via a validated Pydantic model
- Pure Python, no I/O

Quick Start:
    >>> from sensirion_hdlc import encode, decode
    >>>
    >>> frame = encode(bytes([0x00, 0x00, 0x02, 0x01, 0x03, 0xF9]))
    >>> frame.hex(" ")
    '7e 00 00 02 01 03 f9 7e'
    >>> decode(frame).hex(" ")
    '00 00 02 01 03 f9'
"""

from __future__ import annotations

from .chars import DEFAULT_CHARS, ESCAPE, ESCAPE_XOR, FLAG, SpecialChars, escape_byte
from .codec import ScanState, decode, encode
from .exceptions import (
    EncodeError,
    FrameError,
    FrameTooLargeError,
    InvalidEscapeSequenceError,
    MissingEndFlagError,
    MissingStartFlagError,
    PayloadTooLargeError,
    ShdlcError,
    TruncatedEscapeSequenceError,
    UnexpectedFlagInPayloadError,
)
from .utils import (
    SHDLC_MAX_FRAME_SIZE,
    SHDLC_MAX_PAYLOAD_SIZE,
    escaped_count,
    frame_size,
    worst_case_frame_size,
)

__version__ = "0.1.0"

__all__ = [
    # Core API
    "encode",
    "decode",
    "ScanState",
    # Reserved bytes
    "FLAG",
    "ESCAPE",
    "ESCAPE_XOR",
    "SpecialChars",
    "DEFAULT_CHARS",
    "escape_byte",
    # Exceptions
    "ShdlcError",
    "EncodeError",
    "PayloadTooLargeError",
    "FrameError",
    "MissingStartFlagError",
    "MissingEndFlagError",
    "UnexpectedFlagInPayloadError",
    "InvalidEscapeSequenceError",
    "TruncatedEscapeSequenceError",
    "FrameTooLargeError",
    # Sizing
    "SHDLC_MAX_PAYLOAD_SIZE",
    "SHDLC_MAX_FRAME_SIZE",
    "escaped_count",
    "frame_size",
    "worst_case_frame_size",
    # Version
    "__version__",
]
