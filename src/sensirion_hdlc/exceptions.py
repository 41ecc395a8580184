"""Exception hierarchy for sensirion_hdlc.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from ShdlcError for easy catching of any framing-specific error.
"""

from __future__ import annotations


class ShdlcError(Exception):
    """Base exception for all sensirion_hdlc errors."""

    pass


class EncodeError(ShdlcError):
    """Raised when a payload cannot be framed.

    The default encoder never fails; this is only raised when the caller
    opts into a size limit.
    """

    pass


class PayloadTooLargeError(EncodeError):
    """Raised when a payload exceeds the requested maximum size."""

    pass


class FrameError(ShdlcError):
    """Raised when a received frame cannot be decoded.

    Examples:
        - Missing start or end flag
        - Unescaped flag inside the payload region
        - Escape byte followed by an invalid substitute
        - Frame ends in the middle of an escape pair

    Attributes:
        position: Index into the frame where the problem was detected, or None
            when the error is not tied to a single byte.
    """

    def __init__(self, message: str, position: int | None = None) -> None:
        super().__init__(message)
        self.position = position


class MissingStartFlagError(FrameError):
    """Input is empty or does not begin with the flag byte."""

    pass


class MissingEndFlagError(FrameError):
    """Input does not end with the flag byte or is shorter than two bytes."""

    pass


class UnexpectedFlagInPayloadError(FrameError):
    """An unescaped flag byte appears before the terminating flag."""

    pass


class InvalidEscapeSequenceError(FrameError):
    """Raised for a double escape or an escape followed by an unknown substitute."""

    pass


class TruncatedEscapeSequenceError(FrameError):
    """The frame ends while an escape byte is waiting for its pair."""

    pass


class FrameTooLargeError(FrameError):
    """Raised when a frame or its decoded payload exceeds the requested limit."""

    pass
