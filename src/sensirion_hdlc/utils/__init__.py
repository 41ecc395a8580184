"""Utility functions for sensirion_hdlc.

This module provides frame size calculation and the SHDLC size limits.
"""

from __future__ import annotations

from .sizing import (
    SHDLC_MAX_FRAME_SIZE,
    SHDLC_MAX_PAYLOAD_SIZE,
    escaped_count,
    frame_size,
    worst_case_frame_size,
)

__all__ = [
    # Limits
    "SHDLC_MAX_PAYLOAD_SIZE",
    "SHDLC_MAX_FRAME_SIZE",
    # Sizing functions
    "escaped_count",
    "frame_size",
    "worst_case_frame_size",
]
