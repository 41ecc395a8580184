"""Byte-stuffing codec for sensirion_hdlc.

This module provides the frame encoder and decoder.
"""

from __future__ import annotations

from .decoder import ScanState, decode
from .encoder import encode

__all__ = [
    "encode",
    "decode",
    "ScanState",
]
