"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest


@pytest.fixture
def sample_payload() -> bytes:
    """SPS30 'start measurement' request (address, command, length, data, checksum)."""
    return bytes([0x00, 0x00, 0x02, 0x01, 0x03, 0xF9])


@pytest.fixture
def sample_frame() -> bytes:
    """Frame carrying sample_payload."""
    return bytes([0x7E, 0x00, 0x00, 0x02, 0x01, 0x03, 0xF9, 0x7E])


@pytest.fixture
def reserved_payload() -> bytes:
    """Payload containing both reserved bytes."""
    return bytes([0x01, 0x7E, 0x02, 0x7D, 0x03])
