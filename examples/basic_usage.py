#!/usr/bin/env python3
"""Basic usage example for sensirion_hdlc.

This example demonstrates:
1. Framing an SPS30 request
2. Unframing a response that contains reserved bytes
3. Classifying a corrupted frame
"""

from __future__ import annotations

from sensirion_hdlc import FrameError, SpecialChars, decode, encode, frame_size


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("sensirion_hdlc Basic Usage Example")
    print("=" * 60)
    print()

    # SPS30 'start measurement': address, command, length, data, checksum
    request = bytes([0x00, 0x00, 0x02, 0x01, 0x03, 0xF9])
    frame = encode(request)
    print(f"Request payload: {request.hex(' ')}")
    print(f"Request frame:   {frame.hex(' ')} ({frame_size(request)} bytes)")
    print()

    response = bytes([0x00, 0x00, 0x00, 0x7E, 0x7D, 0x81])
    response_frame = encode(response)
    print(f"Response payload: {response.hex(' ')}")
    print(f"Response frame:   {response_frame.hex(' ')}")
    print(f"Decoded:          {decode(response_frame).hex(' ')}")
    print()

    corrupted = response_frame[:5] + response_frame[6:]
    print(f"Corrupted frame:  {corrupted.hex(' ')}")
    try:
        decode(corrupted)
    except FrameError as e:
        print(f"Rejected:         {type(e).__name__} at byte {e.position}: {e}")
    print()

    chars = SpecialChars.with_xon_xoff()
    flow = bytes([0x11, 0x42, 0x13])
    print(f"XON/XOFF payload: {flow.hex(' ')}")
    print(f"XON/XOFF frame:   {encode(flow, chars).hex(' ')}")


if __name__ == "__main__":
    main()
