"""Main CLI entry point for sensirion_hdlc."""

from __future__ import annotations

import argparse
import logging
import sys

from .. import __version__
from ..chars import DEFAULT_CHARS, SpecialChars
from ..codec import decode, encode
from ..exceptions import ShdlcError
from ..utils.sizing import SHDLC_MAX_FRAME_SIZE, SHDLC_MAX_PAYLOAD_SIZE


def _parse_hex(text: str) -> bytes:
    try:
        return bytes.fromhex(text)
    except ValueError as e:
        raise ValueError(f"Invalid hex input {text!r}: {e}") from e


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the sensirion-hdlc CLI.

    Args:
        argv: Command line arguments (default: sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        prog="sensirion-hdlc",
        description="sensirion-hdlc: Sensirion HDLC Framing",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  sensirion-hdlc --encode "00 00 02 01 03 f9"     Frame a payload
  sensirion-hdlc --decode "7e 00 7d 5e 7e"        Unframe a received frame
  sensirion-hdlc --version                        Show version
        """,
    )

    action = parser.add_mutually_exclusive_group()
    action.add_argument(
        "--encode",
        metavar="HEX",
        type=str,
        help="Encode a hex payload into a frame",
    )
    action.add_argument(
        "--decode",
        metavar="HEX",
        type=str,
        help="Decode a hex frame into its payload",
    )

    parser.add_argument(
        "--xon-xoff",
        action="store_true",
        help="Also escape the XON (0x11) and XOFF (0x13) bytes",
    )
    parser.add_argument(
        "--limit",
        action="store_true",
        help=(
            f"Enforce SHDLC size limits ({SHDLC_MAX_PAYLOAD_SIZE} byte payload, "
            f"{SHDLC_MAX_FRAME_SIZE} byte frame)"
        ),
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"sensirion-hdlc {__version__}",
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    chars = SpecialChars.with_xon_xoff() if args.xon_xoff else DEFAULT_CHARS
    max_payload_size = SHDLC_MAX_PAYLOAD_SIZE if args.limit else None
    max_frame_size = SHDLC_MAX_FRAME_SIZE if args.limit else None

    if args.encode is None and args.decode is None:
        # If no command specified, show help
        parser.print_help()
        return 0

    try:
        if args.encode is not None:
            result = encode(
                _parse_hex(args.encode), chars, max_payload_size=max_payload_size
            )
        else:
            result = decode(
                _parse_hex(args.decode),
                chars,
                max_frame_size=max_frame_size,
                max_payload_size=max_payload_size,
            )
    except ShdlcError as e:
        print(f"Error: {type(e).__name__}: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(result.hex(" "))
    return 0


if __name__ == "__main__":
    sys.exit(main())
