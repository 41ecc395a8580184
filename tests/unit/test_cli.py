"""Tests for CLI tool."""

from __future__ import annotations

import pytest

from sensirion_hdlc import __version__
from sensirion_hdlc.cli.main import main


def test_cli_help(capsys: pytest.CaptureFixture[str]) -> None:
    """Test CLI --help flag."""
    with pytest.raises(SystemExit) as exc_info:
        main(["--help"])

    assert exc_info.value.code == 0
    out = capsys.readouterr().out
    assert "sensirion-hdlc: Sensirion HDLC Framing" in out
    assert "--encode" in out
    assert "--decode" in out


def test_cli_version(capsys: pytest.CaptureFixture[str]) -> None:
    """Test CLI --version flag."""
    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])

    assert exc_info.value.code == 0
    assert f"sensirion-hdlc {__version__}" in capsys.readouterr().out


def test_cli_no_args(capsys: pytest.CaptureFixture[str]) -> None:
    """Test CLI with no arguments (should show help)."""
    assert main([]) == 0
    assert "sensirion-hdlc: Sensirion HDLC Framing" in capsys.readouterr().out


def test_cli_encode(capsys: pytest.CaptureFixture[str]) -> None:
    """Test CLI --encode."""
    assert main(["--encode", "00 7e 01"]) == 0
    assert capsys.readouterr().out.strip() == "7e 00 7d 5e 01 7e"


def test_cli_encode_compact_hex(capsys: pytest.CaptureFixture[str]) -> None:
    """Test hex input without spaces."""
    assert main(["--encode", "00000201 03f9"]) == 0
    assert capsys.readouterr().out.strip() == "7e 00 00 02 01 03 f9 7e"


def test_cli_decode(capsys: pytest.CaptureFixture[str]) -> None:
    """Test CLI --decode."""
    assert main(["--decode", "7e 00 7d 5e 01 7e"]) == 0
    assert capsys.readouterr().out.strip() == "00 7e 01"


def test_cli_decode_error(capsys: pytest.CaptureFixture[str]) -> None:
    """Test CLI reports decode failures."""
    assert main(["--decode", "7e 7e 7e"]) == 1
    err = capsys.readouterr().err
    assert "Error" in err
    assert "UnexpectedFlagInPayloadError" in err


def test_cli_invalid_hex(capsys: pytest.CaptureFixture[str]) -> None:
    """Test CLI rejects malformed hex."""
    assert main(["--encode", "zz"]) == 1
    assert "Invalid hex input" in capsys.readouterr().err


def test_cli_xon_xoff(capsys: pytest.CaptureFixture[str]) -> None:
    """Test CLI --xon-xoff."""
    assert main(["--xon-xoff", "--encode", "11 13"]) == 0
    assert capsys.readouterr().out.strip() == "7e 7d 31 7d 33 7e"


def test_cli_limit(capsys: pytest.CaptureFixture[str]) -> None:
    """Test CLI --limit rejects oversized payloads."""
    payload = "00" * 261

    assert main(["--encode", payload]) == 0
    capsys.readouterr()

    assert main(["--limit", "--encode", payload]) == 1
    assert "PayloadTooLargeError" in capsys.readouterr().err


def test_cli_encode_and_decode_exclusive() -> None:
    """Test --encode and --decode cannot be combined."""
    with pytest.raises(SystemExit) as exc_info:
        main(["--encode", "00", "--decode", "7e 7e"])

    assert exc_info.value.code == 2
