"""Tests for CLI tool."""

from __future__ import annotations

import subprocess
import sys

from structpacker import __version__


def test_cli_help() -> None:
    """Test CLI --help flag."""
    result = subprocess.run(
        [sys.executable, "-m", "structpacker.cli.main", "--help"],
        capture_output=True,
        text=True,
    )
    assert result.returncode == 0
    assert "structpacker: Fixed-width Binary Struct Codec" in result.stdout
    assert "--describe" in result.stdout


def test_cli_version() -> None:
    """Test CLI --version flag."""
    result = subprocess.run(
        [sys.executable, "-m", "structpacker.cli.main", "--version"],
        capture_output=True,
        text=True,
    )
    assert result.returncode == 0
    assert f"structpacker {__version__}" in result.stdout


def test_cli_describe() -> None:
    """Test CLI --describe with a mixed format."""
    result = subprocess.run(
        [sys.executable, "-m", "structpacker.cli.main", "--describe", "<Hx>I?"],
        capture_output=True,
        text=True,
    )
    assert result.returncode == 0
    assert "3 fields, 1 pad byte." in result.stdout
    assert "UINT16 (little)" in result.stdout
    assert "UINT32 (big)" in result.stdout
    assert "Packed size: 8 bytes / 64 bits" in result.stdout


def test_cli_describe_invalid_format() -> None:
    """Test CLI --describe with an unknown format char."""
    result = subprocess.run(
        [sys.executable, "-m", "structpacker.cli.main", "--describe", "<If"],
        capture_output=True,
        text=True,
    )
    assert result.returncode == 1
    assert "Error" in result.stderr
    assert "'f'" in result.stderr


def test_cli_no_args() -> None:
    """Test CLI with no arguments (should show help)."""
    result = subprocess.run(
        [sys.executable, "-m", "structpacker.cli.main"],
        capture_output=True,
        text=True,
    )
    assert result.returncode == 0
    assert "structpacker: Fixed-width Binary Struct Codec" in result.stdout
