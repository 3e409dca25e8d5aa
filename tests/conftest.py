"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest


@pytest.fixture
def mixed_format() -> str:
    """Format string mixing byte orders, padding and a boolean."""
    return "<Hx>I?"


@pytest.fixture
def mixed_payload() -> bytes:
    """Packed form of (0x0102, 7, True) under ``mixed_format``."""
    return b"\x02\x01\x00\x00\x00\x00\x07\x01"
