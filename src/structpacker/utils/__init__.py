"""Utility functions for structpacker.

This module provides size and offset calculation for format strings.
"""

from __future__ import annotations

from .sizing import calcsize, field_count, field_offsets

__all__ = [
    "calcsize",
    "field_count",
    "field_offsets",
]
