"""Format size calculation utilities.

This module provides functions to calculate the packed size and field
positions of a format string without packing anything.
"""

from __future__ import annotations

from typing import List, Optional

from ..codec.layout import compile_layout
from ..config import CodecOptions


def calcsize(fmt: str, options: Optional[CodecOptions] = None) -> int:
    """Calculate the packed size of a format string in bytes.

    Args:
        fmt: Format string

    Returns:
        Number of pad bytes plus the widths of all fields

    Raises:
        UnknownFormatCharError: If the format string is invalid

    Example:
        >>> calcsize("<xI?")
        6
    """
    return compile_layout(fmt, options).size


def field_count(fmt: str, options: Optional[CodecOptions] = None) -> int:
    """Return the number of values a format string packs or unpacks.

    Example:
        >>> field_count("<xI?")
        2
    """
    return compile_layout(fmt, options).field_count


def field_offsets(fmt: str, options: Optional[CodecOptions] = None) -> List[int]:
    """Return the byte offset of each field, in field order.

    Example:
        >>> field_offsets("<xI?")
        [1, 5]
    """
    return [field.offset for field in compile_layout(fmt, options).fields]
