"""Record models for structpacker."""

from __future__ import annotations

from .base import BaseRecord
from .fields import Bool, Int8, Int16, Int32, Int64, UInt8, UInt16, UInt32, UInt64

__all__ = [
    "BaseRecord",
    "Bool",
    "Int8",
    "UInt8",
    "Int16",
    "UInt16",
    "Int32",
    "UInt32",
    "Int64",
    "UInt64",
]
