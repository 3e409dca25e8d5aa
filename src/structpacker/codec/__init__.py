"""Fixed-width struct codec for structpacker.

This module provides the format interpreter, the pack and unpack engines and
the scalar type registry they share.
"""

from __future__ import annotations

from .byteorder import ByteOrder, to_big_endian, to_little_endian
from .decoder import unpack, unpack_record, unpack_single
from .directives import Pad, SetEndianness, TypedField, parse
from .encoder import pack, pack_record
from .layout import FieldLayout, Layout, compile_layout
from .registry import REGISTRY, Scalar, ScalarKind, ScalarType, TypeEntry
from .schema import RecordSchema, SlotSchema

__all__ = [
    "pack",
    "unpack",
    "unpack_single",
    "pack_record",
    "unpack_record",
    "parse",
    "SetEndianness",
    "Pad",
    "TypedField",
    "ByteOrder",
    "to_big_endian",
    "to_little_endian",
    "Layout",
    "FieldLayout",
    "compile_layout",
    "REGISTRY",
    "Scalar",
    "ScalarKind",
    "ScalarType",
    "TypeEntry",
    "RecordSchema",
    "SlotSchema",
]
