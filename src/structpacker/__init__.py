"""structpacker: Fixed-width Binary Struct Codec

A Python library that packs typed scalar values into byte buffers and unpacks
them again, driven by a compact format string in the spirit of the standard
``struct`` module. Designed for device-control and wire protocols that need
explicit byte order and explicit padding.

Key Features:
- Sticky endianness markers (``<`` little, ``>`` big) and explicit pad bytes
- Eight integer types and a one-byte boolean
- Declared output shapes with explicit narrowing rules
- Pydantic-based fixed-layout records

Quick Start:
    >>> from structpacker import pack, unpack
    >>>
    >>> data = pack("<xI?", 5, True)
    >>> data
    b'\\x00\\x05\\x00\\x00\\x00\\x01'
    >>> unpack("<xI?", data, 2)
    (5, True)
"""

from __future__ import annotations

from .codec import (
    ByteOrder,
    Layout,
    Scalar,
    ScalarType,
    compile_layout,
    pack,
    pack_record,
    parse,
    unpack,
    unpack_record,
    unpack_single,
)
from .config import CodecOptions
from .exceptions import (
    ArityMismatchError,
    BufferUnderrunError,
    DecodeError,
    EncodeError,
    ExcessValuesError,
    FormatError,
    InsufficientOutputSlotsError,
    InsufficientValuesError,
    SchemaError,
    SlotTypeError,
    StructPackerError,
    UnknownFormatCharError,
    UnsupportedValueTypeError,
    ValueOutOfRangeError,
)
from .models import BaseRecord, Bool, Int8, Int16, Int32, Int64, UInt8, UInt16, UInt32, UInt64
from .utils import calcsize, field_count, field_offsets

__version__ = "0.1.0"

__all__ = [
    # Core API
    "pack",
    "unpack",
    "unpack_single",
    "parse",
    "Layout",
    "compile_layout",
    "ByteOrder",
    "Scalar",
    "ScalarType",
    "CodecOptions",
    # Records
    "BaseRecord",
    "pack_record",
    "unpack_record",
    "Bool",
    "Int8",
    "UInt8",
    "Int16",
    "UInt16",
    "Int32",
    "UInt32",
    "Int64",
    "UInt64",
    # Exceptions
    "StructPackerError",
    "FormatError",
    "UnknownFormatCharError",
    "SchemaError",
    "EncodeError",
    "InsufficientValuesError",
    "ExcessValuesError",
    "UnsupportedValueTypeError",
    "DecodeError",
    "ArityMismatchError",
    "InsufficientOutputSlotsError",
    "BufferUnderrunError",
    "SlotTypeError",
    "ValueOutOfRangeError",
    # Sizing
    "calcsize",
    "field_count",
    "field_offsets",
    # Version
    "__version__",
]
