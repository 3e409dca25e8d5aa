"""Pack engine.

This module provides pack(), which encodes an ordered list of values into a
byte buffer as described by a format string, and pack_record() for pydantic
records.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from pydantic import BaseModel

from ..config import DEFAULT_OPTIONS, CodecOptions
from ..exceptions import (
    ExcessValuesError,
    InsufficientValuesError,
    UnsupportedValueTypeError,
    ValueOutOfRangeError,
)
from .byteorder import ByteOrder, ByteWriter, to_wire_order
from .directives import DEFAULT_BYTE_ORDER, Pad, SetEndianness, TypedField, parse
from .registry import coerce
from .schema import RecordSchema

_logger = logging.getLogger(__name__)


def pack(fmt: str, *values: Any, options: Optional[CodecOptions] = None) -> bytes:
    """Pack values into bytes according to a format string.

    Values are consumed strictly in order, one per type tag; ``<``, ``>`` and
    ``x`` consume none. Each value is coerced to its field's scalar type
    (integers are narrowed to the field width, booleans pack as exactly
    0x01 or 0x00) and written in the byte order in effect at that point.

    Args:
        fmt: Format string, e.g. ``"<xI"``
        *values: One int, bool or Scalar per field; a Scalar must be declared
            with its field's scalar type
        options: Codec options (narrowing policy, whitespace handling)

    Returns:
        Packed bytes; length is the pad count plus the sum of field widths

    Raises:
        UnknownFormatCharError: If the format string is invalid
        InsufficientValuesError: If there are fewer values than fields
        ExcessValuesError: If values remain after the last field
        UnsupportedValueTypeError: If a value is not an integral scalar, or is
            a Scalar whose type differs from its field
        ValueOutOfRangeError: Under strict narrowing, if a value does not fit

    Examples:
        ```python
        from structpacker import pack

        pack("<I", 1)      # b'\\x01\\x00\\x00\\x00'
        pack(">I", 1)      # b'\\x00\\x00\\x00\\x01'
        pack("<xI", 5)     # b'\\x00\\x05\\x00\\x00\\x00'
        pack("<H?", 0x0102, True)
        ```
    """
    options = options or DEFAULT_OPTIONS
    directives = parse(fmt, options)

    writer = ByteWriter()
    order = DEFAULT_BYTE_ORDER
    value_index = 0

    for directive in directives:
        if isinstance(directive, SetEndianness):
            order = directive.order
        elif isinstance(directive, Pad):
            writer.write_pad()
        elif isinstance(directive, TypedField):
            if value_index >= len(values):
                raise InsufficientValuesError(
                    f"Format {fmt!r} needs more than the {len(values)} values provided"
                )
            _pack_field(writer, directive, values[value_index], value_index, order, options)
            value_index += 1

    if value_index < len(values):
        raise ExcessValuesError(
            f"Format {fmt!r} has {value_index} fields but {len(values)} values were provided"
        )

    packed = writer.to_bytes()
    _logger.debug("packed %d values with %r into %d bytes", value_index, fmt, writer.length())
    return packed


def _pack_field(
    writer: ByteWriter,
    directive: TypedField,
    value: Any,
    index: int,
    order: ByteOrder,
    options: CodecOptions,
) -> None:
    """Coerce, encode and append a single field value."""
    entry = directive.entry
    try:
        coerced = coerce(value, entry.scalar_type, options.narrowing)
    except (UnsupportedValueTypeError, ValueOutOfRangeError) as err:
        raise type(err)(f"Field {index} ({entry.tag!r}): {err}") from err

    writer.write_bytes(to_wire_order(entry.encode(coerced), order))


def pack_record(
    record: BaseModel, fmt: Optional[str] = None, *, options: Optional[CodecOptions] = None
) -> bytes:
    """Pack a pydantic record, taking values in field declaration order.

    Args:
        record: Record instance (usually a BaseRecord subclass)
        fmt: Format string; defaults to the record's ``struct_format``
        options: Codec options

    Returns:
        Packed bytes

    Raises:
        SchemaError: If the record cannot be mapped to slots or has no format
        EncodeError: If the values do not match the format

    Example:
        ```python
        class Status(BaseRecord):
            struct_format: ClassVar[str] = "<Hx?"

            device_id: UInt16
            ready: bool

        pack_record(Status(device_id=7, ready=True))   # b'\\x07\\x00\\x00\\x01'
        ```
    """
    schema = RecordSchema.from_model(type(record))
    resolved = schema.resolve_format(fmt)
    values = [getattr(record, name) for name in schema.field_names]
    return pack(resolved, *values, options=options)
