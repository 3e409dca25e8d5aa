"""Unpack engine.

This module provides unpack() and unpack_single(), which decode a byte buffer
into typed values as described by a format string, and unpack_record() for
pydantic records.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

from ..config import DEFAULT_OPTIONS, CodecOptions, NarrowingPolicy
from ..exceptions import (
    ArityMismatchError,
    BufferUnderrunError,
    DecodeError,
    InsufficientOutputSlotsError,
    SchemaError,
    SlotTypeError,
    ValueOutOfRangeError,
)
from .byteorder import ByteReader, from_wire_order
from .directives import (
    DEFAULT_BYTE_ORDER,
    Directive,
    Pad,
    SetEndianness,
    TypedField,
    count_fields,
    parse,
)
from .registry import ScalarType, ScalarValue, narrow
from .schema import RecordSchema, SlotType

_logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)

OutputShape = Union[int, Sequence[SlotType], None]


def unpack(
    fmt: str,
    data: bytes | bytearray | memoryview,
    shape: OutputShape = None,
    *,
    options: Optional[CodecOptions] = None,
) -> Tuple[ScalarValue, ...]:
    """Unpack bytes into a tuple of values according to a format string.

    The output shape declares how many values the caller expects and, per
    slot, which type each value is delivered as:

    - ``None``: one slot per field, values as decoded
    - an int: that many slots, values as decoded
    - a sequence of slot types, one per slot, each one of
        - ``None``: value as decoded
        - ``int``: value as a Python int (booleans become 0/1)
        - ``bool`` or ``ScalarType.BOOL``: the field must decode to a boolean
        - an integer ScalarType: value narrowed to that type's range

    Args:
        fmt: Format string, e.g. ``"<i?"``
        data: Buffer to read; trailing bytes after the last directive are ignored
        shape: Expected output shape
        options: Codec options (narrowing policy, whitespace handling)

    Returns:
        Decoded values in field order

    Raises:
        UnknownFormatCharError: If the format string is invalid
        InsufficientOutputSlotsError: If the format has more fields than slots
        ArityMismatchError: If fewer values were produced than declared slots
        BufferUnderrunError: If the buffer ends before a pad or field
        SlotTypeError: If a boolean slot receives a non-boolean value
        ValueOutOfRangeError: Under strict narrowing, if a value does not fit

    Examples:
        ```python
        from structpacker import ScalarType, unpack

        unpack("<i?", b"\\x05\\x00\\x00\\x00\\x01")              # (5, True)
        unpack("<i?", b"\\x05\\x00\\x00\\x00\\x01", 2)           # (5, True)
        unpack(">H", b"\\xff\\xff", [ScalarType.INT16])       # (-1,)
        ```
    """
    options = options or DEFAULT_OPTIONS
    directives = parse(fmt, options)
    slot_types = _resolve_shape(shape, directives)

    values = _unpack_directives(fmt, directives, data, slot_types, options.narrowing)

    if len(values) != len(slot_types):
        raise ArityMismatchError(
            f"Format {fmt!r} produced {len(values)} values but {len(slot_types)} were declared"
        )

    _logger.debug("unpacked %d values with %r from %d bytes", len(values), fmt, len(data))
    return tuple(values)


def unpack_single(
    fmt: str,
    data: bytes | bytearray | memoryview,
    slot_type: SlotType = None,
    *,
    options: Optional[CodecOptions] = None,
) -> ScalarValue:
    """Unpack exactly one value and return it directly.

    Args:
        fmt: Format string with exactly one field, e.g. ``">xH"``
        data: Buffer to read
        slot_type: Type the value is delivered as (see unpack)
        options: Codec options

    Returns:
        The decoded value

    Raises:
        ArityMismatchError: If the format does not have exactly one field
        DecodeError: Same conditions as unpack

    Example:
        >>> unpack_single(">H", b"\\x01\\x02")
        258
    """
    return unpack(fmt, data, [slot_type], options=options)[0]


def unpack_record(
    record_class: Type[T],
    data: bytes | bytearray | memoryview,
    fmt: Optional[str] = None,
    *,
    options: Optional[CodecOptions] = None,
) -> T:
    """Unpack bytes into a pydantic record.

    The record's fields, in declaration order, are the output slots.

    Args:
        record_class: Record class to construct
        data: Buffer to read
        fmt: Format string; defaults to the record's ``struct_format``
        options: Codec options

    Returns:
        Record instance

    Raises:
        SchemaError: If the record cannot be mapped to slots or has no format
        DecodeError: If the data does not match the format or the record
            rejects the decoded values
    """
    schema = RecordSchema.from_model(record_class)
    resolved = schema.resolve_format(fmt)
    values = unpack(resolved, data, schema.slot_types, options=options)

    try:
        return record_class(**dict(zip(schema.field_names, values)))
    except ValidationError as e:
        raise DecodeError(f"Failed to construct {record_class.__name__}: {e}") from e


def _resolve_shape(shape: OutputShape, directives: Tuple[Directive, ...]) -> List[SlotType]:
    """Turn the caller's output shape into one slot type per slot."""
    if shape is None:
        return [None] * count_fields(directives)

    if isinstance(shape, int) and not isinstance(shape, bool):
        if shape < 0:
            raise SchemaError(f"Output arity must be >= 0, got {shape}")
        return [None] * shape

    if isinstance(shape, (str, bytes)):
        raise SchemaError(f"Invalid output shape {shape!r}")

    slot_types = list(shape)
    for index, slot_type in enumerate(slot_types):
        if slot_type is not None and slot_type is not int and slot_type is not bool:
            if not isinstance(slot_type, ScalarType):
                raise SchemaError(f"Slot {index}: unsupported slot type {slot_type!r}")
    return slot_types


def _unpack_directives(
    fmt: str,
    directives: Tuple[Directive, ...],
    data: bytes | bytearray | memoryview,
    slot_types: List[SlotType],
    narrowing: NarrowingPolicy,
) -> List[ScalarValue]:
    reader = ByteReader(data)
    order = DEFAULT_BYTE_ORDER
    values: List[ScalarValue] = []

    for directive in directives:
        if isinstance(directive, SetEndianness):
            order = directive.order
        elif isinstance(directive, Pad):
            try:
                reader.skip(1)
            except IndexError as e:
                raise BufferUnderrunError(
                    f"Truncated data at pad byte offset {reader.position()}: {e}"
                ) from e
        elif isinstance(directive, TypedField):
            index = len(values)
            if index >= len(slot_types):
                raise InsufficientOutputSlotsError(
                    f"Format {fmt!r} has more fields than the {len(slot_types)} declared slots"
                )

            entry = directive.entry
            try:
                raw = reader.read_bytes(entry.width)
            except IndexError as e:
                raise BufferUnderrunError(
                    f"Truncated data while decoding field {index} ({entry.tag!r}) "
                    f"at offset {reader.position()}: {e}"
                ) from e

            decoded = entry.decode(from_wire_order(raw, order))
            values.append(_convert_slot(decoded, slot_types[index], index, narrowing))

    return values


def _convert_slot(
    value: ScalarValue, slot_type: SlotType, index: int, narrowing: NarrowingPolicy
) -> ScalarValue:
    """Deliver a decoded value as its output slot type.

    Raises:
        SlotTypeError: If a boolean slot receives a non-boolean value
        ValueOutOfRangeError: Under strict narrowing, if value does not fit
    """
    if slot_type is None:
        return value

    if slot_type is bool or slot_type is ScalarType.BOOL:
        if not isinstance(value, bool):
            raise SlotTypeError(
                f"Slot {index}: boolean slot requires a '?' field, got {type(value).__name__}"
            )
        return value

    if slot_type is int:
        return int(value)

    try:
        return narrow(int(value), slot_type, narrowing)
    except ValueOutOfRangeError as e:
        raise ValueOutOfRangeError(f"Slot {index}: {e}") from e
