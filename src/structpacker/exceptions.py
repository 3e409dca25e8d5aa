"""Exception hierarchy for structpacker.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from StructPackerError for easy catching of any
structpacker-specific error.
"""

from __future__ import annotations


class StructPackerError(Exception):
    """Base exception for all structpacker errors."""

    pass


class FormatError(StructPackerError):
    """Raised when a format string cannot be interpreted."""

    pass


class UnknownFormatCharError(FormatError):
    """Raised when a format string contains an unrecognised character.

    Examples:
        - A type tag not in the registry (e.g. ``f`` or ``s``)
        - Whitespace while ``ignore_whitespace`` is disabled
    """

    def __init__(self, char: str, position: int, fmt: str) -> None:
        self.char = char
        self.position = position
        self.fmt = fmt
        super().__init__(f"Unknown format char {char!r} at position {position} in {fmt!r}")


class SchemaError(StructPackerError):
    """Raised when a record model cannot be mapped to output slots.

    Examples:
        - Field annotation is not int, bool or an annotated scalar type
        - Record declares no struct_format and none was given
    """

    pass


class EncodeError(StructPackerError):
    """Raised when packing values fails.

    Examples:
        - Fewer values than fields in the format
        - Values left over after the last field
        - Value that is not an integral scalar
    """

    pass


class InsufficientValuesError(EncodeError):
    """Raised when the format has more fields than supplied values."""

    pass


class ExcessValuesError(EncodeError):
    """Raised when values remain after every field has been packed."""

    pass


class UnsupportedValueTypeError(EncodeError):
    """Raised when a value cannot be coerced to any registered scalar type."""

    pass


class DecodeError(StructPackerError):
    """Raised when unpacking binary data fails.

    Examples:
        - Truncated data (insufficient bytes)
        - Output shape that does not match the format
        - Boolean slot receiving a numeric field
    """

    pass


class ArityMismatchError(DecodeError):
    """Raised when the declared output arity differs from the field count."""

    pass


class InsufficientOutputSlotsError(ArityMismatchError):
    """Raised when the format has more fields than declared output slots."""

    pass


class BufferUnderrunError(DecodeError):
    """Raised when the buffer ends before the next directive's bytes."""

    pass


class SlotTypeError(DecodeError):
    """Raised when a decoded value cannot be placed in its output slot."""

    pass


class ValueOutOfRangeError(StructPackerError):
    """Raised under strict narrowing when a value does not fit its target type."""

    pass
