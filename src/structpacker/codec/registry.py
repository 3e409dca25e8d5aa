"""Fixed-width scalar type registry.

This module maps single-character type tags to their scalar type, byte width
and canonical (little-endian) encode/decode functions, and provides the
numeric coercion rules shared by the pack and unpack engines.
"""

from __future__ import annotations

import enum
import operator
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Literal, Mapping, Union

from ..config import NarrowingPolicy
from ..exceptions import UnsupportedValueTypeError, ValueOutOfRangeError
from .byteorder import CANONICAL_ORDER, ByteOrder

ScalarValue = Union[int, bool]

_INT_BYTEORDER: Mapping[ByteOrder, Literal["little", "big"]] = {
    ByteOrder.LITTLE: "little",
    ByteOrder.BIG: "big",
}


class ScalarKind(enum.Enum):
    """Semantic kind of a registered scalar."""

    SIGNED_INT = "signed-int"
    UNSIGNED_INT = "unsigned-int"
    BOOL = "bool"


class ScalarType(enum.Enum):
    """The nine supported scalar types, valued by (kind, width in bytes)."""

    INT8 = (ScalarKind.SIGNED_INT, 1)
    UINT8 = (ScalarKind.UNSIGNED_INT, 1)
    INT16 = (ScalarKind.SIGNED_INT, 2)
    UINT16 = (ScalarKind.UNSIGNED_INT, 2)
    INT32 = (ScalarKind.SIGNED_INT, 4)
    UINT32 = (ScalarKind.UNSIGNED_INT, 4)
    INT64 = (ScalarKind.SIGNED_INT, 8)
    UINT64 = (ScalarKind.UNSIGNED_INT, 8)
    BOOL = (ScalarKind.BOOL, 1)

    @property
    def kind(self) -> ScalarKind:
        return self.value[0]

    @property
    def width(self) -> int:
        return self.value[1]

    @property
    def bits(self) -> int:
        return self.width * 8

    @property
    def signed(self) -> bool:
        return self.kind is ScalarKind.SIGNED_INT

    @property
    def min_value(self) -> int:
        """Smallest representable value (0 for BOOL)."""
        if self.signed:
            return -(1 << (self.bits - 1))
        return 0

    @property
    def max_value(self) -> int:
        """Largest representable value (1 for BOOL)."""
        if self.kind is ScalarKind.BOOL:
            return 1
        if self.signed:
            return (1 << (self.bits - 1)) - 1
        return (1 << self.bits) - 1


@dataclass(frozen=True)
class TypeEntry:
    """Registry entry for one type tag.

    Attributes:
        tag: Format character selecting this entry
        scalar_type: Semantic scalar type
        encode: Converts an in-range value to canonical bytes
        decode: Converts canonical bytes to a value
    """

    tag: str
    scalar_type: ScalarType
    encode: Callable[[Any], bytes]
    decode: Callable[[bytes], ScalarValue]

    @property
    def width(self) -> int:
        return self.scalar_type.width

    @property
    def kind(self) -> ScalarKind:
        return self.scalar_type.kind


def _int_codec(
    width: int, signed: bool
) -> tuple[Callable[[int], bytes], Callable[[bytes], int]]:
    byteorder = _INT_BYTEORDER[CANONICAL_ORDER]

    def encode(value: int) -> bytes:
        return value.to_bytes(width, byteorder, signed=signed)

    def decode(raw: bytes) -> int:
        return int.from_bytes(raw, byteorder, signed=signed)

    return encode, decode


def _encode_bool(value: bool) -> bytes:
    return b"\x01" if value else b"\x00"


def _decode_bool(raw: bytes) -> bool:
    # Any nonzero byte decodes as True
    return raw[0] != 0


def _int_entry(tag: str, scalar_type: ScalarType) -> TypeEntry:
    encode, decode = _int_codec(scalar_type.width, scalar_type.signed)
    return TypeEntry(tag=tag, scalar_type=scalar_type, encode=encode, decode=decode)


REGISTRY: Mapping[str, TypeEntry] = MappingProxyType(
    {
        "b": _int_entry("b", ScalarType.INT8),
        "B": _int_entry("B", ScalarType.UINT8),
        "h": _int_entry("h", ScalarType.INT16),
        "H": _int_entry("H", ScalarType.UINT16),
        "i": _int_entry("i", ScalarType.INT32),
        "I": _int_entry("I", ScalarType.UINT32),
        "q": _int_entry("q", ScalarType.INT64),
        "Q": _int_entry("Q", ScalarType.UINT64),
        "?": TypeEntry(
            tag="?", scalar_type=ScalarType.BOOL, encode=_encode_bool, decode=_decode_bool
        ),
    }
)


def lookup(tag: str) -> TypeEntry:
    """Return the registry entry for a type tag.

    Raises:
        KeyError: If the tag is not registered
    """
    return REGISTRY[tag]


def is_registered(tag: str) -> bool:
    return tag in REGISTRY


@dataclass(frozen=True)
class Scalar:
    """An explicitly typed scalar value.

    Use this to state the intended type of a value at the call site instead of
    relying on the format string alone. The value must fit its type.

    Example:
        >>> pack("<HB", Scalar(ScalarType.UINT16, 513), Scalar(ScalarType.UINT8, 7))
        b'\\x01\\x02\\x07'
    """

    type: ScalarType
    value: ScalarValue

    def __post_init__(self) -> None:
        if self.type is ScalarType.BOOL:
            if not isinstance(self.value, bool):
                raise UnsupportedValueTypeError(
                    f"BOOL scalar requires a bool value, got {type(self.value).__name__}"
                )
            return

        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise UnsupportedValueTypeError(
                f"{self.type.name} scalar requires an int value, got {type(self.value).__name__}"
            )
        if not self.type.min_value <= self.value <= self.type.max_value:
            raise ValueOutOfRangeError(
                f"Value {self.value} out of range for {self.type.name} "
                f"[{self.type.min_value}, {self.type.max_value}]"
            )


def narrow(value: int, scalar_type: ScalarType, narrowing: NarrowingPolicy = "wrap") -> int:
    """Fit an integer into the representable range of an integer scalar type.

    Args:
        value: Integer to convert
        scalar_type: Target integer type
        narrowing: ``"wrap"`` truncates to the target width (two's complement),
            ``"strict"`` raises for out-of-range values

    Returns:
        Value within the target range

    Raises:
        ValueOutOfRangeError: Under strict narrowing, if value does not fit
    """
    if scalar_type.min_value <= value <= scalar_type.max_value:
        return value

    if narrowing == "strict":
        raise ValueOutOfRangeError(
            f"Value {value} out of range for {scalar_type.name} "
            f"[{scalar_type.min_value}, {scalar_type.max_value}]"
        )

    wrapped = value & ((1 << scalar_type.bits) - 1)
    if scalar_type.signed and wrapped > scalar_type.max_value:
        wrapped -= 1 << scalar_type.bits
    return wrapped


def coerce(value: Any, scalar_type: ScalarType, narrowing: NarrowingPolicy = "wrap") -> ScalarValue:
    """Coerce a caller-supplied value to a registered scalar type.

    Integral values (int, bool, or anything implementing __index__) are
    accepted. A BOOL target takes the truthiness of the value; integer
    targets are narrowed with ``narrow``. A Scalar is accepted only when its
    declared type is the target type, and is then used unchanged.

    Raises:
        UnsupportedValueTypeError: If value is not an integral scalar, or is a
            Scalar declared with a different type
        ValueOutOfRangeError: Under strict narrowing, if value does not fit
    """
    if isinstance(value, Scalar):
        if value.type is not scalar_type:
            raise UnsupportedValueTypeError(
                f"{value.type.name} scalar does not match {scalar_type.name} field"
            )
        return value.value

    if isinstance(value, bool):
        integral = int(value)
    else:
        try:
            integral = operator.index(value)
        except TypeError as err:
            raise UnsupportedValueTypeError(
                f"Cannot coerce {type(value).__name__} value {value!r} to {scalar_type.name}"
            ) from err

    if scalar_type is ScalarType.BOOL:
        return integral != 0

    return narrow(integral, scalar_type, narrowing)
