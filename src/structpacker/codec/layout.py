"""Compiled format layouts.

A Layout is a format string parsed once, with the byte offset, width and
byte order of every field resolved. It exposes bound pack/unpack methods so
protocol code can keep one object per message type.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Any, List, Optional, Tuple

from ..config import DEFAULT_OPTIONS, CodecOptions
from .byteorder import ByteOrder
from .decoder import OutputShape, unpack, unpack_single
from .directives import (
    DEFAULT_BYTE_ORDER,
    Directive,
    Pad,
    SetEndianness,
    TypedField,
    parse,
)
from .encoder import pack
from .registry import ScalarType, ScalarValue
from .schema import SlotType


@dataclass(frozen=True)
class FieldLayout:
    """Position of one field within the packed buffer.

    Attributes:
        index: Value/output slot index
        tag: Format character
        scalar_type: Registered scalar type
        offset: Byte offset from the start of the buffer
        order: Byte order in effect for the field
    """

    index: int
    tag: str
    scalar_type: ScalarType
    offset: int
    order: ByteOrder

    @property
    def width(self) -> int:
        return self.scalar_type.width


class Layout:
    """A compiled format string.

    Example:
        >>> layout = Layout("<Hx>I")
        >>> layout.size
        7
        >>> [field.offset for field in layout.fields]
        [0, 3]
        >>> layout.unpack(layout.pack(7, 1))
        (7, 1)
    """

    def __init__(self, fmt: str, options: Optional[CodecOptions] = None) -> None:
        self._fmt = fmt
        self._options = options or DEFAULT_OPTIONS
        self._directives: Tuple[Directive, ...] = parse(fmt, self._options)
        self._fields, self._pad_count, self._size = self._resolve(self._directives)

    def __setattr__(self, name: str, value: Any) -> None:
        # Compiled layouts are shared through the cache
        if name.startswith("_") and name not in self.__dict__:
            super().__setattr__(name, value)
            return
        raise AttributeError(f"Layout is read-only, cannot set {name!r}")

    @staticmethod
    def _resolve(
        directives: Tuple[Directive, ...],
    ) -> Tuple[Tuple[FieldLayout, ...], int, int]:
        fields: List[FieldLayout] = []
        order = DEFAULT_BYTE_ORDER
        pad_count = 0
        offset = 0
        for directive in directives:
            if isinstance(directive, SetEndianness):
                order = directive.order
            elif isinstance(directive, Pad):
                pad_count += 1
                offset += 1
            elif isinstance(directive, TypedField):
                fields.append(
                    FieldLayout(
                        index=len(fields),
                        tag=directive.tag,
                        scalar_type=directive.entry.scalar_type,
                        offset=offset,
                        order=order,
                    )
                )
                offset += directive.width
        return tuple(fields), pad_count, offset

    @property
    def fmt(self) -> str:
        return self._fmt

    @property
    def options(self) -> CodecOptions:
        return self._options

    @property
    def directives(self) -> Tuple[Directive, ...]:
        return self._directives

    @property
    def fields(self) -> Tuple[FieldLayout, ...]:
        return self._fields

    @property
    def pad_count(self) -> int:
        return self._pad_count

    @property
    def size(self) -> int:
        """Packed size in bytes."""
        return self._size

    @property
    def field_count(self) -> int:
        return len(self._fields)

    def pack(self, *values: Any) -> bytes:
        """Pack values with this layout (see structpacker.pack)."""
        return pack(self.fmt, *values, options=self.options)

    def unpack(
        self, data: bytes | bytearray | memoryview, shape: OutputShape = None
    ) -> Tuple[ScalarValue, ...]:
        """Unpack data with this layout (see structpacker.unpack)."""
        return unpack(self.fmt, data, shape, options=self.options)

    def unpack_single(
        self, data: bytes | bytearray | memoryview, slot_type: SlotType = None
    ) -> ScalarValue:
        """Unpack exactly one value with this layout."""
        return unpack_single(self.fmt, data, slot_type, options=self.options)

    def __repr__(self) -> str:
        return f"Layout({self.fmt!r}, size={self.size}, fields={self.field_count})"


@lru_cache(maxsize=256)
def _compile_cached(fmt: str, options: CodecOptions) -> Layout:
    return Layout(fmt, options)


def compile_layout(fmt: str, options: Optional[CodecOptions] = None) -> Layout:
    """Return a cached Layout for a format string."""
    return _compile_cached(fmt, options or DEFAULT_OPTIONS)
