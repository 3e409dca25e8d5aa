"""Format string interpreter.

This module scans a format string left to right and produces the directive
stream consumed by the pack and unpack engines:

    ``<``  SetEndianness(LITTLE)     ``>``  SetEndianness(BIG)
    ``x``  Pad                        tag    TypedField(registry entry)

Endianness changes are sticky until overridden; every format string starts
little-endian.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional, Tuple, Union

from ..config import DEFAULT_OPTIONS, CodecOptions
from ..exceptions import UnknownFormatCharError
from .byteorder import ByteOrder
from .registry import REGISTRY, TypeEntry

_logger = logging.getLogger(__name__)

PAD_CHAR = "x"
DEFAULT_BYTE_ORDER = ByteOrder.LITTLE


@dataclass(frozen=True)
class SetEndianness:
    """Switch the byte order of all following fields."""

    order: ByteOrder


@dataclass(frozen=True)
class Pad:
    """One zero byte on pack, one skipped byte on unpack."""

    pass


@dataclass(frozen=True)
class TypedField:
    """One scalar field; consumes a value slot or produces an output slot."""

    entry: TypeEntry

    @property
    def tag(self) -> str:
        return self.entry.tag

    @property
    def width(self) -> int:
        return self.entry.width


Directive = Union[SetEndianness, Pad, TypedField]

_ENDIANNESS = {order.value: SetEndianness(order) for order in ByteOrder}
_PAD = Pad()
_FIELDS = {tag: TypedField(entry) for tag, entry in REGISTRY.items()}


def parse(fmt: str, options: Optional[CodecOptions] = None) -> Tuple[Directive, ...]:
    """Parse a format string into its directive stream.

    Args:
        fmt: Format string, e.g. ``"<Hx?>I"``
        options: Codec options (whitespace handling)

    Returns:
        Directives in source order

    Raises:
        UnknownFormatCharError: If a character is neither a marker, a pad nor
            a registered type tag

    Example:
        >>> parse("<xB")
        (SetEndianness(order=<ByteOrder.LITTLE: '<'>), Pad(), TypedField(entry=...))
    """
    return _parse_cached(fmt, options or DEFAULT_OPTIONS)


@lru_cache(maxsize=256)
def _parse_cached(fmt: str, options: CodecOptions) -> Tuple[Directive, ...]:
    if not isinstance(fmt, str):
        raise TypeError(f"Format must be a str, got {type(fmt).__name__}")

    directives: list[Directive] = []
    for position, char in enumerate(fmt):
        if char in _ENDIANNESS:
            directives.append(_ENDIANNESS[char])
        elif char == PAD_CHAR:
            directives.append(_PAD)
        elif char in _FIELDS:
            directives.append(_FIELDS[char])
        elif options.ignore_whitespace and char.isspace() and char.isascii():
            continue
        else:
            raise UnknownFormatCharError(char, position, fmt)

    _logger.debug("parsed format %r into %d directives", fmt, len(directives))
    return tuple(directives)


def count_fields(directives: Tuple[Directive, ...]) -> int:
    """Return the number of TypedField directives."""
    return sum(1 for directive in directives if isinstance(directive, TypedField))
