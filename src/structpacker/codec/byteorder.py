"""Byte-order primitives and byte-level buffers.

This module provides platform-independent endianness conversion and the
append-only writer / cursor-based reader used by the pack and unpack engines.
Scalar encoders always produce little-endian bytes (the canonical order); the
engines convert to the wire order with ``to_wire_order`` and back with
``from_wire_order``. Nothing here depends on the host's native byte order.
"""

from __future__ import annotations

import enum


class ByteOrder(enum.Enum):
    """Wire byte order of a field, keyed by its format marker."""

    LITTLE = "<"
    BIG = ">"


CANONICAL_ORDER = ByteOrder.LITTLE


def to_little_endian(canonical: bytes) -> bytes:
    """Convert canonical bytes to little-endian (the identity)."""
    return bytes(canonical)


def to_big_endian(canonical: bytes) -> bytes:
    """Convert canonical bytes to big-endian by reversing them."""
    return bytes(reversed(canonical))


def to_wire_order(canonical: bytes, order: ByteOrder) -> bytes:
    """Convert canonical bytes to the given wire order.

    Args:
        canonical: Little-endian encoded scalar
        order: Target byte order

    Returns:
        Bytes in wire order
    """
    if order is ByteOrder.BIG:
        return to_big_endian(canonical)
    return to_little_endian(canonical)


def from_wire_order(raw: bytes, order: ByteOrder) -> bytes:
    """Convert bytes read in the given wire order back to canonical order."""
    # Reversal is its own inverse
    return to_wire_order(raw, order)


class ByteWriter:
    """Append-only byte buffer.

    Example:
        >>> writer = ByteWriter()
        >>> writer.write_pad()
        >>> writer.write_bytes(b"\\x05\\x00")
        >>> writer.to_bytes()
        b'\\x00\\x05\\x00'
    """

    def __init__(self) -> None:
        self._buffer = bytearray()

    def write_byte(self, value: int) -> None:
        """Write a single byte.

        Args:
            value: Byte value (0-255)

        Raises:
            ValueError: If value is not a byte
        """
        if value < 0 or value > 0xFF:
            raise ValueError(f"Byte value must be 0-255, got {value}")
        self._buffer.append(value)

    def write_pad(self) -> None:
        """Write one zero-valued pad byte."""
        self.write_byte(0x00)

    def write_bytes(self, data: bytes) -> None:
        """Write raw bytes."""
        self._buffer.extend(data)

    def length(self) -> int:
        """Return the number of bytes written."""
        return len(self._buffer)

    def to_bytes(self) -> bytes:
        """Return the written bytes."""
        return bytes(self._buffer)


class ByteReader:
    """Reads bytes from a buffer through a monotonically advancing cursor.

    The cursor never moves past the end of the buffer: a read or skip that
    would do so raises IndexError and leaves the cursor untouched.

    Example:
        >>> reader = ByteReader(b"\\x00\\x05\\x00")
        >>> reader.skip(1)
        >>> reader.read_bytes(2)
        b'\\x05\\x00'
    """

    def __init__(self, data: bytes | bytearray | memoryview) -> None:
        self._data = bytes(data)
        self._position = 0

    def read_bytes(self, num_bytes: int) -> bytes:
        """Read raw bytes and advance the cursor.

        Args:
            num_bytes: Number of bytes to read

        Returns:
            Bytes read from buffer

        Raises:
            IndexError: If not enough bytes are available
        """
        self._check_available(num_bytes)
        start = self._position
        self._position += num_bytes
        return self._data[start : self._position]

    def skip(self, num_bytes: int) -> None:
        """Advance the cursor without returning the bytes.

        Raises:
            IndexError: If not enough bytes are available
        """
        self._check_available(num_bytes)
        self._position += num_bytes

    def bytes_remaining(self) -> int:
        """Return the number of unread bytes."""
        return len(self._data) - self._position

    def position(self) -> int:
        """Return the current read position in bytes."""
        return self._position

    def _check_available(self, num_bytes: int) -> None:
        if num_bytes < 0:
            raise ValueError(f"num_bytes must be >= 0, got {num_bytes}")
        if self._position + num_bytes > len(self._data):
            raise IndexError(
                f"Not enough bytes at offset {self._position}: "
                f"need {num_bytes}, have {self.bytes_remaining()}"
            )
