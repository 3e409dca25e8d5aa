#!/usr/bin/env python3
"""Basic usage example for structpacker.

This example demonstrates:
1. Packing values with a format string
2. Unpacking with a declared output shape
3. Defining a fixed-layout record with pydantic
4. Calculating packed sizes
"""

from __future__ import annotations

from typing import ClassVar

from structpacker import (
    BaseRecord,
    ScalarType,
    UInt8,
    UInt16,
    calcsize,
    field_offsets,
    pack,
    pack_record,
    unpack,
    unpack_record,
)


# Define a record class
class SetBrightness(BaseRecord):
    """Lighting controller command.

    Little-endian header, one reserved byte, then a big-endian value.
    """

    struct_format: ClassVar[str] = "<BBx>H?"

    command_id: UInt8
    channel: UInt8
    level: UInt16
    persist: bool


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("structpacker Basic Usage Example")
    print("=" * 60)
    print()

    # Pack plain values
    print("1. Packing values...")
    data = pack("<xI?", 5, True)
    print(f"   pack('<xI?', 5, True) = {data.hex()}")
    print()

    # Unpack with a declared shape
    print("2. Unpacking with a declared shape...")
    values = unpack("<xI?", data, [ScalarType.UINT16, bool])
    print(f"   unpack(...) = {values}")
    print()

    # Analyze sizes
    print("3. Analyzing the record layout...")
    fmt = SetBrightness.struct_format
    print(f"   format: {fmt}")
    print(f"   offsets: {field_offsets(fmt)}")
    print(f"   size: {calcsize(fmt)} bytes")
    print()

    # Records
    print("4. Packing a record...")
    command = SetBrightness(command_id=0x12, channel=1, level=800, persist=True)
    frame = pack_record(command)
    print(f"   {command!r}")
    print(f"   frame: {frame.hex()}")

    decoded = unpack_record(SetBrightness, frame)
    assert decoded == command
    print("   ✓ Record round-trip verified")
    print()


if __name__ == "__main__":
    main()
