"""Format description CLI command."""

from __future__ import annotations

from ..codec.directives import Pad, SetEndianness, TypedField
from ..codec.layout import compile_layout


def describe_format(fmt: str) -> None:
    """Print a directive-by-directive breakdown of a format string.

    Args:
        fmt: Format string to describe

    Raises:
        UnknownFormatCharError: If the format string is invalid
    """
    layout = compile_layout(fmt)
    fields = iter(layout.fields)

    # Print header
    print("|" * 7, "structpacker: Fixed-width Binary Struct Codec", "|" * 7)
    print(f"Format: {fmt!r}")
    print(
        f"{layout.field_count} field{'s' if layout.field_count != 1 else ''}, "
        f"{layout.pad_count} pad byte{'s' if layout.pad_count != 1 else ''}."
    )
    print()

    print(f"{'-' * 24} Directives {'-' * 24}")
    offset = 0
    for directive in layout.directives:
        if isinstance(directive, SetEndianness):
            print(f"        {directive.order.value}  byte order -> {directive.order.name.lower()}")
        elif isinstance(directive, Pad):
            print(f"{offset:6d}  x  pad{'.' * 36}1 byte")
            offset += 1
        elif isinstance(directive, TypedField):
            field = next(fields)
            name = f"{field.index}. {field.scalar_type.name} ({field.order.name.lower()})"
            dots = "." * max(1, 39 - len(name))
            unit = "byte" if field.width == 1 else "bytes"
            print(f"{field.offset:6d}  {field.tag}  {name}{dots}{field.width} {unit}")
            offset += field.width
    print()

    # Summary section
    print(f"{'=' * 24} Summary {'=' * 24}")
    print(f"Packed size: {layout.size} bytes / {layout.size * 8} bits")
    print()
