"""Unit tests for packing/unpacking."""

from __future__ import annotations

import pytest

from structpacker import (
    ArityMismatchError,
    BufferUnderrunError,
    CodecOptions,
    ExcessValuesError,
    InsufficientOutputSlotsError,
    InsufficientValuesError,
    Scalar,
    ScalarType,
    SchemaError,
    SlotTypeError,
    UnknownFormatCharError,
    UnsupportedValueTypeError,
    ValueOutOfRangeError,
    pack,
    unpack,
    unpack_single,
)

STRICT = CodecOptions(narrowing="strict")


class TestPack:
    """Test the pack engine."""

    def test_endianness(self) -> None:
        assert pack("<I", 1) == b"\x01\x00\x00\x00"
        assert pack(">I", 1) == b"\x00\x00\x00\x01"

    def test_default_is_little_endian(self) -> None:
        """No marker behaves like a leading '<'."""
        assert pack("I", 1) == pack("<I", 1)
        assert pack("hQ", -2, 7) == pack("<hQ", -2, 7)

    def test_padding(self) -> None:
        """Pads emit a zero byte and consume no value."""
        assert pack("<xI", 5) == b"\x00\x05\x00\x00\x00"
        assert pack("xx") == b"\x00\x00"

    def test_endianness_is_sticky(self, mixed_format: str, mixed_payload: bytes) -> None:
        """A marker applies to every following field until overridden."""
        assert pack(mixed_format, 0x0102, 7, True) == mixed_payload
        assert pack(">HH<H", 1, 2, 3) == b"\x00\x01\x00\x02\x03\x00"

    def test_signed_values(self) -> None:
        assert pack("<b", -1) == b"\xff"
        assert pack(">h", -2) == b"\xff\xfe"
        assert pack("<q", -1) == b"\xff" * 8

    def test_bool(self) -> None:
        """Booleans pack as exactly 0x01 or 0x00."""
        assert pack("??", True, False) == b"\x01\x00"
        assert pack("?", 42) == b"\x01"
        assert pack("?", 0) == b"\x00"

    def test_bool_into_integer_field(self) -> None:
        assert pack(">H", True) == b"\x00\x01"

    def test_output_length(self) -> None:
        """Length is one byte per pad plus the widths of all fields."""
        assert len(pack("<bxhxiqx?", 1, 2, 3, 4, True)) == 1 + 1 + 2 + 1 + 4 + 8 + 1 + 1

    def test_empty_format(self) -> None:
        assert pack("") == b""

    def test_wrap_narrowing(self) -> None:
        """Integers are truncated to the field width by default."""
        assert pack("<B", 300) == b"\x2c"
        assert pack("<H", -1) == b"\xff\xff"
        assert pack("<b", 255) == b"\xff"

    def test_strict_narrowing(self) -> None:
        with pytest.raises(ValueOutOfRangeError, match="Field 0"):
            pack("<B", 300, options=STRICT)

        assert pack("<B", 255, options=STRICT) == b"\xff"

    def test_scalar_values(self) -> None:
        assert pack("<HB", Scalar(ScalarType.UINT16, 513), Scalar(ScalarType.UINT8, 7)) == (
            b"\x01\x02\x07"
        )

    def test_scalar_type_must_match_field(self) -> None:
        """A tagged scalar is rejected by a field of a different type."""
        with pytest.raises(UnsupportedValueTypeError, match="Field 0"):
            pack("<B", Scalar(ScalarType.UINT16, 513))

        with pytest.raises(UnsupportedValueTypeError, match="Field 1"):
            pack("<B?", 1, Scalar(ScalarType.UINT8, 1))

    def test_insufficient_values(self) -> None:
        with pytest.raises(InsufficientValuesError):
            pack("<ii", 1)

    def test_excess_values(self) -> None:
        with pytest.raises(ExcessValuesError):
            pack("<i", 1, 2)

        with pytest.raises(ExcessValuesError):
            pack("x", 1)

    def test_unsupported_value_type(self) -> None:
        with pytest.raises(UnsupportedValueTypeError, match="Field 1"):
            pack("<ii", 1, 1.5)

        with pytest.raises(UnsupportedValueTypeError):
            pack("<?", "yes")

    def test_unknown_format_char(self) -> None:
        with pytest.raises(UnknownFormatCharError):
            pack("<f", 1)


class TestUnpack:
    """Test the unpack engine."""

    def test_multi_field(self) -> None:
        assert unpack("<i?", b"\x05\x00\x00\x00\x01", 2) == (5, True)

    def test_default_shape(self) -> None:
        """Without a shape there is one slot per field."""
        assert unpack("<i?", b"\x05\x00\x00\x00\x00") == (5, False)

    def test_endianness(self) -> None:
        assert unpack("<I", b"\x01\x00\x00\x00") == (1,)
        assert unpack(">I", b"\x00\x00\x00\x01") == (1,)
        assert unpack("I", b"\x01\x00\x00\x00") == unpack("<I", b"\x01\x00\x00\x00")

    def test_sticky_endianness(self, mixed_format: str, mixed_payload: bytes) -> None:
        assert unpack(mixed_format, mixed_payload) == (0x0102, 7, True)

    def test_padding_skips_bytes(self) -> None:
        """Pads consume one byte and produce no value."""
        assert unpack("<xI", b"\xaa\x05\x00\x00\x00", 1) == (5,)

    def test_bool_nonzero_is_true(self) -> None:
        assert unpack("???", b"\x00\x01\xfe") == (False, True, True)

    def test_trailing_bytes_ignored(self) -> None:
        assert unpack("<B", b"\x07\xff\xff") == (7,)

    def test_accepts_bytearray(self) -> None:
        assert unpack(">H", bytearray(b"\x01\x02")) == (0x0102,)

    def test_buffer_underrun(self) -> None:
        with pytest.raises(BufferUnderrunError, match="field 0 \('i'\) at offset 0"):
            unpack("<i", b"\x01\x02")

    def test_buffer_underrun_on_pad(self) -> None:
        """The cursor never moves past the end of the buffer."""
        with pytest.raises(BufferUnderrunError, match="offset 1"):
            unpack("<Bx", b"\x01", 1)

    def test_arity_mismatch_too_few_slots(self) -> None:
        with pytest.raises(ArityMismatchError):
            unpack("<ii", b"\x01\x00\x00\x00\x02\x00\x00\x00", 1)

        with pytest.raises(InsufficientOutputSlotsError):
            unpack("<ii", b"\x01\x00\x00\x00\x02\x00\x00\x00", [int])

    def test_arity_mismatch_too_many_slots(self) -> None:
        with pytest.raises(ArityMismatchError) as exc_info:
            unpack("<i", b"\x01\x00\x00\x00", 2)

        assert not isinstance(exc_info.value, InsufficientOutputSlotsError)

    def test_slot_checked_before_buffer(self) -> None:
        """A missing output slot is reported even when data is also short."""
        with pytest.raises(InsufficientOutputSlotsError):
            unpack("<ii", b"\x01\x00\x00\x00", 1)

    def test_typed_slots(self) -> None:
        """Numeric slots convert the decoded value to the declared type."""
        data = b"\xff\xff\x01"
        assert unpack("<H?", data, [ScalarType.INT16, bool]) == (-1, True)
        assert unpack("<H?", data, [ScalarType.UINT32, None]) == (0xFFFF, True)
        assert unpack("<H?", data, [int, ScalarType.BOOL]) == (0xFFFF, True)

    def test_bool_into_numeric_slot(self) -> None:
        value = unpack("?", b"\x01", [int])[0]
        assert value == 1
        assert type(value) is int

        assert unpack("?", b"\x01", [ScalarType.UINT8]) == (1,)

    def test_numeric_into_bool_slot(self) -> None:
        """Boolean slots only accept '?' fields."""
        with pytest.raises(SlotTypeError):
            unpack("<B", b"\x01", [bool])

        with pytest.raises(SlotTypeError):
            unpack("<B", b"\x01", [ScalarType.BOOL])

    def test_narrowing_slots(self) -> None:
        data = b"\x2c\x01\x00\x00"  # 300
        assert unpack("<I", data, [ScalarType.UINT8]) == (44,)

        with pytest.raises(ValueOutOfRangeError, match="Slot 0"):
            unpack("<I", data, [ScalarType.UINT8], options=STRICT)

    def test_invalid_shape(self) -> None:
        with pytest.raises(SchemaError):
            unpack("<B", b"\x01", [float])

        with pytest.raises(SchemaError):
            unpack("<B", b"\x01", -1)


class TestUnpackSingle:
    """Test the single-value convenience."""

    def test_single(self) -> None:
        assert unpack_single(">H", b"\x01\x02") == 258
        assert unpack_single("x?", b"\x00\x01") is True

    def test_single_typed(self) -> None:
        assert unpack_single("<H", b"\xff\xff", ScalarType.INT16) == -1

    def test_single_requires_one_field(self) -> None:
        with pytest.raises(ArityMismatchError):
            unpack_single("<BB", b"\x01\x02")

        with pytest.raises(ArityMismatchError):
            unpack_single("x", b"\x00")

    def test_single_underrun(self) -> None:
        with pytest.raises(BufferUnderrunError):
            unpack_single("<I", b"\x01")


class TestCodecOptions:
    """Test option validation."""

    def test_defaults(self) -> None:
        options = CodecOptions()
        assert options.narrowing == "wrap"
        assert options.ignore_whitespace is True

    def test_invalid_narrowing(self) -> None:
        with pytest.raises(ValueError, match="narrowing"):
            CodecOptions(narrowing="saturate")  # type: ignore[arg-type]

    def test_invalid_ignore_whitespace(self) -> None:
        with pytest.raises(ValueError, match="ignore_whitespace"):
            CodecOptions(ignore_whitespace="yes")  # type: ignore[arg-type]
