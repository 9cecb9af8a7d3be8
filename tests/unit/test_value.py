"""Unit tests for decoded values and typed accessors."""

from __future__ import annotations

import itertools
import struct
from typing import Callable

import pytest

from forzatelem import RESERVED_SENTINEL, ConversionError, DecodedValue, TypeTag

ACCESSORS: dict[TypeTag, Callable[[DecodedValue], int | float]] = {
    TypeTag.INT32: DecodedValue.as_int32,
    TypeTag.UINT32: DecodedValue.as_uint32,
    TypeTag.FLOAT32: DecodedValue.as_float32,
    TypeTag.UINT16: DecodedValue.as_uint16,
    TypeTag.UINT8: DecodedValue.as_uint8,
    TypeTag.INT8: DecodedValue.as_int8,
}


class TestAccessors:
    """Test checked accessors."""

    @pytest.mark.parametrize("tag", list(ACCESSORS))
    def test_matching_accessor(self, tag: TypeTag) -> None:
        """Test the accessor for the held type returns the value."""
        value = DecodedValue(tag, 1.5 if tag is TypeTag.FLOAT32 else 7)
        assert ACCESSORS[tag](value) == value.value

    @pytest.mark.parametrize("held,requested", list(itertools.permutations(ACCESSORS, 2)))
    def test_mismatched_accessor_raises(self, held: TypeTag, requested: TypeTag) -> None:
        """Test every cross-type read fails instead of coercing."""
        value = DecodedValue(held, 1)
        with pytest.raises(ConversionError) as exc_info:
            ACCESSORS[requested](value)
        assert exc_info.value.requested == requested.type_name
        assert exc_info.value.actual == held.type_name

    def test_int_is_not_read_as_float(self) -> None:
        value = DecodedValue(TypeTag.INT32, 1)
        with pytest.raises(ConversionError, match="Int32 value to Float32"):
            value.as_float32()

    def test_generic_accessor(self) -> None:
        value = DecodedValue(TypeTag.UINT16, 65535)
        assert value.as_type(TypeTag.UINT16) == 65535
        with pytest.raises(ConversionError):
            value.as_type(TypeTag.UINT32)

    def test_float_accessor_returns_float(self) -> None:
        assert isinstance(DecodedValue(TypeTag.FLOAT32, 2.0).as_float32(), float)


class TestWidth:
    """Test value widths."""

    @pytest.mark.parametrize(
        "tag,width",
        [
            (TypeTag.INT32, 4),
            (TypeTag.UINT32, 4),
            (TypeTag.FLOAT32, 4),
            (TypeTag.UINT16, 2),
            (TypeTag.UINT8, 1),
            (TypeTag.INT8, 1),
        ],
    )
    def test_width(self, tag: TypeTag, width: int) -> None:
        assert DecodedValue(tag, 0).width() == width


class TestFromBytes:
    """Test unpacking single slices."""

    def test_little_endian_int32(self) -> None:
        value = DecodedValue.from_bytes(TypeTag.INT32, b"\x01\x00\x00\x00")
        assert value == DecodedValue(TypeTag.INT32, 1)

    def test_negative_int32(self) -> None:
        value = DecodedValue.from_bytes(TypeTag.INT32, b"\xff\xff\xff\xff")
        assert value.as_int32() == -1

    def test_uint32_is_unsigned(self) -> None:
        value = DecodedValue.from_bytes(TypeTag.UINT32, b"\xff\xff\xff\xff")
        assert value.as_uint32() == 2**32 - 1

    def test_float32(self) -> None:
        value = DecodedValue.from_bytes(TypeTag.FLOAT32, struct.pack("<f", 10.0))
        assert value.as_float32() == 10.0

    def test_uint16(self) -> None:
        assert DecodedValue.from_bytes(TypeTag.UINT16, b"\x34\x12").as_uint16() == 0x1234

    def test_uint8_and_int8(self) -> None:
        assert DecodedValue.from_bytes(TypeTag.UINT8, b"\xfe").as_uint8() == 254
        assert DecodedValue.from_bytes(TypeTag.INT8, b"\xfe").as_int8() == -2

    def test_reserved_block_yields_sentinel(self) -> None:
        """Test the reserved block is discarded, not exposed."""
        value = DecodedValue.from_bytes(TypeTag.RESERVED12, b"\xaa" * 12)
        assert value is RESERVED_SENTINEL
        assert value == DecodedValue(TypeTag.INT32, 0)

    def test_value_is_frozen(self) -> None:
        value = DecodedValue(TypeTag.UINT8, 1)
        with pytest.raises(AttributeError):
            value.value = 2  # type: ignore[misc]
