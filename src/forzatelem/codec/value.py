"""Decoded telemetry values.

A DecodedValue is a tagged union: it holds exactly one primitive together with
the wire type it was decoded as. Callers read it back through a typed accessor
that refuses to coerce between types.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass

from ..exceptions import ConversionError
from .types import TypeTag


@dataclass(frozen=True)
class DecodedValue:
    """One decoded primitive.

    Attributes:
        tag: Wire type the value was decoded as
        value: Python int for integer tags, float for Float32

    Example:
        >>> DecodedValue(TypeTag.UINT8, 3).as_uint8()
        3
        >>> DecodedValue(TypeTag.UINT8, 3).as_float32()
        Traceback (most recent call last):
        ...
        forzatelem.exceptions.ConversionError: Cannot convert UInt8 value to Float32
    """

    tag: TypeTag
    value: int | float

    @classmethod
    def from_bytes(cls, tag: TypeTag, raw: bytes) -> DecodedValue:
        """Unpack one little-endian slice.

        The reserved block is never interpreted and always yields
        ``RESERVED_SENTINEL``.

        Args:
            tag: Wire type of the slice
            raw: Exactly ``tag.width`` bytes

        Returns:
            DecodedValue for the slice
        """
        fmt = tag.struct_format
        if fmt is None:
            return RESERVED_SENTINEL
        (value,) = struct.unpack(fmt, raw)
        return cls(tag, value)

    def width(self) -> int:
        """Size in bytes of this value's declared type."""
        return self.tag.width

    def as_type(self, tag: TypeTag) -> int | float:
        """Return the held primitive if it was decoded as ``tag``.

        Raises:
            ConversionError: If the value holds a different type
        """
        if self.tag is not tag:
            raise ConversionError(tag.type_name, self.tag.type_name)
        return self.value

    def as_int32(self) -> int:
        return int(self.as_type(TypeTag.INT32))

    def as_uint32(self) -> int:
        return int(self.as_type(TypeTag.UINT32))

    def as_float32(self) -> float:
        return float(self.as_type(TypeTag.FLOAT32))

    def as_uint16(self) -> int:
        return int(self.as_type(TypeTag.UINT16))

    def as_uint8(self) -> int:
        return int(self.as_type(TypeTag.UINT8))

    def as_int8(self) -> int:
        return int(self.as_type(TypeTag.INT8))


# Stored in place of the reserved block's bytes
RESERVED_SENTINEL = DecodedValue(TypeTag.INT32, 0)
