"""Primitive wire types of the telemetry stream.

Every schema field carries one of these tags. The width and the ``struct``
format of a tag are pure functions of the tag itself.
"""

from __future__ import annotations

import enum


class TypeTag(str, enum.Enum):
    """Closed set of primitive wire types, keyed by their schema tag."""

    INT32 = "s32"
    UINT32 = "u32"
    FLOAT32 = "f32"
    UINT16 = "u16"
    UINT8 = "u8"
    INT8 = "s8"
    RESERVED12 = "hzn"

    @property
    def width(self) -> int:
        """Size in bytes of this type on the wire."""
        return _WIDTHS[self]

    @property
    def struct_format(self) -> str | None:
        """Little-endian ``struct`` format, or None for the opaque block."""
        return _FORMATS.get(self)

    @property
    def type_name(self) -> str:
        """Human-readable name used in diagnostics (e.g. ``UInt16``)."""
        return _NAMES[self]

    @classmethod
    def lookup(cls, tag: str) -> TypeTag | None:
        """Return the TypeTag for a raw tag string, or None if unrecognized."""
        try:
            return cls(tag)
        except ValueError:
            return None


_WIDTHS = {
    TypeTag.INT32: 4,
    TypeTag.UINT32: 4,
    TypeTag.FLOAT32: 4,
    TypeTag.UINT16: 2,
    TypeTag.UINT8: 1,
    TypeTag.INT8: 1,
    TypeTag.RESERVED12: 12,
}

_FORMATS = {
    TypeTag.INT32: "<i",
    TypeTag.UINT32: "<I",
    TypeTag.FLOAT32: "<f",
    TypeTag.UINT16: "<H",
    TypeTag.UINT8: "<B",
    TypeTag.INT8: "<b",
}

_NAMES = {
    TypeTag.INT32: "Int32",
    TypeTag.UINT32: "UInt32",
    TypeTag.FLOAT32: "Float32",
    TypeTag.UINT16: "UInt16",
    TypeTag.UINT8: "UInt8",
    TypeTag.INT8: "Int8",
    TypeTag.RESERVED12: "Reserved12",
}


def width_of(tag: str) -> int | None:
    """Return the width in bytes for a raw tag string.

    Args:
        tag: Schema tag such as ``"f32"``

    Returns:
        Width in bytes, or None if the tag is not a known wire type
    """
    type_tag = TypeTag.lookup(tag)
    if type_tag is None:
        return None
    return type_tag.width
