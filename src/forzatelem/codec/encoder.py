"""Schema-driven binary encoder for telemetry datagrams.

This module provides the encode() function, the inverse of decode(). It packs
a mapping of field name to number into a datagram laid out per the schema.
"""

from __future__ import annotations

import struct
from typing import Any, Mapping

from ..exceptions import EncodeError
from .schema import DASH_SCHEMA, FieldDescriptor, TelemetrySchema
from .types import TypeTag

_INT_BOUNDS = {
    TypeTag.INT32: (-(2**31), 2**31 - 1),
    TypeTag.UINT32: (0, 2**32 - 1),
    TypeTag.UINT16: (0, 2**16 - 1),
    TypeTag.UINT8: (0, 2**8 - 1),
    TypeTag.INT8: (-(2**7), 2**7 - 1),
}


def encode(values: Mapping[str, Any], schema: TelemetrySchema = DASH_SCHEMA) -> bytes:
    """Encode field values into a datagram.

    Fields are written in schema order, little-endian, without padding. Fields
    missing from ``values`` are written as zero. The reserved block is written
    as 12 zero bytes unless a 12-byte ``bytes`` value is supplied. Fields with
    an unrecognized tag contribute no bytes.

    Args:
        values: Mapping of field name to int or float
        schema: Field layout to encode against

    Returns:
        Datagram of exactly ``schema.total_width()`` bytes

    Raises:
        EncodeError: If a value does not fit its field's type

    Examples:
        ```python
        from forzatelem import encode, decode

        data = encode({"IsRaceOn": 1, "Speed": 10.0, "Gear": 3})
        assert decode(data)["Gear"].as_uint8() == 3
        ```
    """
    parts: list[bytes] = []
    for field in schema:
        wire_type = field.wire_type
        if wire_type is None:
            continue
        parts.append(_encode_field(field, wire_type, values.get(field.name)))
    return b"".join(parts)


def _encode_field(field: FieldDescriptor, wire_type: TypeTag, value: Any) -> bytes:
    """Encode a single field value.

    Args:
        field: Descriptor of the field
        wire_type: Resolved type of the field
        value: Value to pack, or None for zero

    Returns:
        ``wire_type.width`` bytes

    Raises:
        EncodeError: If value is invalid
    """
    if wire_type is TypeTag.RESERVED12:
        if value is None:
            return bytes(wire_type.width)
        if not isinstance(value, (bytes, bytearray)) or len(value) != wire_type.width:
            raise EncodeError(
                f"Field {field.name}: reserved block must be {wire_type.width} bytes"
            )
        return bytes(value)

    fmt = wire_type.struct_format
    if fmt is None:
        raise EncodeError(f"Field {field.name}: no packing format for {wire_type.type_name}")

    if value is None:
        value = 0.0 if wire_type is TypeTag.FLOAT32 else 0

    # bool is an int subclass but never a valid telemetry value
    if isinstance(value, bool):
        raise EncodeError(f"Field {field.name}: expected number, got bool")

    if wire_type is TypeTag.FLOAT32:
        if not isinstance(value, (int, float)):
            raise EncodeError(
                f"Field {field.name}: expected float, got {type(value).__name__}"
            )
        try:
            return struct.pack(fmt, value)
        except OverflowError as e:
            raise EncodeError(
                f"Field {field.name}: value {value} out of Float32 range"
            ) from e

    if not isinstance(value, int):
        raise EncodeError(
            f"Field {field.name}: expected int, got {type(value).__name__}"
        )

    min_val, max_val = _INT_BOUNDS[wire_type]
    if value < min_val or value > max_val:
        raise EncodeError(
            f"Field {field.name}: value {value} out of bounds [{min_val}, {max_val}] "
            f"for {wire_type.type_name}"
        )
    return struct.pack(fmt, value)
