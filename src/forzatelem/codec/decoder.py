"""Schema-driven binary decoder for telemetry datagrams.

This module provides the decode() function that converts one raw datagram into
a mapping of field name to DecodedValue.
"""

from __future__ import annotations

import logging

from .schema import DASH_SCHEMA, TelemetrySchema
from .value import DecodedValue

logger = logging.getLogger(__name__)

DecodedPacket = dict[str, DecodedValue]


def decode(data: bytes, schema: TelemetrySchema = DASH_SCHEMA) -> DecodedPacket:
    """Decode a datagram into named, typed values.

    Fields are read in schema order from a running offset. Decoding never
    fails; anomalies are logged and the affected field is left out:

    - A field with an unrecognized tag is skipped and the offset stays put.
    - A field that does not fit in the remaining bytes is skipped and the
      offset stays put. Every later field is dropped as well, even one narrow
      enough to fit at the frozen offset, so one truncation point drops the
      rest of the datagram.

    Bytes beyond the end of the schema are ignored.

    Args:
        data: Raw datagram payload
        schema: Field layout to decode against

    Returns:
        Possibly partial mapping of field name to DecodedValue

    Examples:
        ```python
        from forzatelem import decode

        packet = decode(datagram)
        speed = packet["Speed"].as_float32()
        gear = packet["Gear"].as_uint8()
        ```
    """
    packet: DecodedPacket = {}
    offset = 0
    truncated = False

    for field in schema:
        wire_type = field.wire_type
        if wire_type is None:
            logger.debug("Skipping field %s with unknown type tag %r", field.name, field.type_tag)
            continue

        width = wire_type.width
        if truncated or offset + width > len(data):
            truncated = True
            logger.warning("insufficient data for field %s", field.name)
            continue

        raw = data[offset : offset + width]
        offset += width

        packet[field.name] = DecodedValue.from_bytes(wire_type, raw)

    return packet
