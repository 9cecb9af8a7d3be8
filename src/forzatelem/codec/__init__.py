"""Binary codec for forzatelem.

This module provides the field schema, the decoded value type, and the
schema-driven decoder and encoder for telemetry datagrams.
"""

from __future__ import annotations

from .decoder import DecodedPacket, decode
from .encoder import encode
from .schema import DASH_SCHEMA, FieldDescriptor, TelemetrySchema
from .types import TypeTag, width_of
from .value import RESERVED_SENTINEL, DecodedValue

__all__ = [
    "decode",
    "encode",
    "DecodedPacket",
    "DecodedValue",
    "RESERVED_SENTINEL",
    "DASH_SCHEMA",
    "FieldDescriptor",
    "TelemetrySchema",
    "TypeTag",
    "width_of",
]
