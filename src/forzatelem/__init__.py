"""forzatelem: Racing Simulator Telemetry Decoder

A Python library for decoding the fixed-layout binary telemetry stream a
racing simulator sends over UDP, one datagram per simulation tick.

Key Features:
- Schema-driven little-endian decoder (the layout is data, not code)
- Tagged decoded values with checked, non-coercing typed accessors
- Tolerant decoding: truncated datagrams yield partial results, never errors
- Loopback UDP listener and a terminal dashboard

Quick Start:
    >>> from forzatelem import decode, encode
    >>>
    >>> data = encode({"IsRaceOn": 1, "Speed": 10.0, "Gear": 3})
    >>> packet = decode(data)
    >>> packet["Gear"].as_uint8()
    3
"""

from __future__ import annotations

__version__ = "0.1.0"

from .codec import (
    DASH_SCHEMA,
    RESERVED_SENTINEL,
    DecodedPacket,
    DecodedValue,
    FieldDescriptor,
    TelemetrySchema,
    TypeTag,
    decode,
    encode,
    width_of,
)
from .exceptions import (
    BindError,
    ConversionError,
    EncodeError,
    ForzaTelemError,
    SchemaError,
)

__all__ = [
    # Core API
    "decode",
    "encode",
    "DecodedPacket",
    "DecodedValue",
    "RESERVED_SENTINEL",
    # Schema
    "DASH_SCHEMA",
    "FieldDescriptor",
    "TelemetrySchema",
    "TypeTag",
    "width_of",
    # Exceptions
    "ForzaTelemError",
    "SchemaError",
    "EncodeError",
    "ConversionError",
    "BindError",
    # Version
    "__version__",
]
