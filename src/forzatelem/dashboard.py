"""Terminal dashboard for decoded telemetry.

Reads the race-on flag, speed and gear out of a decoded packet and renders
them as three lines. A missing or mistyped field never stops the dashboard: it
is logged and shown with a default value.
"""

from __future__ import annotations

import logging
from typing import Callable, TypeVar

from pydantic import BaseModel, ConfigDict

from .codec.decoder import DecodedPacket
from .codec.value import DecodedValue
from .exceptions import ConversionError

logger = logging.getLogger(__name__)

T = TypeVar("T", int, float)

# Speed arrives in meters per second
MPS_TO_KMH = 3.6

CLEAR_SCREEN = "\x1b[2J"

RACE_ON_FIELD = "IsRaceOn"
SPEED_FIELD = "Speed"
GEAR_FIELD = "Gear"


def read_field(
    packet: DecodedPacket,
    name: str,
    accessor: Callable[[DecodedValue], T],
    default: T,
) -> T:
    """Read one field through a typed accessor, falling back to ``default``.

    Args:
        packet: Decoded packet
        name: Field name
        accessor: Typed accessor, e.g. ``DecodedValue.as_float32``
        default: Value returned when the field is missing or mistyped

    Returns:
        The converted value, or ``default``
    """
    value = packet.get(name)
    if value is None:
        logger.warning("Field %s missing from packet, using %r", name, default)
        return default
    try:
        return accessor(value)
    except ConversionError as e:
        logger.warning("Field %s: %s, using %r", name, e, default)
        return default


class DashboardReading(BaseModel):
    """The values shown on the dashboard for one datagram."""

    model_config = ConfigDict(frozen=True)

    is_race_on: int = 0
    speed_kmh: float = 0.0
    gear: int = 0

    @classmethod
    def from_packet(cls, packet: DecodedPacket) -> DashboardReading:
        speed = read_field(packet, SPEED_FIELD, DecodedValue.as_float32, 0.0)
        return cls(
            is_race_on=read_field(packet, RACE_ON_FIELD, DecodedValue.as_int32, 0),
            speed_kmh=speed * MPS_TO_KMH,
            gear=read_field(packet, GEAR_FIELD, DecodedValue.as_uint8, 0),
        )


def render(reading: DashboardReading) -> str:
    """Format a reading as a clear-screen escape followed by three lines."""
    return (
        f"{CLEAR_SCREEN}"
        f"IsRaceOn: {reading.is_race_on}\n"
        f"Speed: {reading.speed_kmh}\n"
        f"Gear: {reading.gear}"
    )
