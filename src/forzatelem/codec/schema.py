"""Field schema for the telemetry datagram.

This module declares the byte layout of a datagram as data: an ordered list of
(field name, type tag) pairs. The decoder and encoder walk a schema instead of
hardcoding offsets, so a layout can be replaced or extended without touching
either of them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Tuple

from ..exceptions import SchemaError
from .types import TypeTag, width_of


@dataclass(frozen=True)
class FieldDescriptor:
    """Schema information for a single field.

    The tag is kept as the raw string so that a schema may carry a tag the
    package does not know about; such a field has no width and is skipped by
    the decoder.

    Attributes:
        name: Field name (unique within a schema)
        type_tag: Raw type tag, e.g. ``"f32"``
    """

    name: str
    type_tag: str

    @property
    def width(self) -> int | None:
        """Width in bytes, or None for an unrecognized tag."""
        return width_of(self.type_tag)

    @property
    def wire_type(self) -> TypeTag | None:
        """Resolved TypeTag, or None for an unrecognized tag."""
        return TypeTag.lookup(self.type_tag)


class TelemetrySchema:
    """Ordered, immutable sequence of field descriptors.

    The byte offset of descriptor *i* is the sum of the widths of descriptors
    ``0..i-1``; fields are packed without padding.

    Example:
        >>> schema = TelemetrySchema.from_pairs([("IsRaceOn", "s32"), ("Speed", "f32")])
        >>> schema.offset_of("Speed")
        4
    """

    def __init__(self, fields: Iterable[FieldDescriptor]) -> None:
        self._fields: Tuple[FieldDescriptor, ...] = tuple(fields)

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[str, str]]) -> TelemetrySchema:
        """Create a schema from ``(name, tag)`` pairs.

        Args:
            pairs: Field names and raw type tags in wire order

        Returns:
            TelemetrySchema instance

        Raises:
            SchemaError: If a pair is not a (str, str) tuple
        """
        fields = []
        for pair in pairs:
            try:
                name, tag = pair
            except (TypeError, ValueError) as e:
                raise SchemaError(f"Invalid schema entry {pair!r}: {e}") from e
            if not isinstance(name, str) or not isinstance(tag, str):
                raise SchemaError(f"Invalid schema entry {pair!r}: expected (str, str)")
            fields.append(FieldDescriptor(name, tag))
        return cls(fields)

    @property
    def fields(self) -> Tuple[FieldDescriptor, ...]:
        return self._fields

    def __iter__(self) -> Iterator[FieldDescriptor]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __getitem__(self, index: int) -> FieldDescriptor:
        return self._fields[index]

    def __repr__(self) -> str:
        return f"TelemetrySchema({len(self._fields)} fields, {self.total_width()} bytes)"

    def names(self) -> list[str]:
        """Field names in wire order."""
        return [field.name for field in self._fields]

    def offsets(self) -> dict[str, int]:
        """Cumulative byte offset of every field with a recognized tag.

        Returns:
            Mapping of field name to byte offset from the start of the datagram
        """
        result: dict[str, int] = {}
        offset = 0
        for field in self._fields:
            width = field.width
            if width is None:
                continue
            result[field.name] = offset
            offset += width
        return result

    def offset_of(self, name: str) -> int:
        """Byte offset of a named field.

        Raises:
            SchemaError: If the schema has no recognized field with that name
        """
        offsets = self.offsets()
        if name not in offsets:
            raise SchemaError(f"Field {name} is not part of the schema")
        return offsets[name]

    def total_width(self) -> int:
        """Total bytes covered by the schema (unknown tags contribute nothing)."""
        return sum(field.width or 0 for field in self._fields)


DASH_SCHEMA = TelemetrySchema.from_pairs(
    [
        ("IsRaceOn", "s32"),
        ("TimestampMS", "u32"),
        # Engine
        ("EngineMaxRpm", "f32"),
        ("EngineIdleRpm", "f32"),
        ("CurrentEngineRpm", "f32"),
        # Motion, car-local space
        ("AccelerationX", "f32"),
        ("AccelerationY", "f32"),
        ("AccelerationZ", "f32"),
        ("VelocityX", "f32"),
        ("VelocityY", "f32"),
        ("VelocityZ", "f32"),
        ("AngularVelocityX", "f32"),
        ("AngularVelocityY", "f32"),
        ("AngularVelocityZ", "f32"),
        ("Yaw", "f32"),
        ("Pitch", "f32"),
        ("Roll", "f32"),
        # Per wheel
        ("NormalizedSuspensionTravelFrontLeft", "f32"),
        ("NormalizedSuspensionTravelFrontRight", "f32"),
        ("NormalizedSuspensionTravelRearLeft", "f32"),
        ("NormalizedSuspensionTravelRearRight", "f32"),
        ("TireSlipRatioFrontLeft", "f32"),
        ("TireSlipRatioFrontRight", "f32"),
        ("TireSlipRatioRearLeft", "f32"),
        ("TireSlipRatioRearRight", "f32"),
        ("WheelRotationSpeedFrontLeft", "f32"),
        ("WheelRotationSpeedFrontRight", "f32"),
        ("WheelRotationSpeedRearLeft", "f32"),
        ("WheelRotationSpeedRearRight", "f32"),
        ("WheelOnRumbleStripFrontLeft", "s32"),
        ("WheelOnRumbleStripFrontRight", "s32"),
        ("WheelOnRumbleStripRearLeft", "s32"),
        ("WheelOnRumbleStripRearRight", "s32"),
        ("WheelInPuddleDepthFrontLeft", "f32"),
        ("WheelInPuddleDepthFrontRight", "f32"),
        ("WheelInPuddleDepthRearLeft", "f32"),
        ("WheelInPuddleDepthRearRight", "f32"),
        ("SurfaceRumbleFrontLeft", "f32"),
        ("SurfaceRumbleFrontRight", "f32"),
        ("SurfaceRumbleRearLeft", "f32"),
        ("SurfaceRumbleRearRight", "f32"),
        ("TireSlipAngleFrontLeft", "f32"),
        ("TireSlipAngleFrontRight", "f32"),
        ("TireSlipAngleRearLeft", "f32"),
        ("TireSlipAngleRearRight", "f32"),
        ("TireCombinedSlipFrontLeft", "f32"),
        ("TireCombinedSlipFrontRight", "f32"),
        ("TireCombinedSlipRearLeft", "f32"),
        ("TireCombinedSlipRearRight", "f32"),
        ("SuspensionTravelMetersFrontLeft", "f32"),
        ("SuspensionTravelMetersFrontRight", "f32"),
        ("SuspensionTravelMetersRearLeft", "f32"),
        ("SuspensionTravelMetersRearRight", "f32"),
        # Car identification
        ("CarOrdinal", "s32"),
        ("CarClass", "s32"),
        ("CarPerformanceIndex", "s32"),
        ("DrivetrainType", "s32"),
        ("NumCylinders", "s32"),
        # Opaque 12-byte block, consumed but never interpreted
        ("HorizonPlaceholder", "hzn"),
        # Dash
        ("PositionX", "f32"),
        ("PositionY", "f32"),
        ("PositionZ", "f32"),
        ("Speed", "f32"),
        ("Power", "f32"),
        ("Torque", "f32"),
        ("TireTempFrontLeft", "f32"),
        ("TireTempFrontRight", "f32"),
        ("TireTempRearLeft", "f32"),
        ("TireTempRearRight", "f32"),
        ("Boost", "f32"),
        ("Fuel", "f32"),
        ("DistanceTraveled", "f32"),
        ("BestLap", "f32"),
        ("LastLap", "f32"),
        ("CurrentLap", "f32"),
        ("CurrentRaceTime", "f32"),
        ("LapNumber", "u16"),
        ("RacePosition", "u8"),
        ("Accel", "u8"),
        ("Brake", "u8"),
        ("Clutch", "u8"),
        ("HandBrake", "u8"),
        ("Gear", "u8"),
        ("Steer", "s8"),
        ("NormalizedDrivingLine", "s8"),
        ("NormalizedAIBrakeDifference", "s8"),
    ]
)
