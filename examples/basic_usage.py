#!/usr/bin/env python3
"""Basic usage example for forzatelem.

This example demonstrates:
1. Encoding telemetry values into a datagram
2. Decoding the datagram back into typed values
3. Reading values through checked accessors
4. What happens to a truncated datagram
"""

from __future__ import annotations

from forzatelem import DASH_SCHEMA, ConversionError, decode, encode
from forzatelem.dashboard import DashboardReading, render


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("forzatelem Basic Usage Example")
    print("=" * 60)
    print()

    print("1. Encoding a datagram...")
    data = encode({"IsRaceOn": 1, "Speed": 27.5, "Gear": 4, "CurrentEngineRpm": 6200.0})
    print(f"   {len(data)} bytes (schema width {DASH_SCHEMA.total_width()})")
    print()

    print("2. Decoding...")
    packet = decode(data)
    print(f"   {len(packet)} fields decoded")
    print(f"   Speed: {packet['Speed'].as_float32()} m/s")
    print(f"   Gear: {packet['Gear'].as_uint8()}")
    print()

    print("3. Reading with the wrong accessor...")
    try:
        packet["Gear"].as_float32()
    except ConversionError as e:
        print(f"   ConversionError: {e}")
    print()

    print("4. Decoding a truncated datagram...")
    short = decode(data[:260])
    print(f"   {len(short)} of {len(DASH_SCHEMA)} fields kept, Gear present: {'Gear' in short}")
    print()

    print("5. Dashboard output:")
    print(render(DashboardReading.from_packet(packet)))


if __name__ == "__main__":
    main()
