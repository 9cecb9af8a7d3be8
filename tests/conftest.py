"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import socket

import pytest

from forzatelem import DASH_SCHEMA, encode


@pytest.fixture
def sample_values() -> dict[str, int | float]:
    """Representative values for a car mid-race."""
    return {
        "IsRaceOn": 1,
        "TimestampMS": 123456,
        "EngineMaxRpm": 8000.0,
        "EngineIdleRpm": 900.0,
        "CurrentEngineRpm": 6500.5,
        "Yaw": -1.25,
        "WheelOnRumbleStripFrontLeft": 1,
        "CarOrdinal": 2352,
        "CarClass": 5,
        "CarPerformanceIndex": 800,
        "DrivetrainType": 2,
        "NumCylinders": 8,
        "Speed": 10.0,
        "Power": 250000.0,
        "LapNumber": 3,
        "RacePosition": 1,
        "Accel": 255,
        "Brake": 0,
        "Gear": 3,
        "Steer": -127,
        "NormalizedDrivingLine": 12,
        "NormalizedAIBrakeDifference": -5,
    }


@pytest.fixture
def sample_datagram(sample_values: dict[str, int | float]) -> bytes:
    """Full-length datagram built from sample_values."""
    data = encode(sample_values)
    assert len(data) == DASH_SCHEMA.total_width()
    return data


@pytest.fixture
def free_port() -> int:
    """An unused UDP port on loopback."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    sock.bind(("127.0.0.1", 0))
    port = sock.getsockname()[1]
    sock.close()
    return port
