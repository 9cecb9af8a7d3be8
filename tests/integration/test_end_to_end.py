"""End-to-end tests: encode, send over loopback, receive, decode, render."""

from __future__ import annotations

import socket
from typing import Iterator

import pytest

from forzatelem import DASH_SCHEMA, decode, encode
from forzatelem.dashboard import DashboardReading, render
from forzatelem.net import bind, receive, receive_packet


@pytest.fixture
def listener() -> Iterator[socket.socket]:
    sock = bind([("127.0.0.1", 0)])
    sock.settimeout(2.0)
    yield sock
    sock.close()


@pytest.fixture
def sender() -> Iterator[socket.socket]:
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
        yield sock


class TestEndToEnd:
    """Full pipeline over a real loopback socket."""

    def test_full_datagram(
        self,
        listener: socket.socket,
        sender: socket.socket,
        sample_values: dict[str, int | float],
        sample_datagram: bytes,
    ) -> None:
        sender.sendto(sample_datagram, listener.getsockname())
        packet = receive_packet(listener)

        assert set(packet) == set(DASH_SCHEMA.names())
        for name, expected in sample_values.items():
            assert packet[name].value == expected

        reading = DashboardReading.from_packet(packet)
        assert reading.is_race_on == 1
        assert reading.speed_kmh == pytest.approx(36.0)
        assert reading.gear == 3

    def test_truncated_datagram(
        self, listener: socket.socket, sender: socket.socket, sample_datagram: bytes
    ) -> None:
        """Test a short datagram still renders, with defaults for dropped fields."""
        sender.sendto(sample_datagram[:100], listener.getsockname())
        packet = receive_packet(listener)

        assert "IsRaceOn" in packet
        assert "Speed" not in packet

        text = render(DashboardReading.from_packet(packet))
        assert "IsRaceOn: 1" in text
        assert "Speed: 0.0" in text
        assert "Gear: 0" in text

    def test_datagram_sequence(self, listener: socket.socket, sender: socket.socket) -> None:
        """Test each datagram is decoded independently."""
        for gear in range(1, 7):
            sender.sendto(encode({"Gear": gear, "Speed": gear * 5.0}), listener.getsockname())

        gears = []
        for _ in range(6):
            packet = decode(receive(listener))
            gears.append(packet["Gear"].as_uint8())
        assert gears == [1, 2, 3, 4, 5, 6]

    def test_oversized_datagram_keeps_schema_fields(
        self, listener: socket.socket, sender: socket.socket, sample_datagram: bytes
    ) -> None:
        sender.sendto(sample_datagram + bytes(2000), listener.getsockname())
        data = receive(listener)

        assert len(data) == 1500
        assert decode(data) == decode(sample_datagram)
