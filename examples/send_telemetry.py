#!/usr/bin/env python3
"""
Sends synthetic telemetry datagrams for testing the dashboard.

Each tick the car accelerates a little and shifts up every 10 m/s, so the
dashboard shows changing speed and gear without a running simulator.
"""

from __future__ import annotations

import argparse
import socket
import time

from forzatelem import encode


def main() -> None:
    parser = argparse.ArgumentParser(description="Synthetic telemetry sender")
    parser.add_argument("--host", default="127.0.0.1", help="Destination host")
    parser.add_argument("--port", type=int, default=8000, help="Destination UDP port")
    parser.add_argument(
        "--interval",
        type=float,
        default=1 / 60,
        help="Delay between datagrams in seconds",
    )
    parser.add_argument(
        "--truncate",
        type=int,
        default=0,
        help="Send only the first N bytes of each datagram (0 sends all)",
    )
    args = parser.parse_args()

    destination = (args.host, args.port)
    print(f"Sending telemetry to udp://{args.host}:{args.port}")

    speed = 0.0
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
        tick = 0
        while True:
            gear = min(int(speed // 10) + 1, 8)
            data = encode(
                {
                    "IsRaceOn": 1,
                    "TimestampMS": tick * 16,
                    "Speed": speed,
                    "Gear": gear,
                    "Accel": 255,
                }
            )
            if args.truncate:
                data = data[: args.truncate]
            sock.sendto(data, destination)
            speed = (speed + 0.1) % 80.0
            tick += 1
            time.sleep(max(0.0, args.interval))


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        print("\nStopped.")
