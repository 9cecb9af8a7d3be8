"""Dashboard entry point for forzatelem.

Binds the fixed loopback listener, then loops forever: receive a datagram,
decode it, print the dashboard. There are no flags and no configuration file.
"""

from __future__ import annotations

import logging
import socket
import sys
from typing import TextIO

from ..codec.decoder import decode
from ..dashboard import DashboardReading, render
from ..exceptions import BindError
from ..net.config import ListenerConfig
from ..net.receiver import bind, probe_addresses, receive

logger = logging.getLogger(__name__)


def open_listener(config: ListenerConfig) -> socket.socket:
    """Bind the candidates that carry traffic, or all of them if none do yet.

    Raises:
        BindError: If no candidate can be bound
    """
    candidates = config.candidates()
    live = probe_addresses(candidates, config.probe_timeout)
    if not live:
        logger.info("No telemetry traffic detected yet, binding %d candidate(s)", len(candidates))
    return bind(live or candidates)


def run(
    sock: socket.socket,
    config: ListenerConfig,
    out: TextIO = sys.stdout,
    max_packets: int | None = None,
) -> None:
    """Receive, decode and render datagrams.

    Args:
        sock: Bound socket, owned by this loop
        config: Listener configuration (receive buffer size)
        out: Stream the dashboard is written to
        max_packets: Stop after this many datagrams (None runs forever)
    """
    handled = 0
    while max_packets is None or handled < max_packets:
        data = receive(sock, config.buffer_size)
        reading = DashboardReading.from_packet(decode(data))
        print(render(reading), file=out, flush=True)
        handled += 1


def main() -> int:
    """Main entry point for the forzatelem dashboard.

    Returns:
        Exit code (1 if the listener cannot be bound)
    """
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    config = ListenerConfig()
    try:
        sock = open_listener(config)
        run(sock, config)
    except BindError as e:
        logger.error("Failed to bind telemetry listener: %s", e)
        return 1
    except KeyboardInterrupt:
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
