"""UDP receive layer for telemetry datagrams.

The simulator pushes one datagram per tick to a fixed address. This module
finds which candidate addresses are carrying traffic, binds a socket and hands
raw datagrams to the decoder. Everything here is blocking and single-threaded.
"""

from __future__ import annotations

import logging
import socket
from typing import Iterable, Sequence

from ..codec.decoder import DecodedPacket, decode
from ..codec.schema import DASH_SCHEMA, TelemetrySchema
from ..exceptions import BindError
from .config import PROBE_TIMEOUT, RECV_BUFFER_SIZE

logger = logging.getLogger(__name__)

Address = tuple[str, int]


def probe_addresses(
    candidates: Iterable[Address], timeout: float = PROBE_TIMEOUT
) -> list[Address]:
    """Find which candidate addresses are currently receiving traffic.

    Each candidate is bound on its own socket, which waits up to ``timeout``
    seconds for a single datagram and is then closed. A candidate that cannot
    be bound, or stays silent, is left out.

    Args:
        candidates: ``(host, port)`` pairs to check
        timeout: Seconds to wait per candidate

    Returns:
        Candidates that produced a datagram within the window, in input order
    """
    live: list[Address] = []
    for address in candidates:
        if _is_receiving(address, timeout):
            live.append(address)
    return live


def _is_receiving(address: Address, timeout: float) -> bool:
    try:
        with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
            sock.bind(address)
            sock.settimeout(timeout)
            sock.recvfrom(RECV_BUFFER_SIZE)
    except socket.timeout:
        logger.debug("No traffic on %s:%s within %.3fs", address[0], address[1], timeout)
        return False
    except OSError as e:
        logger.debug("Cannot probe %s:%s: %s", address[0], address[1], e)
        return False
    logger.debug("Traffic detected on %s:%s", address[0], address[1])
    return True


def bind(addresses: Sequence[Address]) -> socket.socket:
    """Bind a UDP socket to the first address that accepts it.

    The returned socket is blocking with no timeout.

    Args:
        addresses: ``(host, port)`` pairs to try in order

    Returns:
        Bound socket

    Raises:
        BindError: If ``addresses`` is empty or no address can be bound
    """
    if not addresses:
        raise BindError("No addresses to bind")

    errors: list[str] = []
    for address in addresses:
        sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        try:
            sock.bind(address)
        except OSError as e:
            sock.close()
            errors.append(f"{address[0]}:{address[1]} ({e})")
            continue
        logger.info("Listening for telemetry on %s:%s", address[0], address[1])
        return sock

    raise BindError(f"Failed to bind any address: {', '.join(errors)}")


def receive(sock: socket.socket, buffer_size: int = RECV_BUFFER_SIZE) -> bytes:
    """Block until one datagram arrives and return its payload.

    Datagrams larger than ``buffer_size`` are truncated by the transport.
    """
    data, _addr = sock.recvfrom(buffer_size)
    return data


def receive_packet(
    sock: socket.socket,
    schema: TelemetrySchema = DASH_SCHEMA,
    buffer_size: int = RECV_BUFFER_SIZE,
) -> DecodedPacket:
    """Receive one datagram and decode it."""
    return decode(receive(sock, buffer_size), schema)
