"""Network receive layer.

Probe candidate addresses for traffic, bind a UDP socket and receive raw
telemetry datagrams for the decoder.
"""

from forzatelem.net.config import ListenerConfig
from forzatelem.net.receiver import bind, probe_addresses, receive, receive_packet

__all__ = [
    "ListenerConfig",
    "bind",
    "probe_addresses",
    "receive",
    "receive_packet",
]
