"""Configuration for the telemetry listener.

The dashboard reads no configuration file and takes no flags; these defaults
are the fixed values it runs with.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8000
PROBE_TIMEOUT = 0.1  # seconds
RECV_BUFFER_SIZE = 1500  # bytes, larger datagrams are truncated


class ListenerConfig(BaseModel):
    """Where and how to listen for telemetry datagrams.

    Attributes:
        host: Address to bind (default loopback)
        port: UDP port the simulator sends to
        probe_timeout: Seconds to wait for traffic when probing an address
        buffer_size: Receive buffer size in bytes

    Examples:
        ```python
        from forzatelem.net import ListenerConfig, bind

        config = ListenerConfig(port=5300)
        sock = bind(config.candidates())
        ```
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    host: str = DEFAULT_HOST
    port: int = Field(default=DEFAULT_PORT, ge=1, le=65535)
    probe_timeout: float = Field(default=PROBE_TIMEOUT, gt=0)
    buffer_size: int = Field(default=RECV_BUFFER_SIZE, gt=0)

    def candidates(self) -> list[tuple[str, int]]:
        """Candidate ``(host, port)`` addresses to probe and bind."""
        return [(self.host, self.port)]
