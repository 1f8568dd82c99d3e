from __future__ import annotations

from typing import TYPE_CHECKING

from lifecycle.shutdown_protocol import IShutdownHandler

if TYPE_CHECKING:
    from transport.udp_transport import UDPTransport


class TransportShutdownHandler(IShutdownHandler):
    """
    Releases the UDP socket.

    Priority: 50 (runs last; the scheduler is already stopped)
    """

    def __init__(self, transport: UDPTransport):
        self.transport = transport

    @property
    def shutdown_priority(self) -> int:
        return 50

    async def shutdown(self) -> None:
        self.transport.close()
