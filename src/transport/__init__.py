from .udp_transport import UDPTransport

__all__ = ["UDPTransport"]
