"""
Wire protocol subsystem (DDP over UDP)
"""

from .ddp import DDPEncoder, DDPHeader, encode, parse_header, HEADER_SIZE, MAX_PAYLOAD_LEDS

__all__ = [
    "DDPEncoder",
    "DDPHeader",
    "encode",
    "parse_header",
    "HEADER_SIZE",
    "MAX_PAYLOAD_LEDS",
]
