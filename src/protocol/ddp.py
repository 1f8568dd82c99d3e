"""
DDP (Distributed Display Protocol) packet encoder.

Header layout (10 bytes, big-endian):
    [0]   0x01  version/flags (version 1, PUSH flag clear)
    [1]   0x00  reserved
    [2]   0x01  data type (8-bit RGB)
    [3]   0x01  output id
    [4-7] pixel offset, always 0
    [8-9] payload length = 3 * LED count

Payload: R, G, B per LED in strip order.

Every channel is written as its low 8 bits (value & 0xFF); values are never
clamped or rejected. The length field is an unsigned 16-bit write, so frames
above MAX_PAYLOAD_LEDS wrap the field silently.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass

from models.enums import DDPDataType
from models.frame import Frame

VERSION_FLAGS = 0x01
RESERVED = 0x00
DATA_TYPE = DDPDataType.RGB8.value
OUTPUT_ID = 0x01
PIXEL_OFFSET = 0

HEADER_SIZE = 10
BYTES_PER_LED = 3
MAX_PAYLOAD_BYTES = 0xFFFF
MAX_PAYLOAD_LEDS = MAX_PAYLOAD_BYTES // BYTES_PER_LED  # 21845

_HEADER = struct.Struct(">BBBBIH")


@dataclass(frozen=True)
class DDPHeader:
    """Decoded DDP header fields."""
    flags: int
    reserved: int
    data_type: int
    output_id: int
    offset: int
    length: int


def encode(frame: Frame) -> bytes:
    """
    Serialize a frame into one DDP packet.

    The length field is derived from the frame given, never from the
    configured LED count.

    Args:
        frame: Frame of any length (0 yields a bare 10-byte header)

    Returns:
        HEADER_SIZE + 3 * len(frame) bytes
    """
    payload = bytes(channel & 0xFF for led in frame for channel in led)
    header = _HEADER.pack(
        VERSION_FLAGS,
        RESERVED,
        DATA_TYPE,
        OUTPUT_ID,
        PIXEL_OFFSET,
        len(payload) & 0xFFFF,
    )
    return header + payload


def parse_header(data: bytes) -> DDPHeader:
    """
    Decode the 10-byte header of a DDP packet.

    Raises:
        ValueError: If fewer than HEADER_SIZE bytes are given
    """
    if len(data) < HEADER_SIZE:
        raise ValueError(f"DDP header needs {HEADER_SIZE} bytes, got {len(data)}")
    return DDPHeader(*_HEADER.unpack_from(data, 0))


class DDPEncoder:
    """Packet encoder handed to the scheduler."""

    def encode(self, frame: Frame) -> bytes:
        return encode(frame)
