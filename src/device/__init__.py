"""
Device control-plane subsystem (WLED JSON API)
"""

from .errors import DeviceSessionError, BrightnessOutOfRangeError
from .wled_client import WLEDJsonClient
from .session import DeviceSession

__all__ = [
    "DeviceSessionError",
    "BrightnessOutOfRangeError",
    "WLEDJsonClient",
    "DeviceSession",
]
