"""
Device control-plane errors
"""


class DeviceSessionError(Exception):
    """The WLED JSON API could not be reached or answered with an error."""


class BrightnessOutOfRangeError(ValueError):
    """Brightness outside 0-255; raised before any request is made."""

    def __init__(self, value):
        super().__init__(f"Brightness must be between 0 and 255, got {value}")
        self.value = value
