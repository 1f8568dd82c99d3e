"""
Color generator contract

Any pattern the scheduler can drive implements generate(led_count, phase).
"""

from typing import Protocol

from models.frame import Frame


class ColorGenerator(Protocol):
    """
    Produces one Frame per animation tick.

    Implementations must be deterministic for a given (led_count, phase)
    and return exactly led_count LEDs. Small phase steps should give a
    visually continuous animation.
    """

    def generate(self, led_count: int, phase: int) -> Frame:
        """
        Args:
            led_count: Number of LEDs in the strip
            phase: Animation phase in degrees, 0 <= phase < 360
        """
        ...
