"""
Rainbow Generator

Spreads the full hue circle across the strip and rotates it with the phase.
"""

from animations.base import ColorGenerator
from models.frame import Frame, Led
from utils.colors import hue_to_rgb, scale_rgb


class RainbowGenerator(ColorGenerator):
    """
    Rainbow - full hue wheel over the strip length

    LED i gets hue (phase + i * 360 / led_count) mod 360, so advancing the
    phase scrolls the rainbow along the strip.
    """

    def __init__(self, brightness: int = 255):
        if not 0 <= brightness <= 255:
            raise ValueError(f"brightness must be 0-255, got {brightness}")
        self.brightness = brightness

    def generate(self, led_count: int, phase: int) -> Frame:
        if led_count <= 0:
            return Frame()

        spread = 360.0 / led_count
        leds = []
        for i in range(led_count):
            rgb = hue_to_rgb((phase + i * spread) % 360)
            if self.brightness != 255:
                rgb = scale_rgb(rgb, self.brightness)
            leds.append(Led(*rgb))
        return Frame(tuple(leds))
