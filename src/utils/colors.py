"""
Color conversion utilities

Pure functions for hue → RGB conversion used by the pattern generators.
"""

from typing import Tuple


def hue_to_rgb(hue: float) -> Tuple[int, int, int]:
    """
    Convert hue (0-360) to RGB (0-255)

    Simple HSV to RGB conversion with S=1, V=1 (full saturation and value).

    Args:
        hue: Hue value in degrees, wrapped into 0-360

    Returns:
        (r, g, b) tuple with values 0-255

    Example:
        r, g, b = hue_to_rgb(0)    # Red
        r, g, b = hue_to_rgb(120)  # Green
        r, g, b = hue_to_rgb(240)  # Blue
    """
    hue = hue % 360

    if hue < 60:
        return (255, int(hue * 4.25), 0)
    elif hue < 120:
        return (int((120 - hue) * 4.25), 255, 0)
    elif hue < 180:
        return (0, 255, int((hue - 120) * 4.25))
    elif hue < 240:
        return (0, int((240 - hue) * 4.25), 255)
    elif hue < 300:
        return (int((hue - 240) * 4.25), 0, 255)
    else:
        return (255, 0, int((360 - hue) * 4.25))


def scale_rgb(rgb: Tuple[int, int, int], brightness: int) -> Tuple[int, int, int]:
    """Scale an RGB triple by brightness 0-255."""
    r, g, b = rgb
    return (r * brightness // 255, g * brightness // 255, b * brightness // 255)
