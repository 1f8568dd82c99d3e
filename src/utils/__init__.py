"""
Utility functions for the DDP streaming client
"""

from .colors import (
    hue_to_rgb,
    scale_rgb,
)

__all__ = [
    'hue_to_rgb',
    'scale_rgb',
]
