"""
Pattern generators driven by the animation scheduler
"""

from .base import ColorGenerator
from .rainbow import RainbowGenerator

__all__ = [
    'ColorGenerator',
    'RainbowGenerator',
]
