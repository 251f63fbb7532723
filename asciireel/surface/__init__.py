"""
Surface: character grid with depth-tested writes plus shape and text primitives.
"""
from .base import Surface
from .framebuffer import Framebuffer
from .font import BLOCK_FONT, DENSITY_CHARS

__all__ = ["Surface", "Framebuffer", "BLOCK_FONT", "DENSITY_CHARS"]
