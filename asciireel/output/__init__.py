"""
Output: ANSI terminal writer and PNG snapshots.
"""
from .terminal import TerminalWriter, frame_text, hex_to_ansi
from .image import rasterize, save_snapshot

__all__ = ["TerminalWriter", "frame_text", "hex_to_ansi", "rasterize", "save_snapshot"]
