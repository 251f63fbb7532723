"""
asciireel: scene-timed ASCII animations for the terminal.
Declare scenes in seconds, query any frame for its phase and progress, render
backgrounds, content and transitions onto a character framebuffer.
"""
from .reel import Reel, ReelError, validate_reel
from .scenes import SceneDeclaration, SceneManager, create_scene, render_scene
from .surface import Framebuffer, Surface

__version__ = "0.1.0"

__all__ = [
    "Reel",
    "ReelError",
    "validate_reel",
    "SceneDeclaration",
    "SceneManager",
    "create_scene",
    "render_scene",
    "Framebuffer",
    "Surface",
]
