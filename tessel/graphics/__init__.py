"""
Tessel Graphics
===============

Geometry and color value types, the drawing context interface, spritesheets
and a rich-backed terminal canvas.
"""

from .color import Color
from .context import DrawContext, RecordingContext
from .geometry import Rect, Vector2, divceil, includes_all
from .sprites import Spritesheet
from .terminal import TerminalCanvas

__all__ = [
    "Color",
    "DrawContext",
    "RecordingContext",
    "Rect",
    "Vector2",
    "divceil",
    "includes_all",
    "Spritesheet",
    "TerminalCanvas",
]
