"""
Tessel Scene
============

Scene graph objects: containers (``Scene``, ``View``) and the map widgets.
"""

from .base import BaseObject, Renderable, Scene, Taggable, View
from .widgets import (
    Cursor,
    CursorPosition,
    GridOverlay,
    Tilemap,
)

__all__ = [
    "BaseObject",
    "Renderable",
    "Taggable",
    "Scene",
    "View",
    "GridOverlay",
    "Tilemap",
    "Cursor",
    "CursorPosition",
]
