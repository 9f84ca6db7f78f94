"""
Tessel Map Widgets
==================

The objects the map editor is assembled from: a grid overlay, the tile map
itself, the map cursor and the cursor position panel.
"""

from dataclasses import dataclass, field
from typing import Optional

import numpy as np

from tessel.errors import SceneError
from tessel.graphics.color import Color
from tessel.graphics.context import DrawContext
from tessel.graphics.geometry import Rect, Vector2, divceil
from tessel.graphics.sprites import Spritesheet

from .base import BaseObject


def _default_reso() -> Vector2:
    return Vector2(8, 8)


@dataclass(eq=False)
class GridOverlay(BaseObject):
    """Grid lines every ``reso`` units across the whole rectangle."""

    reso: Vector2 = field(default_factory=_default_reso)
    color: Color = field(default_factory=lambda: Color.mono(0))

    def render(self, ctx: DrawContext, rect: Rect) -> None:
        x, y, w, h = rect
        x2 = x + w
        y2 = y + h
        cols = divceil(w, self.reso.x)
        rows = divceil(h, self.reso.y)
        with ctx.draw(w, h, 1.0):
            ctx.stroke_color(self.color)
            ctx.stroke_width(1)
            with ctx.path():
                for xx in range(cols):
                    col = x + xx * self.reso.x
                    ctx.move_to(col, y)
                    ctx.line_to(col, y2)
                for yy in range(rows):
                    row = y + yy * self.reso.y
                    ctx.move_to(x, row)
                    ctx.line_to(x2, row)
                ctx.stroke()


@dataclass(eq=False)
class Tilemap(BaseObject):
    """
    Grid of sheet cell indices. ``data`` is indexed ``[row, column]``;
    negative cells are empty and not drawn.
    """

    data: Optional[np.ndarray] = None
    sprite: Optional[Spritesheet] = None

    @property
    def size(self) -> Vector2:
        if self.data is None:
            return Vector2.zero()
        rows, cols = self.data.shape
        return Vector2(cols, rows)

    def tile_at(self, x: int, y: int) -> int:
        return int(self.data[y, x])

    def paint(self, x: int, y: int, tile: int) -> int:
        """Set cell (x, y) to ``tile`` and return the previous value."""
        if not Rect(0, 0, *self.size).contains(x, y):
            raise SceneError(f"cell {x},{y} is outside the {self.size.x}x{self.size.y} map")
        previous = self.tile_at(x, y)
        self.data[y, x] = tile
        return previous

    def render(self, ctx: DrawContext, rect: Rect) -> None:
        if self.sprite is None or self.data is None:
            return
        x, y = rect.x, rect.y
        w, h = self.sprite.w, self.sprite.h
        for (dy, dx), n in np.ndenumerate(self.data):
            if n < 0:
                continue
            self.sprite.render(ctx, x + dx * w, y + dy * h, int(n))


@dataclass(eq=False)
class Cursor(BaseObject):
    """
    Map cursor, positioned in tile coordinates. When ``bounds`` is set,
    ``move`` keeps the cursor inside ``(0, 0) .. bounds - 1``.
    """

    reso: Vector2 = field(default_factory=_default_reso)
    coord: Vector2 = field(default_factory=Vector2.zero)
    color: Color = field(default_factory=lambda: Color.mono(255))
    bounds: Optional[Vector2] = None

    def move(self, dx: int, dy: int) -> Vector2:
        x, y = self.coord + (dx, dy)
        if self.bounds is not None:
            x = min(max(x, 0), self.bounds.x - 1)
            y = min(max(y, 0), self.bounds.y - 1)
        self.coord = Vector2(x, y)
        return self.coord

    def render(self, ctx: DrawContext, rect: Rect) -> None:
        left, top = self.coord.scale(self.reso) + (rect.x, rect.y)
        with ctx.draw(rect.w, rect.h, 1.0):
            ctx.stroke_color(self.color)
            with ctx.path():
                ctx.move_to(left, top)
                ctx.rect(left + 1, top + 1, self.reso.x - 2, self.reso.y - 2)
                ctx.stroke_width(1)
                ctx.stroke()


@dataclass(eq=False)
class CursorPosition(BaseObject):
    """Translucent panel showing the cursor's tile coordinates."""

    cursor: Optional[Cursor] = None
    box: Rect = Rect(8, 8, 196, 32)
    background: Color = field(default_factory=lambda: Color.rgba(32, 32, 32, 64))
    text_color: Color = field(default_factory=lambda: Color.mono(224))

    @property
    def label(self) -> str:
        if self.cursor is None:
            return ""
        return f"{int(self.cursor.coord.x)}, {int(self.cursor.coord.y)}"

    def render(self, ctx: DrawContext, rect: Rect) -> None:
        x, y, w, h = self.box
        with ctx.draw(rect.w, rect.h, 1.0):
            ctx.fill_color(self.background)
            with ctx.path():
                ctx.rounded_box(rect.x + x, rect.y + y, w, h, 8, 8, 8, 8)
                ctx.fill()
            if self.cursor is not None:
                ctx.stroke_color(self.text_color)
                ctx.text(rect.x + x + 8, rect.y + y + 8, self.label)
