"""
Tessel Spritesheets
===================

A spritesheet is a grid of equally sized cells addressed by index, row
major. Cell frames are looked up often while a tile map renders, so they are
kept in an LRU cache.
"""

from typing import TYPE_CHECKING

from cachetools import LRUCache

from .geometry import Rect

if TYPE_CHECKING:
    from .context import DrawContext

# Terminal stand-ins for sheet cells, indexed modulo their length.
DEFAULT_GLYPHS = "·,:;=+*#%@"


class Spritesheet:
    def __init__(
        self,
        name: str,
        cell_w: int,
        cell_h: int,
        columns: int = 16,
        rows: int = 16,
        glyphs: str = DEFAULT_GLYPHS,
        cache_size: int = 256,
    ):
        if cell_w <= 0 or cell_h <= 0:
            raise ValueError(f"cell size must be positive, got {cell_w}x{cell_h}")
        if not glyphs:
            raise ValueError("glyphs must not be empty")
        self.name = name
        self.w = cell_w
        self.h = cell_h
        self.columns = columns
        self.rows = rows
        self.glyphs = glyphs
        self._frames: LRUCache = LRUCache(maxsize=cache_size)

    @property
    def cell_count(self) -> int:
        return self.columns * self.rows

    def frame(self, index: int) -> Rect:
        """Source rectangle of cell ``index`` within the sheet."""
        if not 0 <= index < self.cell_count:
            raise IndexError(f"cell {index} out of range for {self.name!r}")
        frame = self._frames.get(index)
        if frame is None:
            row, col = divmod(index, self.columns)
            frame = Rect(col * self.w, row * self.h, self.w, self.h)
            self._frames[index] = frame
        return frame

    def glyph(self, index: int) -> str:
        return self.glyphs[index % len(self.glyphs)]

    def render(self, ctx: "DrawContext", x: float, y: float, index: int) -> None:
        self.frame(index)
        ctx.sprite(x, y, self, index)

    def __repr__(self) -> str:
        return f"Spritesheet({self.name!r}, {self.w}x{self.h})"
