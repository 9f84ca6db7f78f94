"""
Tessel Terminal Canvas
======================

Rasterizes drawing commands onto a character grid and renders the grid with
rich. One character cell covers ``scale`` x ``scale`` drawing units, so with
an 8 unit tile resolution and the default scale every tile is one cell.

Rasterization is deliberately coarse:

- axis-aligned lines become box-drawing runs (``─``, ``│``, ``┼`` where
  they cross), other lines are stepped with ``·``
- stroked rectangles become box outlines, or ``□`` when they fit one cell
- filled shapes paint the background of the cells they cover
- sprites draw their sheet glyph, text draws its characters

Later commands overwrite earlier ones, matching painter's order.
"""

from contextlib import contextmanager
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator, List, Optional, Tuple

from rich.console import Console, ConsoleOptions, RenderResult
from rich.style import Style
from rich.text import Text

from .color import Color

if TYPE_CHECKING:
    from .sprites import Spritesheet

_CROSSINGS = {("─", "│"), ("│", "─"), ("┼", "─"), ("┼", "│")}


@dataclass
class Cell:
    char: str = " "
    fg: Optional[str] = None
    bg: Optional[str] = None


class TerminalCanvas:
    def __init__(
        self,
        width: int,
        height: int,
        scale: float = 8,
        clear_color: Optional[Color] = None,
    ):
        if width <= 0 or height <= 0:
            raise ValueError(f"canvas size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.scale = scale
        self.clear_color = clear_color
        self._grid: List[List[Cell]] = []
        self._stroke_color = Color.mono(255)
        self._fill_color = Color.mono(0)
        self._stroke_width = 1.0
        self._cursor: Tuple[float, float] = (0, 0)
        self._lines: List[Tuple[float, float, float, float]] = []
        self._rects: List[Tuple[float, float, float, float]] = []
        self.clear()

    def clear(self, color: Optional[Color] = None) -> None:
        if color is not None:
            self.clear_color = color
        bg = self.clear_color.to_hex() if self.clear_color else None
        self._grid = [[Cell(bg=bg) for _ in range(self.width)] for _ in range(self.height)]

    def cell(self, col: int, row: int) -> Cell:
        return self._grid[row][col]

    def rows(self) -> List[str]:
        """Plain characters of every row, top to bottom."""
        return ["".join(cell.char for cell in row) for row in self._grid]

    # -- drawing context ---------------------------------------------------

    @contextmanager
    def draw(self, w: float, h: float, ratio: float) -> Iterator[None]:
        yield

    @contextmanager
    def path(self) -> Iterator[None]:
        self._lines = []
        self._rects = []
        try:
            yield
        finally:
            self._lines = []
            self._rects = []

    def move_to(self, x: float, y: float) -> None:
        self._cursor = (x, y)

    def line_to(self, x: float, y: float) -> None:
        x0, y0 = self._cursor
        self._lines.append((x0, y0, x, y))
        self._cursor = (x, y)

    def rect(self, x: float, y: float, w: float, h: float) -> None:
        self._rects.append((x, y, w, h))

    def rounded_box(self, x: float, y: float, w: float, h: float, *radii: float) -> None:
        self._rects.append((x, y, w, h))

    def stroke_color(self, color: Color) -> None:
        self._stroke_color = color

    def stroke_width(self, width: float) -> None:
        self._stroke_width = width

    def fill_color(self, color: Color) -> None:
        self._fill_color = color

    def stroke(self) -> None:
        fg = self._stroke_color.to_hex()
        for x0, y0, x1, y1 in self._lines:
            self._raster_line(x0, y0, x1, y1, fg)
        for x, y, w, h in self._rects:
            self._raster_outline(x, y, w, h, fg)

    def fill(self) -> None:
        bg = self._fill_color.to_hex()
        for x, y, w, h in self._rects:
            c0, r0 = self._to_cell(x, y)
            c1, r1 = self._to_cell(x + w - 1, y + h - 1)
            for row in range(r0, r1 + 1):
                for col in range(c0, c1 + 1):
                    if self._inside(col, row):
                        self._grid[row][col].bg = bg

    def text(self, x: float, y: float, value: str) -> None:
        col, row = self._to_cell(x, y)
        fg = self._stroke_color.to_hex()
        for offset, char in enumerate(value):
            self._put(col + offset, row, char, fg)

    def sprite(self, x: float, y: float, sheet: "Spritesheet", index: int) -> None:
        col, row = self._to_cell(x, y)
        self._put(col, row, sheet.glyph(index), None)

    # -- rasterization -----------------------------------------------------

    def _to_cell(self, x: float, y: float) -> Tuple[int, int]:
        return int(x // self.scale), int(y // self.scale)

    def _inside(self, col: int, row: int) -> bool:
        return 0 <= col < self.width and 0 <= row < self.height

    def _put(self, col: int, row: int, char: str, fg: Optional[str]) -> None:
        if not self._inside(col, row):
            return
        cell = self._grid[row][col]
        if (cell.char, char) in _CROSSINGS:
            char = "┼"
        cell.char = char
        cell.fg = fg

    def _raster_line(self, x0: float, y0: float, x1: float, y1: float, fg: str) -> None:
        c0, r0 = self._to_cell(x0, y0)
        c1, r1 = self._to_cell(x1, y1)
        if r0 == r1:
            for col in range(min(c0, c1), max(c0, c1) + 1):
                self._put(col, r0, "─", fg)
        elif c0 == c1:
            for row in range(min(r0, r1), max(r0, r1) + 1):
                self._put(c0, row, "│", fg)
        else:
            steps = max(abs(c1 - c0), abs(r1 - r0))
            for step in range(steps + 1):
                col = c0 + round((c1 - c0) * step / steps)
                row = r0 + round((r1 - r0) * step / steps)
                self._put(col, row, "·", fg)

    def _raster_outline(self, x: float, y: float, w: float, h: float, fg: str) -> None:
        c0, r0 = self._to_cell(x, y)
        c1, r1 = self._to_cell(x + max(w - 1, 0), y + max(h - 1, 0))
        if c0 == c1 and r0 == r1:
            self._put(c0, r0, "□", fg)
            return
        for col in range(c0 + 1, c1):
            self._put(col, r0, "─", fg)
            self._put(col, r1, "─", fg)
        for row in range(r0 + 1, r1):
            self._put(c0, row, "│", fg)
            self._put(c1, row, "│", fg)
        self._put(c0, r0, "┌", fg)
        self._put(c1, r0, "┐", fg)
        self._put(c0, r1, "└", fg)
        self._put(c1, r1, "┘", fg)

    # -- rich --------------------------------------------------------------

    def to_text(self) -> Text:
        text = Text(no_wrap=True)
        for index, row in enumerate(self._grid):
            if index:
                text.append("\n")
            for cell in row:
                text.append(cell.char, style=Style(color=cell.fg, bgcolor=cell.bg))
        return text

    def __rich_console__(
        self, console: Console, options: ConsoleOptions
    ) -> RenderResult:
        yield self.to_text()
