"""
Tessel Drawing Context
======================

Scene objects draw through a vector-graphics context passed to ``render``:
frames, paths, stroke/fill state and a sprite blit. The context is always an
explicit argument; nothing in tessel keeps a process-wide drawing context.

Two implementations ship with tessel:

- ``RecordingContext`` (this module) keeps the sequence of commands, which
  is what the tests assert on.
- ``TerminalCanvas`` (``tessel.graphics.terminal``) rasterizes commands to a
  character grid and renders it with rich.
"""

from contextlib import contextmanager
from typing import (
    TYPE_CHECKING,
    Any,
    ContextManager,
    Iterator,
    List,
    Optional,
    Protocol,
    Tuple,
    runtime_checkable,
)

from .color import Color

if TYPE_CHECKING:
    from .sprites import Spritesheet

Command = Tuple[str, Tuple[Any, ...]]


@runtime_checkable
class DrawContext(Protocol):
    """Interface scene objects draw against."""

    def clear(self, color: Optional[Color] = None) -> None:
        """Start a fresh frame, optionally changing the background color."""
        ...

    def draw(self, w: float, h: float, ratio: float) -> ContextManager[None]:
        """Open a frame of ``w`` x ``h`` units."""
        ...

    def path(self) -> ContextManager[None]:
        """Open a path; primitives added inside belong to it."""
        ...

    def move_to(self, x: float, y: float) -> None: ...

    def line_to(self, x: float, y: float) -> None: ...

    def rect(self, x: float, y: float, w: float, h: float) -> None: ...

    def rounded_box(
        self, x: float, y: float, w: float, h: float, *radii: float
    ) -> None: ...

    def stroke_color(self, color: Color) -> None: ...

    def stroke_width(self, width: float) -> None: ...

    def fill_color(self, color: Color) -> None: ...

    def stroke(self) -> None:
        """Stroke the current path."""
        ...

    def fill(self) -> None:
        """Fill the current path."""
        ...

    def text(self, x: float, y: float, value: str) -> None: ...

    def sprite(self, x: float, y: float, sheet: "Spritesheet", index: int) -> None:
        """Blit cell ``index`` of ``sheet`` with its top-left at (x, y)."""
        ...


class RecordingContext:
    """
    Drawing context that records every call as ``(name, args)``.

    Example:
        ```python
        ctx = RecordingContext()
        GridOverlay(reso=Vector2(8, 8)).render(ctx, Rect(0, 0, 16, 16))
        ctx.count("line_to")  # 4
        ```
    """

    def __init__(self) -> None:
        self.commands: List[Command] = []

    def _record(self, name: str, *args: Any) -> None:
        self.commands.append((name, args))

    @contextmanager
    def draw(self, w: float, h: float, ratio: float) -> Iterator[None]:
        self._record("begin_frame", w, h, ratio)
        yield
        self._record("end_frame")

    @contextmanager
    def path(self) -> Iterator[None]:
        self._record("begin_path")
        yield
        self._record("end_path")

    def move_to(self, x: float, y: float) -> None:
        self._record("move_to", x, y)

    def line_to(self, x: float, y: float) -> None:
        self._record("line_to", x, y)

    def rect(self, x: float, y: float, w: float, h: float) -> None:
        self._record("rect", x, y, w, h)

    def rounded_box(self, x: float, y: float, w: float, h: float, *radii: float) -> None:
        self._record("rounded_box", x, y, w, h, *radii)

    def stroke_color(self, color: Color) -> None:
        self._record("stroke_color", color)

    def stroke_width(self, width: float) -> None:
        self._record("stroke_width", width)

    def fill_color(self, color: Color) -> None:
        self._record("fill_color", color)

    def stroke(self) -> None:
        self._record("stroke")

    def fill(self) -> None:
        self._record("fill")

    def text(self, x: float, y: float, value: str) -> None:
        self._record("text", x, y, value)

    def sprite(self, x: float, y: float, sheet: "Spritesheet", index: int) -> None:
        self._record("sprite", x, y, sheet.name, index)

    def named(self, name: str) -> List[Tuple[Any, ...]]:
        """Arguments of every recorded call to ``name``, in order."""
        return [args for op, args in self.commands if op == name]

    def count(self, name: str) -> int:
        return len(self.named(name))

    def clear(self, color: Optional[Color] = None) -> None:
        self.commands.clear()
        self._record("clear", color)
