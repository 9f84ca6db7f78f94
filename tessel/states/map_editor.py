"""
Map Editor State
================

Builds the editor scene and wires keyboard input to it through the engine's
input reactor:

- arrow keys (press or repeat) move the cursor one tile
- ``space`` paints the brush tile under the cursor
- ``tab`` cycles the brush through the palette
- ``g`` toggles the grid overlay
- ``escape`` asks the engine to quit

Scene layout::

    root
    ├── View ── map_view:  GridOverlay, Tilemap, Cursor
    └── View ── gui_view:  CursorPosition
"""

import logging
from typing import Dict, List

import numpy as np

from tessel.engine.events import KeyAction, KeyEvent, pressed
from tessel.engine.state import State
from tessel.graphics.color import Color
from tessel.graphics.geometry import Vector2
from tessel.graphics.sprites import Spritesheet
from tessel.reactive import Reactor
from tessel.scene import (
    Cursor,
    CursorPosition,
    GridOverlay,
    Scene,
    Tilemap,
    View,
)

logger = logging.getLogger(__name__)

MOVES: Dict[str, Vector2] = {
    "left": Vector2(-1, 0),
    "right": Vector2(1, 0),
    "up": Vector2(0, -1),
    "down": Vector2(0, 1),
}


class MapEditor(State):
    def init(self) -> None:
        super().init()
        config = self.engine.config
        self.screen.clear_color = Color.mono(config.clear_color)

        reso = Vector2(config.tile_width, config.tile_height)
        rng = np.random.default_rng(config.seed)
        palette = np.array(config.palette, dtype=np.int32)
        data = rng.choice(palette, size=(config.map_height, config.map_width))
        tileset = Spritesheet(
            config.tileset,
            config.tile_width,
            config.tile_height,
            config.tileset_columns,
            config.tileset_rows,
        )

        self.palette = list(config.palette)
        self._brush_position = 0

        self.scene = Scene(tags=["root"])
        self.grid = GridOverlay(color=Color.mono(config.grid_color), reso=reso, tags=["map_grid"])
        self.tilemap = Tilemap(data=data, sprite=tileset, tags=["map_tiles"])
        self.cursor = Cursor(
            color=Color.mono(config.cursor_color),
            reso=reso,
            bounds=self.tilemap.size,
            tags=["map_cursor"],
        )
        map_scene = Scene(tags=["map_view"])
        map_scene.add(self.grid)
        map_scene.add(self.tilemap)
        map_scene.add(self.cursor)
        self.scene.add(View(child=map_scene))
        gui_scene = Scene(tags=["gui_view"])
        gui_scene.add(CursorPosition(cursor=self.cursor, tags=["cursor_position"]))
        self.scene.add(View(child=gui_scene))

        self._bindings: List[Reactor] = []
        self._bind_input()

    def _bind_input(self) -> None:
        keys = self.input
        for key, step in MOVES.items():
            node = keys.select(pressed(key))
            node.map(lambda event, step=step: step, self._move_cursor)
            self._bindings.append(node)
        self._bindings.append(keys.eq(KeyEvent("space", KeyAction.PRESS), self._paint))
        cycle = keys.select(pressed("tab"))
        cycle.map(lambda event: 1, self.cycle_brush)
        self._bindings.append(cycle)
        self._bindings.append(keys.eq(KeyEvent("g", KeyAction.PRESS), self._toggle_grid))
        self._bindings.append(
            keys.eq(KeyEvent("escape", KeyAction.PRESS), lambda event: self.engine.quit())
        )

    def _move_cursor(self, step: Vector2) -> None:
        self.cursor.move(*step)

    def _paint(self, event: KeyEvent) -> None:
        x, y = (int(v) for v in self.cursor.coord)
        previous = self.tilemap.paint(x, y, self.brush)
        logger.debug("painted %d over %d at %d,%d", self.brush, previous, x, y)

    def _toggle_grid(self, event: KeyEvent) -> None:
        self.grid.visible = not self.grid.visible

    @property
    def brush(self) -> int:
        return self.palette[self._brush_position]

    def select_brush(self, position: int) -> int:
        """Make palette entry ``position`` (wrapping) the brush."""
        self._brush_position = position % len(self.palette)
        return self.brush

    def cycle_brush(self, step: int = 1) -> int:
        """Move the brush ``step`` entries along the palette."""
        return self.select_brush(self._brush_position + step)

    def update(self, delta: float) -> None:
        self.scene.update(delta)
        super().update(delta)

    def render(self) -> None:
        self.scene.render(self.engine.context, self.screen.rect)
        super().render()

    def terminate(self) -> None:
        for node in self._bindings:
            self.input.unsubscribe(node)
        self._bindings.clear()
        super().terminate()
