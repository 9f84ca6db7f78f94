"""Tessel configuration.

EditorConfig is the central configuration object, frozen after creation.
``load_config`` reads it from a TOML file and merges keyword overrides on
top; overrides win.

A config file either holds the keys at top level or inside a ``[tessel]``
table::

    [tessel]
    map_width = 32
    map_height = 24
    palette = [32, 33, 34, 35]
    seed = 7
"""

import logging
import tomllib
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

from tessel.errors import ConfigError

logger = logging.getLogger(__name__)

_INT_FIELDS = (
    "map_width", "map_height", "tile_width", "tile_height",
    "clear_color", "grid_color", "cursor_color", "tileset_columns", "tileset_rows",
)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass(frozen=True, slots=True)
class EditorConfig:
    """Configuration for the map editor.

    Attributes:
        map_width: Tile map width, in tiles.
        map_height: Tile map height, in tiles.
        tile_width: Width of one tile, in drawing units.
        tile_height: Height of one tile, in drawing units.
        clear_color: Gray level (0-255) the screen is cleared to.
        grid_color: Gray level of the grid overlay.
        cursor_color: Gray level of the map cursor.
        palette: Tileset cells the map is seeded from; the first one is
            the initial brush.
        tileset: Name of the tileset image.
        tileset_columns: Cells per tileset row.
        tileset_rows: Rows of cells in the tileset.
        seed: Seed for the initial map fill; None for a fresh random map.
        frame_delta: Seconds advanced per frame.
        canvas_scale: Drawing units per terminal character cell.

    """

    map_width: int = 20
    map_height: int = 20
    tile_width: int = 8
    tile_height: int = 8
    clear_color: int = 107
    grid_color: int = 117
    cursor_color: int = 168
    palette: Tuple[int, ...] = (32, 33, 34, 35)
    tileset: str = "resources/world.png"
    tileset_columns: int = 16
    tileset_rows: int = 16
    seed: Optional[int] = None
    frame_delta: float = 1 / 60
    canvas_scale: float = 8

    def __post_init__(self) -> None:
        for name in _INT_FIELDS:
            if not _is_int(getattr(self, name)):
                raise ConfigError(f"{name} must be an integer, got {getattr(self, name)!r}")
        for name in ("frame_delta", "canvas_scale"):
            if not _is_number(getattr(self, name)):
                raise ConfigError(f"{name} must be a number, got {getattr(self, name)!r}")
        if self.seed is not None and not (_is_int(self.seed) and self.seed >= 0):
            raise ConfigError(f"seed must be a non-negative integer, got {self.seed!r}")
        if not isinstance(self.palette, tuple) or not all(_is_int(t) for t in self.palette):
            raise ConfigError(f"palette must be a list of integers, got {self.palette!r}")
        if not isinstance(self.tileset, str):
            raise ConfigError(f"tileset must be a string, got {self.tileset!r}")
        for name in ("map_width", "map_height", "tile_width", "tile_height",
                     "tileset_columns", "tileset_rows"):
            if getattr(self, name) <= 0:
                raise ConfigError(f"{name} must be positive, got {getattr(self, name)}")
        for name in ("clear_color", "grid_color", "cursor_color"):
            if not 0 <= getattr(self, name) <= 255:
                raise ConfigError(f"{name} must be within 0-255, got {getattr(self, name)}")
        if not self.palette:
            raise ConfigError("palette must not be empty")
        cells = self.tileset_columns * self.tileset_rows
        for tile in self.palette:
            if not 0 <= tile < cells:
                raise ConfigError(f"palette tile {tile} is outside the {cells} cell tileset")
        if self.frame_delta <= 0:
            raise ConfigError(f"frame_delta must be positive, got {self.frame_delta}")
        if self.canvas_scale <= 0:
            raise ConfigError(f"canvas_scale must be positive, got {self.canvas_scale}")

    @property
    def screen_size(self) -> Tuple[int, int]:
        """Screen size in drawing units: the whole map, tile for tile."""
        return self.map_width * self.tile_width, self.map_height * self.tile_height


def load_config(path: Union[str, Path, None] = None, **overrides: Any) -> EditorConfig:
    """Load EditorConfig from ``path`` (if given), merging ``overrides``.

    Raises:
        ConfigError: If the file cannot be read or parsed, or holds unknown
            keys or invalid values.
    """
    file_config = _read_config(Path(path)) if path is not None else {}
    merged = {**file_config, **{k: v for k, v in overrides.items() if v is not None}}
    known = {f.name for f in fields(EditorConfig)}
    unknown = sorted(set(merged) - known)
    if unknown:
        raise ConfigError(f"unknown config keys: {', '.join(unknown)}")
    try:
        if "palette" in merged:
            merged["palette"] = tuple(merged["palette"])
        return EditorConfig(**merged)
    except TypeError as exc:
        raise ConfigError(str(exc)) from exc


def _read_config(path: Path) -> Dict[str, Any]:
    try:
        with path.open("rb") as fh:
            data = tomllib.load(fh)
    except OSError as exc:
        raise ConfigError(f"cannot read config {path}: {exc}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"invalid TOML in {path}: {exc}") from exc
    logger.debug("loaded config from %s", path)
    section = data.get("tessel", data)
    if not isinstance(section, dict):
        raise ConfigError(f"[tessel] in {path} must be a table")
    return dict(section)
