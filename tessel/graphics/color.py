"""
Tessel Colors
=============

Colors are RGBA tuples of floats normalized to ``0.0 - 1.0``. The
constructors take 8-bit channel values, the way tilesets and palettes
usually specify them.
"""

from typing import NamedTuple


class Color(NamedTuple):
    r: float
    g: float
    b: float
    a: float = 1.0

    @classmethod
    def rgba(cls, r: int, g: int, b: int, a: int) -> "Color":
        """Build a color from 0-255 channel values."""
        return cls(r / 255.0, g / 255.0, b / 255.0, a / 255.0)

    @classmethod
    def rgb(cls, r: int, g: int, b: int) -> "Color":
        """Opaque color from 0-255 channel values."""
        return cls.rgba(r, g, b, 255)

    @classmethod
    def mono(cls, c: int) -> "Color":
        """Opaque gray of level ``c`` (0-255)."""
        return cls.rgb(c, c, c)

    def to_rgb8(self) -> tuple:
        return tuple(round(channel * 255) for channel in (self.r, self.g, self.b))

    def to_hex(self) -> str:
        """``#rrggbb`` form, alpha dropped."""
        r, g, b = self.to_rgb8()
        return f"#{r:02x}{g:02x}{b:02x}"
