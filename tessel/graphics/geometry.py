"""
Tessel Geometry Helpers
=======================

Small value types and numeric helpers shared by the scene graph.
"""

import math
from typing import Any, Iterable, NamedTuple


def divceil(n: float, d: float) -> int:
    """Divide ``n`` by ``d`` and round up, e.g. ``divceil(17, 8) == 3``."""
    return math.ceil(n / d)


def includes_all(collection: Iterable[Any], items: Iterable[Any]) -> bool:
    """True if every element of ``items`` is present in ``collection``."""
    pool = list(collection)
    return all(item in pool for item in items)


class Vector2(NamedTuple):
    x: float
    y: float

    @classmethod
    def zero(cls) -> "Vector2":
        return cls(0, 0)

    def __add__(self, other: Any) -> "Vector2":
        ox, oy = other
        return Vector2(self.x + ox, self.y + oy)

    def scale(self, other: "Vector2") -> "Vector2":
        """Component-wise product."""
        return Vector2(self.x * other.x, self.y * other.y)


class Rect(NamedTuple):
    x: float
    y: float
    w: float
    h: float

    def translate(self, offset: Vector2) -> "Rect":
        """Same size, moved by ``offset``."""
        return Rect(self.x + offset.x, self.y + offset.y, self.w, self.h)

    def contains(self, x: float, y: float) -> bool:
        return self.x <= x < self.x + self.w and self.y <= y < self.y + self.h
