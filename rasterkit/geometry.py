"""Plain 2D points used by the rasterisation routines."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

Number = Union[int, float]


@dataclass(frozen=True)
class Point:
    """An immutable point on the drawing plane."""

    x: Number
    y: Number

    def swapped(self) -> Point:
        """Return the point reflected across the line y = x."""
        return Point(self.y, self.x)

    def mirrored_y(self) -> Point:
        """Return the point reflected across the x axis."""
        return Point(self.x, -self.y)

    def offset(self, dx: Number, dy: Number) -> Point:
        """Return the point moved by (dx, dy)."""
        return Point(self.x + dx, self.y + dy)