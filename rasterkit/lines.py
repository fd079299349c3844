"""Line rasterisation: DDA, Bresenham and midpoint algorithms."""

from __future__ import annotations

import enum
from typing import Callable, Iterable, List, Tuple, Union

from .geometry import Point

Color = Tuple[float, float, float]

WHITE: Color = (1.0, 1.0, 1.0)


class LineAlgorithm(enum.Enum):
    """Supported line drawing algorithms."""

    DDA = "dda"
    MIDPOINT = "midpoint"
    BRESENHAM = "bresenham"


_OUTLINE_COLORS = {
    LineAlgorithm.DDA: (1.0, 0.0, 0.0),
    LineAlgorithm.MIDPOINT: (0.0, 1.0, 0.0),
    LineAlgorithm.BRESENHAM: (0.0, 0.9, 0.9),
}


def parse_algorithm(name: Union[str, LineAlgorithm]) -> LineAlgorithm:
    """Resolve an algorithm name, ignoring case."""
    if isinstance(name, LineAlgorithm):
        return name
    try:
        return LineAlgorithm(str(name).lower())
    except ValueError:
        raise ValueError(f"unknown line algorithm: {name!r}") from None


def outline_color(algo: Union[str, LineAlgorithm]) -> Color:
    """Colour used to outline polygons drawn with ``algo``; white if unknown."""
    try:
        return _OUTLINE_COLORS[parse_algorithm(algo)]
    except ValueError:
        return WHITE


def _snap(value: float) -> int:
    """Add one half and truncate toward zero."""
    return int(value + 0.5)


def dda_line(start: Point, end: Point) -> List[Point]:
    """Digital differential analyser; a zero-length line yields no points."""
    dx = end.x - start.x
    dy = end.y - start.y
    steps = int(max(abs(dx), abs(dy)))
    if steps == 0:
        return []
    x, y = float(start.x), float(start.y)
    x_step, y_step = dx / steps, dy / steps
    points = []
    for _ in range(steps + 1):
        points.append(Point(_snap(x), _snap(y)))
        x += x_step
        y += y_step
    return points


def bresenham_line(start: Point, end: Point) -> List[Point]:
    """Bresenham's algorithm for lines with slope in [0, 1] going right."""
    dx = end.x - start.x
    dy = end.y - start.y
    keep = 2 * dy
    climb = 2 * dy - 2 * dx
    d = 2 * dy - dx
    x, y = start.x, start.y
    points = []
    while x <= end.x:
        points.append(Point(_snap(x), _snap(y)))
        x += 1
        if d < 0:
            d += keep
        else:
            y += 1
            d += climb
    return points


def midpoint_line(start: Point, end: Point) -> List[Point]:
    """Midpoint algorithm for lines with slope in [0, 1] going right."""
    a = start.y - end.y
    b = end.x - start.x
    d = 2 * a + b
    keep = 2 * a
    climb = 2 * (a + b)
    x, y = start.x, start.y
    points = []
    while x <= end.x:
        points.append(Point(_snap(x), _snap(y)))
        x += 1
        if d < 0:
            y += 1
            d += climb
        else:
            d += keep
    return points


_ALGORITHMS: dict = {
    LineAlgorithm.DDA: dda_line,
    LineAlgorithm.MIDPOINT: midpoint_line,
    LineAlgorithm.BRESENHAM: bresenham_line,
}


def rasterize_line(
    start: Point, end: Point, algo: Union[str, LineAlgorithm] = "dda"
) -> List[Point]:
    """Rasterise a line of any direction by reducing it to the first octant."""
    draw: Callable[[Point, Point], List[Point]] = _ALGORITHMS[parse_algorithm(algo)]
    if start.x > end.x:
        start, end = end, start
    dx = end.x - start.x
    dy = end.y - start.y
    mirror = dy < 0
    if mirror:
        start, end = start.mirrored_y(), end.mirrored_y()
    transpose = abs(dx) < abs(dy)
    if transpose:
        start, end = start.swapped(), end.swapped()

    points = []
    for p in draw(start, end):
        if transpose:
            p = p.swapped()
        if mirror:
            p = p.mirrored_y()
        points.append(Point(_snap(p.x), _snap(p.y)))
    return points


def polygon_outline(
    vertices: Iterable[Point], algo: Union[str, LineAlgorithm] = "dda"
) -> List[Point]:
    """Pixels of the closed outline through ``vertices``, edge by edge."""
    corners = list(vertices)
    if not corners:
        raise ValueError("a polygon needs at least one vertex")
    points: List[Point] = []
    for a, b in zip(corners, corners[1:] + corners[:1]):
        points.extend(rasterize_line(a, b, algo))
    return points