"""Circle, arc and regular-polygon point generation."""

from __future__ import annotations

import math
from typing import Iterator, List, Tuple, Union

from .geometry import Point
from .lines import LineAlgorithm, parse_algorithm

_DIRECTIONS = ((1, 1), (1, -1), (-1, 1), (-1, -1))
_AREA_COUNT = 9


def _symmetric(cx: int, cy: int, x: int, y: int, directions) -> Iterator[Point]:
    for sx, sy in directions:
        yield Point(cx + x * sx, cy + y * sy)
        yield Point(cx + y * sx, cy + x * sy)


def midpoint_circle(center: Point, radius: int) -> List[Point]:
    """Points of a circle by the midpoint algorithm, in generation order."""
    cx, cy = center.x, center.y
    x, y = 0, radius
    d = 5 - 4 * radius
    points = list(_symmetric(cx, cy, x, y, _DIRECTIONS[:2]))
    while x <= y:
        if d >= 0:
            x += 1
            y -= 1
            d += 8 * (x - y) + 20
        else:
            x += 1
            d += 8 * x + 12
        points.extend(_symmetric(cx, cy, x, y, _DIRECTIONS))
    return points


def bresenham_circle(center: Point, radius: int) -> List[Point]:
    """Points of a circle by Bresenham's algorithm, in generation order."""
    cx, cy = center.x, center.y
    x, y = 0, radius
    d = 3 - 2 * radius
    points = list(_symmetric(cx, cy, x, y, _DIRECTIONS[:2]))
    while x < y:
        if d >= 0:
            x += 1
            y -= 1
            d += 4 * (x - y) + 10
        else:
            x += 1
            d += 4 * x + 6
        points.extend(_symmetric(cx, cy, x, y, _DIRECTIONS))
    return points


def octant_of(dx: int, dy: int) -> int:
    """Index (0-7, counter-clockwise from +x) of the 45-degree sector holding (dx, dy)."""
    if dy > 0:
        if dx > 0:
            return 0 if dx > dy else 1
        return 3 if abs(dx) > dy else 2
    if dx < 0:
        return 4 if abs(dx) > abs(dy) else 5
    return 7 if dx > abs(dy) else 6


def arc_points(
    center: Point,
    radius: int,
    angle: float,
    algo: Union[str, LineAlgorithm] = "midpoint",
) -> List[Point]:
    """Points of the arc from 0 to ``angle`` degrees, counter-clockwise."""
    algorithm = parse_algorithm(algo)
    if algorithm is LineAlgorithm.MIDPOINT:
        dots = midpoint_circle(center, radius)
    elif algorithm is LineAlgorithm.BRESENHAM:
        dots = bresenham_circle(center, radius)
    else:
        raise ValueError(f"no circle algorithm named {algo!r}")
    if not 0 <= angle <= 360:
        raise ValueError(f"arc angle must be within [0, 360], got {angle}")

    cx, cy = center.x, center.y
    areas: List[List[Tuple[int, int]]] = [[] for _ in range(_AREA_COUNT)]
    for p in dots:
        dx, dy = p.x - cx, p.y - cy
        areas[octant_of(dx, dy)].append((dx, dy))

    filled = int(angle) // 45
    remaining = int(angle - filled * 45)
    relative = [pt for area in areas[:filled] for pt in area]

    if remaining:
        cut_x = int(radius * math.cos(2 * math.pi * angle / 360))
        area = areas[filled]
        matches = [i for i, (dx, _) in enumerate(area) if dx == cut_x]
        if matches:
            cut = matches[-1]
            relative.extend(area[:cut] if filled % 2 == 0 else area[cut:])

    return [Point(cx + dx, cy + dy) for dx, dy in relative]


def regular_polygon(center: Point, num_edges: int, radius: float = 100) -> List[Point]:
    """Vertices of a regular polygon, the first one on the +x axis."""
    if num_edges < 1:
        raise ValueError("a polygon needs at least one edge")
    return [
        Point(
            center.x + radius * math.cos(2 * math.pi * i / num_edges),
            center.y + radius * math.sin(2 * math.pi * i / num_edges),
        )
        for i in range(num_edges)
    ]