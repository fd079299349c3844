"""An in-memory canvas for the drawing routines, and a command that renders to PPM."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence, Tuple, Union

from .circles import arc_points, regular_polygon
from .edgetable import scanline_fill
from .geometry import Point
from .lines import (
    Color,
    LineAlgorithm,
    outline_color,
    parse_algorithm,
    polygon_outline,
    rasterize_line,
)

BLACK: Color = (0.0, 0.0, 0.0)
FILL_COLOR: Color = (0.0, 0.8, 0.8)
ARC_COLOR: Color = (1.0, 0.0, 0.0)
BRESENHAM_ARC_COLOR: Color = (0.0, 1.0, 0.0)
POLYGON_RADIUS = 100

Algorithm = Union[str, LineAlgorithm]


def _to_byte(component: float) -> int:
    return max(0, min(255, round(component * 255)))


class Canvas:
    """A pixel grid with its origin at the bottom-left corner."""

    def __init__(self, width: int, height: int, background: Color = BLACK) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"canvas size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.background = background
        self._pixels: Dict[Tuple[int, int], Color] = {}

    def __contains__(self, xy: object) -> bool:
        if not isinstance(xy, tuple) or len(xy) != 2:
            return False
        x, y = xy
        return 0 <= x < self.width and 0 <= y < self.height

    @property
    def painted(self) -> Dict[Tuple[int, int], Color]:
        """A copy of every pixel that has been drawn."""
        return dict(self._pixels)

    def plot(self, point: Point, color: Color) -> None:
        """Paint one pixel; points off the canvas are clipped."""
        xy = (int(point.x), int(point.y))
        if xy in self:
            self._pixels[xy] = color

    def _plot_all(self, points: Iterable[Point], color: Color) -> None:
        for point in points:
            self.plot(point, color)

    def color_at(self, x: int, y: int) -> Color:
        """Colour of the pixel at (x, y)."""
        if (x, y) not in self:
            raise IndexError(f"pixel ({x}, {y}) is outside {self.width}x{self.height}")
        return self._pixels.get((x, y), self.background)

    def draw_line(
        self, start: Point, end: Point, color: Color, algo: Algorithm = "dda"
    ) -> List[Point]:
        """Draw a line segment and return its pixels."""
        points = rasterize_line(start, end, algo)
        self._plot_all(points, color)
        return points

    def draw_polygon(self, vertices: Iterable[Point], algo: Algorithm = "dda") -> List[Point]:
        """Outline a closed polygon in the colour belonging to ``algo``."""
        points = polygon_outline(vertices, algo)
        self._plot_all(points, outline_color(algo))
        return points

    def draw_regular_polygon(
        self, center: Point, num_edges: int, algo: Algorithm = "dda"
    ) -> List[Point]:
        """Outline a regular polygon of the standard radius around ``center``."""
        return self.draw_polygon(regular_polygon(center, num_edges, POLYGON_RADIUS), algo)

    def draw_arc(
        self, center: Point, radius: int, angle: float, algo: Algorithm = "midpoint"
    ) -> List[Point]:
        """Draw an arc from 0 to ``angle`` degrees; green for Bresenham, red otherwise."""
        color = (
            BRESENHAM_ARC_COLOR
            if parse_algorithm(algo) is LineAlgorithm.BRESENHAM
            else ARC_COLOR
        )
        points = arc_points(center, radius, angle, algo)
        self._plot_all(points, color)
        return points

    def draw_filled_polygon(self, vertices: Iterable[Point]) -> List[Point]:
        """Fill a polygon by scan lines, then outline it with the midpoint algorithm."""
        corners = list(vertices)
        points = scanline_fill(corners)
        self._plot_all(points, FILL_COLOR)
        self.draw_polygon(corners, LineAlgorithm.MIDPOINT)
        return points

    def to_ppm(self) -> bytes:
        """The canvas as a binary PPM image, top row first."""
        header = f"P6\n{self.width} {self.height}\n255\n".encode("ascii")
        body = bytearray()
        for y in reversed(range(self.height)):
            for x in range(self.width):
                body.extend(_to_byte(c) for c in self._pixels.get((x, y), self.background))
        return header + bytes(body)


def _vertex(text: str) -> Point:
    try:
        x, y = (int(part) for part in text.split(","))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected a vertex as X,Y, got {text!r}") from None
    return Point(x, y)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rasterkit", description="Rasterise shapes into a PPM image."
    )
    parser.add_argument("--width", type=int, default=800)
    parser.add_argument("--height", type=int, default=600)
    parser.add_argument("-o", "--output", default="-", help="output file, '-' for stdout")
    sub = parser.add_subparsers(dest="shape", required=True)

    polygon = sub.add_parser("polygon", help="regular polygon")
    polygon.add_argument("--center", type=int, nargs=2, metavar=("X", "Y"), required=True)
    polygon.add_argument("--edges", type=int, required=True)
    polygon.add_argument(
        "--algo", choices=[a.value for a in LineAlgorithm], default=LineAlgorithm.DDA.value
    )

    arc = sub.add_parser("arc", help="circular arc")
    arc.add_argument("--center", type=int, nargs=2, metavar=("X", "Y"), required=True)
    arc.add_argument("--radius", type=int, required=True)
    arc.add_argument("--angle", type=float, required=True)
    arc.add_argument(
        "--algo",
        choices=[LineAlgorithm.MIDPOINT.value, LineAlgorithm.BRESENHAM.value],
        default=LineAlgorithm.MIDPOINT.value,
    )

    fill = sub.add_parser("fill", help="scan-line filled polygon")
    fill.add_argument("vertices", type=_vertex, nargs="+", metavar="X,Y")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Render one shape and write it as PPM."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    try:
        canvas = Canvas(args.width, args.height)
        if args.shape == "polygon":
            canvas.draw_regular_polygon(Point(*args.center), args.edges, args.algo)
        elif args.shape == "arc":
            canvas.draw_arc(Point(*args.center), args.radius, args.angle, args.algo)
        else:
            canvas.draw_filled_polygon(args.vertices)
    except ValueError as exc:
        parser.error(str(exc))
    image = canvas.to_ppm()
    if args.output == "-":
        sys.stdout.buffer.write(image)
        sys.stdout.buffer.flush()
    else:
        Path(args.output).write_bytes(image)
    return 0