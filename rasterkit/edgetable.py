"""Edge tables and scan-line polygon filling."""

from __future__ import annotations

import logging
from bisect import insort_right
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from .geometry import Point

logger = logging.getLogger(__name__)

_COINCIDENT = 1e-2


@dataclass(frozen=True)
class EdgeItem:
    """One polygon edge as seen from a scan line."""

    ymax: int
    x: float
    deltax: float

    def _advanced(self) -> EdgeItem:
        return EdgeItem(self.ymax, self.x + self.deltax, self.deltax)


def _sort_key(item: EdgeItem) -> Tuple[float, float]:
    return (item.x, item.deltax)


def _snap(value: float) -> int:
    return int(value + 0.5)


def edge_between(a: Point, b: Point) -> EdgeItem:
    """Edge record for the segment a-b, starting at its lower end."""
    ymax = max(a.y, b.y)
    x = a.x if a.y < b.y else b.x
    if a.y != b.y and a.x != b.x:
        if a.x < b.x:
            deltax = 1 / ((b.y - a.y) / (b.x - a.x))
        else:
            deltax = 1 / ((a.y - b.y) / (a.x - b.x))
    else:
        deltax = 0.0
    return EdgeItem(ymax, float(x), float(deltax))


class EdgeTable:
    """Edges bucketed by scan line, each bucket kept sorted by (x, deltax)."""

    def __init__(self, bottom: int, top: int) -> None:
        self.bottom = bottom
        self.top = top
        self._rows: Dict[int, List[EdgeItem]] = {y: [] for y in range(bottom, top + 1)}

    def _row(self, y: int) -> List[EdgeItem]:
        try:
            return self._rows[y]
        except KeyError:
            raise KeyError(
                f"scan line {y} is outside [{self.bottom}, {self.top}]"
            ) from None

    def __iter__(self) -> Iterator[Tuple[int, Tuple[EdgeItem, ...]]]:
        for y in range(self.bottom, self.top + 1):
            yield y, tuple(self._rows[y])

    def insert(self, y: int, item: EdgeItem) -> None:
        """Insert ``item`` at scan line ``y``, after any equal entries."""
        insort_right(self._row(y), item, key=_sort_key)

    def extend(self, y: int, items: Iterable[EdgeItem]) -> None:
        """Insert every item of ``items`` at scan line ``y``, in order."""
        for item in items:
            self.insert(y, item)

    def items_at(self, y: int) -> Tuple[EdgeItem, ...]:
        """The edges at scan line ``y``, sorted."""
        return tuple(self._row(y))

    def effective(self) -> EdgeTable:
        """Active edge table: each line carries the still-active edges of the line below."""
        table = EdgeTable(self.bottom, self.top)
        previous: Optional[List[EdgeItem]] = None
        for y in range(self.bottom, self.top + 1):
            current = list(self._rows[y])
            if previous is not None:
                current.extend(item._advanced() for item in previous if y <= item.ymax)
            table.extend(y, current)
            previous = current
        logger.debug("%s", table.dump())
        return table

    def fill_points(self) -> List[Point]:
        """Pixels between intersection pairs, read from an active edge table."""
        points: List[Point] = []
        for y, items in self:
            crossings = 0
            last: Optional[EdgeItem] = None
            for cur in items:
                if last is not None:
                    if abs(last.x - cur.x) < _COINCIDENT:
                        if y == cur.ymax and y == last.ymax:
                            crossings += 1
                        elif y < cur.ymax and y < last.ymax:
                            crossings += 1
                        else:
                            crossings += 2
                    else:
                        crossings += 1
                    if crossings % 2:
                        points.extend(
                            Point(x, y) for x in range(_snap(last.x), _snap(cur.x) + 1)
                        )
                last = cur
        return points

    def dump(self) -> str:
        """Text listing of every scan line and its edges."""
        lines = []
        for y, items in self:
            entries = "".join(
                f" |{item.ymax:d}|{item.x:f}|{item.deltax:f}| -> " for item in items
            )
            lines.append(f"y:{y:d}: {entries} \n")
        return "".join(lines)


def build_edge_table(vertices: Iterable[Point]) -> EdgeTable:
    """Edge table of the closed polygon through integer ``vertices``."""
    corners = list(vertices)
    if not corners:
        raise ValueError("a polygon needs at least one vertex")
    bottom = min(p.y for p in corners)
    top = max(0, max(p.y for p in corners))
    table = EdgeTable(bottom, top)
    for a, b in zip(corners, corners[1:] + corners[:1]):
        table.insert(min(_snap(a.y), _snap(b.y)), edge_between(a, b))
    return table


def scanline_fill(vertices: Iterable[Point]) -> List[Point]:
    """Interior pixels of the polygon through ``vertices`` by scan-line filling."""
    return build_edge_table(vertices).effective().fill_points()