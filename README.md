# rasterkit

Textbook raster graphics algorithms in plain Python, with no dependencies.

- `rasterkit.geometry`: the immutable `Point` used everywhere, with
  `swapped()`, `mirrored_y()` and `offset(dx, dy)`.
- `rasterkit.lines`: DDA, midpoint and Bresenham lines (`dda_line`,
  `midpoint_line`, `bresenham_line`), `rasterize_line`, which reduces a line of
  any direction to the first octant by mirroring and transposing, and
  `polygon_outline` for closed outlines.
- `rasterkit.circles`: `midpoint_circle` and `bresenham_circle`, `arc_points`
  (an arc from 0 degrees counter-clockwise to a given angle, cut octant by
  octant), `octant_of` and `regular_polygon`.
- `rasterkit.edgetable`: `EdgeItem`, `EdgeTable` and the scanline fill built
  on them (`build_edge_table`, `scanline_fill`).
- `rasterkit.events`: a small command model for interactive input:
  `CommandDispatcher` holds one active `EventHandler` and forwards key, mouse
  button, cursor and scroll events to it; Escape cancels and drops the command.
  `ScanlineCommand` collects polygon vertices from left-button presses,
  flipping y to a bottom-left origin.
- `rasterkit.render`: a pixel `Canvas` that draws all of the above and writes
  binary PPM images, and the `rasterkit` command.

## Installation

```
pip install .
```

Add the `test` extra (`pip install .[test]`) to run the test suite with pytest.

## Library use

```python
from rasterkit.geometry import Point
from rasterkit.lines import rasterize_line, polygon_outline
from rasterkit.circles import midpoint_circle, arc_points, regular_polygon
from rasterkit.edgetable import scanline_fill

pixels = rasterize_line(Point(0, 0), Point(10, 4), "bresenham")
ring = midpoint_circle(Point(50, 50), 20)
arc = arc_points(Point(50, 50), 20, 120, "midpoint")
hexagon = regular_polygon(Point(100, 100), 6, 100)
inside = scanline_fill([Point(10, 10), Point(60, 15), Point(40, 70)])
```

Algorithm names are `"dda"`, `"midpoint"` and `"bresenham"`, matched without
regard to case; `parse_algorithm` turns them into a `LineAlgorithm` and raises
`ValueError` for any other name. Some details worth knowing:

- `dda_line` returns no points for a zero-length line.
- `arc_points` accepts only `"midpoint"` and `"bresenham"`, and an angle
  within [0, 360]; anything else raises `ValueError`.
- `regular_polygon` puts its first vertex on the +x axis; the radius defaults
  to 100.
- `EdgeTable.dump()` returns a text listing of every scan line and its edges;
  `EdgeTable.effective()` logs that listing at debug level.

Drawing onto an image:

```python
from rasterkit.geometry import Point
from rasterkit.render import Canvas

canvas = Canvas(400, 300)
canvas.draw_regular_polygon(Point(200, 150), 5, "dda")
canvas.draw_arc(Point(200, 150), 60, 225, "bresenham")
canvas.draw_filled_polygon([Point(20, 20), Point(120, 40), Point(60, 120)])
with open("out.ppm", "wb") as fh:
    fh.write(canvas.to_ppm())
```

Coordinates have their origin at the bottom-left corner, with y pointing up;
pixels off the canvas are clipped. Each drawing method returns the pixels it
computed. Colours are RGB triples of floats in [0, 1]:

- polygon outlines are red for DDA, green for midpoint and cyan for Bresenham;
- arcs are red for midpoint and green for Bresenham;
- filled polygons are filled in cyan (0.0, 0.8, 0.8) and then outlined with
  the midpoint algorithm.

## Command line

The `rasterkit` command draws one figure and writes it as a PPM image, to
standard output by default. Canvas options come before the figure:

```
rasterkit [--width 800] [--height 600] [-o FILE] polygon --center X Y --edges N [--algo dda|midpoint|bresenham]
rasterkit [--width 800] [--height 600] [-o FILE] arc --center X Y --radius R --angle DEGREES [--algo midpoint|bresenham]
rasterkit [--width 800] [--height 600] [-o FILE] fill X,Y X,Y X,Y ...
```

For example:

```
rasterkit -o hexagon.ppm polygon --center 200 150 --edges 6 --algo midpoint
rasterkit --width 300 --height 200 -o arc.ppm arc --center 150 100 --radius 80 --angle 225 --algo bresenham
rasterkit -o fill.ppm fill 10,10 60,15 40,70
```

Run `rasterkit --help` or `rasterkit polygon --help` for the full list of
options.

## What it does not do

There is no window or interactive screen. `rasterkit.events` models how input
events reach a command, but nothing in the package opens a window or feeds it
real mouse and keyboard events; the only output is the in-memory `Canvas` and
the PPM images it writes.