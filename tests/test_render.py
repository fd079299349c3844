import pytest

from rasterkit.circles import arc_points
from rasterkit.edgetable import scanline_fill
from rasterkit.geometry import Point
from rasterkit.lines import polygon_outline, rasterize_line
from rasterkit.render import Canvas, main

RED = (1.0, 0.0, 0.0)
GREEN = (0.0, 1.0, 0.0)
FILL = (0.0, 0.8, 0.8)
BLACK = (0.0, 0.0, 0.0)


def test_plot_and_color_at():
    canvas = Canvas(10, 10)
    canvas.plot(Point(3, 4), RED)
    assert canvas.color_at(3, 4) == RED
    assert canvas.color_at(4, 3) == BLACK


def test_plot_clips_outside_points():
    canvas = Canvas(5, 5)
    canvas.plot(Point(5, 0), RED)
    canvas.plot(Point(-1, 2), RED)
    assert canvas.painted == {}


def test_color_at_outside_raises():
    canvas = Canvas(5, 5)
    with pytest.raises(IndexError):
        canvas.color_at(5, 5)


def test_invalid_size_raises():
    with pytest.raises(ValueError):
        Canvas(0, 10)


@pytest.mark.parametrize("algo", ["dda", "midpoint", "bresenham"])
def test_draw_line_paints_every_rasterised_pixel(algo):
    canvas = Canvas(50, 50)
    start, end = Point(2, 3), Point(40, 20)
    points = canvas.draw_line(start, end, GREEN, algo)
    assert points == rasterize_line(start, end, algo)
    assert all(canvas.color_at(p.x, p.y) == GREEN for p in points)


def test_draw_polygon_uses_algorithm_colour():
    canvas = Canvas(50, 50)
    square = [Point(5, 5), Point(20, 5), Point(20, 20), Point(5, 20)]
    points = canvas.draw_polygon(square, "DDA")
    assert points == polygon_outline(square, "dda")
    assert canvas.color_at(5, 5) == RED
    assert set(canvas.painted) == {(p.x, p.y) for p in points}


def test_draw_regular_polygon_first_vertex_on_x_axis():
    canvas = Canvas(400, 400)
    canvas.draw_regular_polygon(Point(200, 200), 6, "midpoint")
    assert canvas.color_at(300, 200) == GREEN


def test_draw_regular_polygon_unknown_algorithm():
    with pytest.raises(ValueError):
        Canvas(400, 400).draw_regular_polygon(Point(200, 200), 5, "spline")


@pytest.mark.parametrize("algo,color", [("midpoint", RED), ("bresenham", GREEN)])
def test_draw_arc_colour_and_points(algo, color):
    canvas = Canvas(200, 200)
    center = Point(100, 100)
    points = canvas.draw_arc(center, 50, 135, algo)
    assert points == arc_points(center, 50, 135, algo)
    assert points
    assert all(canvas.color_at(p.x, p.y) == color for p in points)


def test_draw_filled_polygon_fills_interior_and_outlines():
    canvas = Canvas(50, 50)
    square = [Point(10, 10), Point(30, 10), Point(30, 30), Point(10, 30)]
    filled = canvas.draw_filled_polygon(square)
    assert filled == scanline_fill(square)
    outline = {(p.x, p.y) for p in polygon_outline(square, "midpoint")}
    assert canvas.color_at(20, 20) == FILL
    assert all(canvas.color_at(*xy) == GREEN for xy in outline)
    assert canvas.color_at(40, 40) == BLACK


def test_to_ppm_layout():
    canvas = Canvas(2, 2)
    canvas.plot(Point(0, 0), RED)
    image = canvas.to_ppm()
    header = b"P6\n2 2\n255\n"
    assert image == header + bytes(6) + b"\xff\x00\x00" + bytes(3)


def test_to_ppm_size_matches_dimensions():
    canvas = Canvas(7, 3)
    image = canvas.to_ppm()
    header = b"P6\n7 3\n255\n"
    assert image.startswith(header)
    assert len(image) == len(header) + 7 * 3 * 3


def test_main_polygon_writes_ppm(tmp_path):
    out = tmp_path / "poly.ppm"
    code = main(
        ["--width", "300", "--height", "300", "-o", str(out),
         "polygon", "--center", "150", "150", "--edges", "5"]
    )
    data = out.read_bytes()
    assert code == 0
    assert data.startswith(b"P6\n300 300\n255\n")
    assert b"\xff\x00\x00" in data


def test_main_fill_matches_canvas(tmp_path):
    out = tmp_path / "fill.ppm"
    main(["--width", "40", "--height", "40", "-o", str(out),
          "fill", "5,5", "30,5", "30,30", "5,30"])
    canvas = Canvas(40, 40)
    canvas.draw_filled_polygon([Point(5, 5), Point(30, 5), Point(30, 30), Point(5, 30)])
    assert out.read_bytes() == canvas.to_ppm()


def test_main_arc_matches_canvas(tmp_path):
    out = tmp_path / "arc.ppm"
    main(["--width", "100", "--height", "100", "-o", str(out),
          "arc", "--center", "50", "50", "--radius", "30", "--angle", "200",
          "--algo", "bresenham"])
    canvas = Canvas(100, 100)
    canvas.draw_arc(Point(50, 50), 30, 200, "bresenham")
    assert out.read_bytes() == canvas.to_ppm()


def test_main_rejects_bad_vertex(tmp_path):
    with pytest.raises(SystemExit) as info:
        main(["-o", str(tmp_path / "x.ppm"), "fill", "1;2"])
    assert info.value.code == 2


def test_main_rejects_bad_angle(tmp_path):
    with pytest.raises(SystemExit) as info:
        main(["-o", str(tmp_path / "x.ppm"), "arc", "--center", "1", "1",
              "--radius", "5", "--angle", "400"])
    assert info.value.code == 2