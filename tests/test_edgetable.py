import pytest

from rasterkit.edgetable import (
    EdgeItem,
    EdgeTable,
    build_edge_table,
    edge_between,
    scanline_fill,
)
from rasterkit.geometry import Point

SQUARE = [Point(0, 0), Point(4, 0), Point(4, 4), Point(0, 4)]
TRIANGLE = [Point(0, 0), Point(8, 0), Point(4, 6)]


def test_edge_between_is_symmetric():
    a, b = Point(1, 2), Point(5, 9)
    assert edge_between(a, b) == edge_between(b, a)


def test_edge_between_starts_at_lower_end():
    edge = edge_between(Point(7, 10), Point(3, 2))
    assert edge.ymax == 10
    assert edge.x == 3


def test_horizontal_and_vertical_edges_have_no_slope():
    assert edge_between(Point(0, 3), Point(6, 3)).deltax == 0
    assert edge_between(Point(2, 0), Point(2, 5)).deltax == 0


def test_insert_keeps_row_sorted():
    table = EdgeTable(0, 0)
    for item in [EdgeItem(3, 5.0, 1.0), EdgeItem(3, 1.0, 0.0), EdgeItem(3, 5.0, -1.0)]:
        table.insert(0, item)
    row = table.items_at(0)
    assert [(e.x, e.deltax) for e in row] == sorted((e.x, e.deltax) for e in row)


def test_insert_places_equal_entries_after_existing():
    table = EdgeTable(0, 0)
    first = EdgeItem(1, 2.0, 0.0)
    second = EdgeItem(5, 2.0, 0.0)
    table.extend(0, [first, second])
    assert table.items_at(0) == (first, second)


def test_insert_outside_range_raises():
    table = EdgeTable(0, 3)
    with pytest.raises(KeyError):
        table.insert(4, EdgeItem(4, 0.0, 0.0))
    with pytest.raises(KeyError):
        table.items_at(-1)


def test_new_table_has_empty_rows_for_whole_range():
    table = EdgeTable(2, 5)
    assert [y for y, _ in table] == [2, 3, 4, 5]
    assert all(items == () for _, items in table)


def test_effective_advances_active_edges():
    table = EdgeTable(0, 2)
    table.insert(0, EdgeItem(2, 1.0, 0.5))
    active = table.effective()
    assert active.items_at(0) == (EdgeItem(2, 1.0, 0.5),)
    assert active.items_at(1) == (EdgeItem(2, 1.5, 0.5),)
    assert len(active.items_at(2)) == 1


def test_effective_drops_finished_edges():
    table = EdgeTable(0, 3)
    table.insert(0, EdgeItem(1, 0.0, 0.0))
    active = table.effective()
    assert len(active.items_at(1)) == 1
    assert active.items_at(2) == ()
    assert active.items_at(3) == ()


def test_effective_rows_are_sorted():
    active = build_edge_table(TRIANGLE).effective()
    for _, items in active:
        keys = [(e.x, e.deltax) for e in items]
        assert keys == sorted(keys)


def test_dump_format():
    table = EdgeTable(0, 0)
    table.insert(0, EdgeItem(3, 1.0, 0.5))
    assert table.dump() == "y:0:  |3|1.000000|0.500000| ->  \n"


def test_build_edge_table_range():
    table = build_edge_table([Point(0, 2), Point(5, 7), Point(9, 3)])
    assert table.bottom == 2
    assert table.top == 7


def test_build_edge_table_top_never_below_zero():
    table = build_edge_table([Point(0, -5), Point(3, -2), Point(6, -4)])
    assert table.bottom == -5
    assert table.top == 0


def test_build_edge_table_records_every_edge():
    table = build_edge_table(SQUARE)
    assert sum(len(items) for _, items in table) == len(SQUARE)


def test_build_edge_table_rejects_empty():
    with pytest.raises(ValueError):
        build_edge_table([])


def test_scanline_fill_matches_pipeline():
    assert scanline_fill(TRIANGLE) == build_edge_table(TRIANGLE).effective().fill_points()


def test_scanline_fill_square_covers_interior_rows():
    points = set((p.x, p.y) for p in scanline_fill(SQUARE))
    for y in range(1, 4):
        assert {(x, y) for x in range(0, 5)} <= points


def test_scanline_fill_stays_within_bounding_box():
    for polygon in (SQUARE, TRIANGLE):
        xs = [p.x for p in polygon]
        ys = [p.y for p in polygon]
        for p in scanline_fill(polygon):
            assert min(xs) <= p.x <= max(xs)
            assert min(ys) <= p.y <= max(ys)