import pytest

from stashgrid.core.geometry import GridCoordinate, GridGeometry, Point, Rect


def test_to_cell_floors_positive_offsets(geometry):
    assert geometry.to_cell(Point(0, 0)) == GridCoordinate(0, 0)
    assert geometry.to_cell(Point(39.9, 40)) == GridCoordinate(0, 1)
    assert geometry.to_cell(Point(399, 120.5)) == GridCoordinate(9, 3)


def test_to_cell_floors_negative_offsets_toward_negative_infinity(geometry):
    assert geometry.to_cell(Point(-1, -0.5)) == GridCoordinate(-1, -1)
    assert geometry.to_cell(Point(-40, -41)) == GridCoordinate(-1, -2)


def test_snap_offset_rounds_down_to_whole_cells(geometry):
    assert geometry.snap_offset(Point(55, 119)) == Point(40, 80)
    assert geometry.snap_offset(Point(5, 5)) == Point(0, 0)


def test_cells_are_row_major(geometry):
    cells = list(GridGeometry(3, 2, 10).cells())
    assert cells[:4] == [GridCoordinate(0, 0), GridCoordinate(1, 0), GridCoordinate(2, 0), GridCoordinate(0, 1)]
    assert len(cells) == 6


def test_rect_contains_edges_and_grown():
    r = Rect(10, 10, 100, 50)
    assert r.contains(Point(10, 10))
    assert r.contains(Point(110, 60))
    assert not r.contains(Point(110.1, 60))
    g = r.grown(5)
    assert (g.x, g.y, g.w, g.h) == (5, 5, 110, 60)


def test_layout_at_builds_container_around_grid(geometry):
    layout = geometry.layout_at(Point(20, 30), margin=10)
    assert layout.grid == Rect(20, 30, 400, 400)
    assert layout.container == Rect(10, 20, 420, 420)


def test_invalid_geometry_rejected():
    with pytest.raises(ValueError):
        GridGeometry(0, 10, 40)
    with pytest.raises(ValueError):
        GridGeometry(10, 10, 0)
