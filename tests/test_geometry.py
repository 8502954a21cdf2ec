import numpy as np

from contour_grid.models import Point2D, Polygon, Segment, OccupancyGrid
from contour_grid.utils.geometry import (
    point_in_polygon,
    points_in_polygon,
    polygon_signed_area,
)

SQUARE = [(0.0, 0.0), (2.0, 0.0), (2.0, 2.0), (0.0, 2.0)]
BOWTIE = [(0.0, 0.0), (2.0, 2.0), (2.0, 0.0), (0.0, 2.0)]


def test_point_in_square():
    assert point_in_polygon(1.0, 1.0, SQUARE)
    assert not point_in_polygon(3.0, 1.0, SQUARE)
    assert not point_in_polygon(1.0, -0.5, SQUARE)


def test_fewer_than_three_vertices_contains_nothing():
    assert not point_in_polygon(0.5, 0.0, [(0.0, 0.0), (1.0, 0.0)])


def test_vectorized_matches_scalar():
    rng = np.random.default_rng(0)
    xs = rng.uniform(-1, 3, 200)
    ys = rng.uniform(-1, 3, 200)
    poly = [(0.0, 0.0), (2.5, 0.3), (1.0, 1.0), (2.0, 2.5), (-0.5, 1.5)]

    vec = points_in_polygon(xs, ys, poly)

    assert vec.tolist() == [point_in_polygon(x, y, poly) for x, y in zip(xs, ys)]


def test_self_intersecting_polygon_follows_even_odd_rule():
    # side lobes are inside, the notches above and below the crossing are not
    assert point_in_polygon(0.2, 0.8, BOWTIE)
    assert point_in_polygon(1.8, 1.2, BOWTIE)
    assert not point_in_polygon(1.0, 0.4, BOWTIE)
    assert not point_in_polygon(1.0, 1.6, BOWTIE)


def test_signed_area_orientation():
    assert polygon_signed_area(SQUARE) == 4.0
    assert polygon_signed_area(list(reversed(SQUARE))) == -4.0


def test_polygon_equality_ignores_start_and_direction():
    pts = [Point2D(*p) for p in SQUARE]

    assert Polygon(pts) == Polygon(pts[2:] + pts[:2])
    assert Polygon(pts) == Polygon(list(reversed(pts)))
    assert Polygon(pts).area() == 4.0


def test_segment_orientation_helpers():
    seg = Segment(Point2D(1, 1), Point2D(0, 5))

    assert seg.canonical() == Segment(Point2D(0, 5), Point2D(1, 1))
    assert seg.oriented_from(Point2D(0, 5)) == Segment(Point2D(0, 5), Point2D(1, 1))
    assert seg.oriented_from(Point2D(9, 9)) is None


def test_point_projection_drops_z():
    assert Point2D.from_position((1, 2, 3)) == Point2D(1.0, 2.0)


def test_grid_index_mapping():
    grid = OccupancyGrid(resolution=0.5, width=4, height=3, origin=Point2D(-1.0, 2.0))

    assert grid.index_of(-1.0, 2.0) == 0
    assert grid.index_of(0.26, 2.9) == 2 + 4 * 1
    assert not grid.in_range(grid.index_of(-1.1, 2.0))
    assert grid.cell_center(0, 0) == (-0.75, 2.25)


def test_grid_message_layout():
    grid = OccupancyGrid(resolution=1.0, width=2, height=1, origin=Point2D(3.0, 4.0))
    grid.cells[1] = 100

    msg = grid.to_message()

    assert msg["info"] == {
        "resolution": 1.0,
        "width": 2,
        "height": 1,
        "origin": {"x": 3.0, "y": 4.0},
    }
    assert msg["data"] == [0, 100]


def test_polygon_contains_point_uses_bbox_and_even_odd_rule():
    poly = Polygon([Point2D(*p) for p in BOWTIE])

    assert poly.contains_point(0.2, 0.8)
    assert not poly.contains_point(1.0, 0.4)
    assert not poly.contains_point(5.0, 1.0)
