import numpy as np
import pytest

from contour_grid.models import BoundingBox, OccupancyGrid, Point2D, Polygon
from contour_grid.stages.grid_allocator import allocate_grid
from contour_grid.stages.rasterizer import rasterize, candidate_range


def _square(x0, y0, side):
    return Polygon([
        Point2D(x0, y0),
        Point2D(x0 + side, y0),
        Point2D(x0 + side, y0 + side),
        Point2D(x0, y0 + side),
    ])


def test_two_by_two_square_fills_every_cell():
    grid = allocate_grid(BoundingBox(0, 2, 0, 2), resolution=1.0, margin=1.0)

    out = rasterize(grid, [_square(0, 0, 2)], index_policy="reject", workers=1)

    assert out.width == out.height == 2
    assert out.cells.tolist() == [100, 100, 100, 100]


def test_input_grid_is_not_mutated():
    grid = allocate_grid(BoundingBox(0, 2, 0, 2), resolution=1.0, margin=1.0)

    rasterize(grid, [_square(0, 0, 2)], index_policy="reject", workers=1)

    assert not grid.cells.any()


@pytest.mark.parametrize("side,resolution", [(1.0, 0.1), (2.0, 0.05), (3.0, 0.25)])
def test_square_occupies_about_side_over_resolution_squared(side, resolution):
    poly = _square(0.3, -1.7, side)
    grid = allocate_grid(poly.bbox, resolution=resolution, margin=1.2)

    out = rasterize(grid, [poly], index_policy="reject", workers=1)

    per_edge = side / resolution
    assert abs(out.occupied_count() - per_edge ** 2) <= 4 * per_edge


def test_only_free_and_occupied_values_are_written():
    poly = Polygon([Point2D(0, 0), Point2D(4, 0), Point2D(2, 3)])
    grid = allocate_grid(poly.bbox, resolution=0.1, margin=1.2)

    out = rasterize(grid, [poly], index_policy="reject", workers=1)

    assert set(np.unique(out.cells).tolist()) == {0, 100}


def test_polygon_outside_grid_leaves_grid_free():
    grid = allocate_grid(BoundingBox(0, 2, 0, 2), resolution=0.1, margin=1.2)

    out = rasterize(grid, [_square(100, 100, 3)], index_policy="reject", workers=1)

    assert out.occupied_count() == 0


def test_concave_notch_stays_free():
    # U shape: notch between x=1..2, y=1..3
    poly = Polygon([
        Point2D(0, 0), Point2D(3, 0), Point2D(3, 3), Point2D(2, 3),
        Point2D(2, 1), Point2D(1, 1), Point2D(1, 3), Point2D(0, 3),
    ])
    grid = allocate_grid(poly.bbox, resolution=1.0, margin=1.0)

    out = rasterize(grid, [poly], index_policy="reject", workers=1)

    cells = out.as_array()
    assert cells[0].tolist() == [100, 100, 100]
    assert cells[1].tolist() == [100, 0, 100]
    assert cells[2].tolist() == [100, 0, 100]


def test_overlapping_polygons_mark_union():
    a, b = _square(0, 0, 2), _square(1, 1, 2)
    grid = allocate_grid(a.bbox.union(b.bbox), resolution=1.0, margin=1.0)

    out = rasterize(grid, [a, b], index_policy="reject", workers=1)

    assert out.occupied_count() == 7


def test_threaded_bands_match_single_thread():
    polys = [
        Polygon([Point2D(0, 0), Point2D(5, 0.5), Point2D(3, 4)]),
        _square(2, 2, 3),
    ]
    grid = allocate_grid(BoundingBox(0, 5, 0, 5), resolution=0.1, margin=1.2)

    single = rasterize(grid, polys, index_policy="reject", workers=1)
    threaded = rasterize(grid, polys, index_policy="reject", workers=4)

    assert np.array_equal(single.cells, threaded.cells)


def test_clamp_and_reject_agree_away_from_edges():
    poly = _square(0, 0, 2)
    grid = allocate_grid(poly.bbox, resolution=0.1, margin=1.2)

    rejected = rasterize(grid, [poly], index_policy="reject", workers=1)
    clamped = rasterize(grid, [poly], index_policy="clamp", workers=1)

    assert np.array_equal(rejected.cells, clamped.cells)


def test_unknown_index_policy_raises():
    grid = OccupancyGrid(resolution=1.0, width=2, height=2, origin=Point2D(0, 0))

    with pytest.raises(ValueError):
        rasterize(grid, [], index_policy="wrap")


def test_candidate_range_clips_to_grid():
    assert candidate_range(0.0, 2.0, 0.0, 1.0, 2) == (0, 1)
    assert candidate_range(-5.0, 0.4, 0.0, 1.0, 3) is None
    assert candidate_range(-5.0, 10.0, 0.0, 1.0, 3) == (0, 2)
