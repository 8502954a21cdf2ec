import pytest

from contour_grid.models import Point2D, Segment, ContourVertex


def make_segment(x1, y1, x2, y2):
    return Segment(Point2D(x1, y1), Point2D(x2, y2))


@pytest.fixture
def square_soup():
    # unit-2 square, mixed orientation and order
    return [
        make_segment(2, 0, 2, 2),
        make_segment(0, 0, 2, 0),
        make_segment(0, 2, 2, 2),
        make_segment(0, 2, 0, 0),
    ]


@pytest.fixture
def two_triangles_soup():
    return [
        make_segment(0, 0, 1, 0),
        make_segment(1, 0, 0, 1),
        make_segment(0, 1, 0, 0),
        make_segment(5, 5, 7, 5),
        make_segment(7, 5, 6, 8),
        make_segment(6, 8, 5, 5),
    ]


@pytest.fixture
def square_vertices():
    positions = [(0.0, 0.0, 0.3), (2.0, 0.0, 0.3), (2.0, 2.0, 0.3), (0.0, 2.0, 0.3)]
    n = len(positions)
    return [
        ContourVertex(position=p, front=(i + 1) % n, back=(i - 1) % n)
        for i, p in enumerate(positions)
    ]
