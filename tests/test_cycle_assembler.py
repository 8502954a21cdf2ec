import random

import pytest

from contour_grid.models import Point2D, Segment
from contour_grid.errors import MalformedContour
from contour_grid.stages.canonicalizer import canonicalize_segments
from contour_grid.stages.cycle_assembler import assemble_cycles

from conftest import make_segment


def test_square_assembles_into_one_four_point_polygon(square_soup):
    assembly = assemble_cycles(canonicalize_segments(square_soup))

    assert assembly.complete
    assert len(assembly) == 1
    poly = assembly[0]
    assert len(poly) == 4
    assert set(poly.points) == {Point2D(0, 0), Point2D(2, 0), Point2D(2, 2), Point2D(0, 2)}


def test_each_cycle_uses_all_and_only_its_segments(two_triangles_soup):
    segments = canonicalize_segments(two_triangles_soup)

    assembly = assemble_cycles(segments)

    assert len(assembly) == 2
    used = []
    for poly in assembly:
        assert len(poly) == 3
        used.extend(poly.canonical_segments())
    assert sorted(used) == segments


def test_point_count_matches_consumed_segments():
    # hexagon
    pts = [(0, 0), (2, 0), (3, 1), (2, 2), (0, 2), (-1, 1)]
    soup = [make_segment(*pts[i], *pts[(i + 1) % 6]) for i in range(6)]

    assembly = assemble_cycles(canonicalize_segments(soup))

    assert len(assembly) == 1
    assert len(assembly[0]) == 6


def test_single_unmatched_segment_raises():
    with pytest.raises(MalformedContour) as excinfo:
        assemble_cycles([make_segment(0, 0, 1, 0)])

    assert excinfo.value.endpoint == Point2D(1, 0)
    assert excinfo.value.segment == make_segment(0, 0, 1, 0)


def test_open_chain_after_closed_square_raises_and_keeps_closed(square_soup):
    soup = square_soup + [make_segment(5, 5, 6, 6)]

    with pytest.raises(MalformedContour) as excinfo:
        assemble_cycles(canonicalize_segments(soup))

    assert len(excinfo.value.polygons) == 1


def test_three_sided_square_raises():
    soup = [make_segment(0, 0, 2, 0), make_segment(2, 0, 2, 2), make_segment(2, 2, 0, 2)]

    with pytest.raises(MalformedContour):
        assemble_cycles(canonicalize_segments(soup))


def test_partial_mode_flags_unmatched_segments(square_soup):
    dangling = make_segment(5, 5, 6, 6)

    assembly = assemble_cycles(canonicalize_segments(square_soup + [dangling]), allow_partial=True)

    assert not assembly.complete
    assert len(assembly.polygons) == 1
    assert assembly.unmatched == [dangling]


def test_degenerate_segment_is_excluded():
    p = Point2D(1, 1)

    assembly = assemble_cycles([Segment(p, p)])

    assert len(assembly) == 0
    assert assembly.complete


def test_empty_input_gives_no_polygons():
    assembly = assemble_cycles([])

    assert list(assembly) == []
    assert assembly.complete


def test_result_is_deterministic_under_permutation():
    # two triangles touching at (0, 0): several candidates at the shared vertex
    soup = [
        make_segment(0, 0, 1, 0),
        make_segment(1, 0, 1, 1),
        make_segment(1, 1, 0, 0),
        make_segment(0, 0, -1, 0),
        make_segment(-1, 0, -1, -1),
        make_segment(-1, -1, 0, 0),
    ]
    expected = [p.points for p in assemble_cycles(canonicalize_segments(soup))]
    rng = random.Random(3)

    for _ in range(10):
        shuffled = list(soup)
        rng.shuffle(shuffled)
        got = [p.points for p in assemble_cycles(canonicalize_segments(shuffled))]
        assert got == expected

    assert sum(len(p) for p in expected) == 6
