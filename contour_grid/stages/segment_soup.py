import logging
import operator
from typing import Iterable, List, Optional, Sequence

from contour_grid.models.point import Point2D
from contour_grid.models.segment import Segment
from contour_grid.models.contour_vertex import ContourVertex
from contour_grid.errors import DanglingReference, MalformedInput

log = logging.getLogger(__name__)


def _check_link(vertices: Sequence[ContourVertex], index: int, link: str, ref) -> Optional[int]:
    """Returns the link as a plain int index, or None when unpopulated."""
    if ref is None:
        return None
    try:
        # bools pass operator.index but are never valid links
        position = None if isinstance(ref, bool) else operator.index(ref)
    except TypeError:
        position = None
    if position is None or not (0 <= position < len(vertices)):
        raise DanglingReference(
            f"vertex {index} has {link} link {ref!r} outside the "
            f"{len(vertices)}-vertex sequence",
            vertex_index=index,
            link=link,
            reference=ref,
        )
    return position


def build_segment_soup(vertices: Sequence[ContourVertex]) -> List[Segment]:
    """
    Builds the raw segment soup from a contour vertex sequence.

    Every vertex with BOTH front and back links populated contributes two
    segments: vertex -> front and vertex -> back. A vertex with only one
    link contributes nothing (it is an open end of the contour graph).

    Every populated link is validated first; a link that does not index
    into the sequence raises DanglingReference before any segment is
    produced.

    Degenerate segments (neighbor at the exact same 2D position, e.g. two
    vertices that differ only in z) are dropped here.

    Parameters
    ----------
    vertices : sequence[ContourVertex]

    Returns
    -------
    list[Segment]
        Uncanonicalized soup; each shared edge normally appears twice.
    """
    links = [
        (_check_link(vertices, idx, "front", v.front), _check_link(vertices, idx, "back", v.back))
        for idx, v in enumerate(vertices)
    ]

    points = [v.point for v in vertices]

    soup: List[Segment] = []
    dropped = 0
    for idx, (front, back) in enumerate(links):
        if front is None or back is None:
            continue
        for neighbor in (front, back):
            seg = Segment(points[idx], points[neighbor])
            if seg.is_degenerate:
                dropped += 1
                continue
            soup.append(seg)

    log.debug(
        "segment soup: %d vertices -> %d segments (%d degenerate dropped)",
        len(vertices), len(soup), dropped,
    )
    return soup


def segments_from_pairs(pairs: Iterable[Sequence[Sequence[float]]]) -> List[Segment]:
    """
    Builds a segment soup from plain endpoint pairs
    [[(x1, y1[, z1]), (x2, y2[, z2])], ...], the form the planner streams
    its contour pairs in. Degenerate pairs are dropped.
    """
    soup: List[Segment] = []
    dropped = 0
    for pair in pairs:
        if isinstance(pair, (str, bytes)) or not hasattr(pair, "__len__") or len(pair) != 2:
            raise MalformedInput(f"expected a pair of endpoints, got {pair!r}", value=pair)
        seg = Segment(Point2D.from_position(pair[0]), Point2D.from_position(pair[1]))
        if seg.is_degenerate:
            dropped += 1
            continue
        soup.append(seg)

    log.debug("segment soup: %d pairs kept, %d degenerate dropped", len(soup), dropped)
    return soup
