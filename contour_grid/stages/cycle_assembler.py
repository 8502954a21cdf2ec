import logging
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from contour_grid.models.point import Point2D
from contour_grid.models.segment import Segment
from contour_grid.models.polygon import Polygon
from contour_grid.errors import MalformedContour

log = logging.getLogger(__name__)


@dataclass
class CycleAssembly:
    """
    Result of stitching a segment set into closed cycles.

    polygons : closed cycles, in the order they were found
    unmatched : segments of chains that could not be closed; only ever
        non-empty when assembly ran with allow_partial=True
    """

    polygons: List[Polygon] = field(default_factory=list)
    unmatched: List[Segment] = field(default_factory=list)

    @property
    def complete(self) -> bool:
        return not self.unmatched

    def __iter__(self):
        return iter(self.polygons)

    def __len__(self):
        return len(self.polygons)

    def __getitem__(self, idx):
        return self.polygons[idx]


# ======================================================================
#  ENDPOINT INDEX
# ======================================================================

def _build_endpoint_index(ordered: List[Segment]) -> Dict[Point2D, List[int]]:
    """
    Maps every endpoint to the indices of the segments touching it.
    Indices are appended in canonical order, so each list is ascending.
    """
    index: Dict[Point2D, List[int]] = defaultdict(list)
    for k, seg in enumerate(ordered):
        index[seg.a].append(k)
        if seg.b != seg.a:
            index[seg.b].append(k)
    return index


def _next_match(index: Dict[Point2D, List[int]], remaining: List[bool], point: Point2D) -> Optional[int]:
    """
    Lowest-canonical-order remaining segment touching point, or None.
    Several candidates only occur at self-touching vertices.
    """
    for k in index.get(point, ()):
        if remaining[k]:
            return k
    return None


# ======================================================================
#  PUBLIC API
# ======================================================================

def assemble_cycles(segments: Iterable[Segment], allow_partial: bool = False) -> CycleAssembly:
    """
    Greedily stitches segments, by shared endpoints, into closed polygons.

      1. seed = lowest remaining segment (canonical order); the chain
         starts at seed.a and the current endpoint is seed.b
      2. take the lowest remaining segment touching the current endpoint,
         oriented so that it starts there, append its start point and
         advance to its far endpoint
      3. once the current endpoint is back at seed.a the cycle is closed
         and emitted; reseed while segments remain

    Every scan either consumes a segment or ends the chain, so the loop
    always terminates. Every input segment is consumed exactly once, and
    each polygon has one point per consumed segment.

    Parameters
    ----------
    segments : iterable[Segment]
        Normally the output of canonicalize_segments().
    allow_partial : bool
        False -> a chain that cannot be closed raises MalformedContour.
        True  -> the chain's segments go to CycleAssembly.unmatched and
                 assembly continues with the next seed.

    Returns
    -------
    CycleAssembly
    """
    ordered = sorted(segments)
    index = _build_endpoint_index(ordered)

    remaining = [True] * len(ordered)
    left = len(ordered)
    cursor = 0

    result = CycleAssembly()

    while left:
        while not remaining[cursor]:
            cursor += 1

        seed = ordered[cursor]
        remaining[cursor] = False
        left -= 1

        if seed.is_degenerate:
            # zero-length one-segment cycle
            continue

        start = seed.a
        current = seed.b
        points = [seed.a]
        chain = [seed]

        while current != start:
            k = _next_match(index, remaining, current)
            if k is None:
                if not allow_partial:
                    raise MalformedContour(
                        f"no segment continues the chain at {current!r} "
                        f"(last segment {chain[-1]!r}, chain length {len(chain)})",
                        segment=chain[-1],
                        endpoint=current,
                        polygons=result.polygons,
                    )
                log.warning(
                    "open chain of %d segments ends at %r; set aside",
                    len(chain), current,
                )
                result.unmatched.extend(s.canonical() for s in chain)
                break

            remaining[k] = False
            left -= 1

            step = ordered[k].oriented_from(current)
            points.append(step.a)
            chain.append(step)
            current = step.b
        else:
            result.polygons.append(Polygon(points))

    log.debug(
        "assembled %d polygons from %d segments (%d unmatched)",
        len(result.polygons), len(ordered), len(result.unmatched),
    )
    return result
