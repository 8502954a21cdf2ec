import logging
from typing import Iterable, List

from contour_grid.models.segment import Segment

log = logging.getLogger(__name__)


def canonicalize_segments(soup: Iterable[Segment]) -> List[Segment]:
    """
    Normalizes endpoint order and removes exact duplicates.

      - each segment is flipped so that a <= b (x first, then y)
      - geometrically identical segments collapse to one, whatever
        direction or multiplicity they had in the soup
      - the result is sorted in canonical order

    Equality is exact float equality. The sorted output makes the result
    independent of input order, and canonicalizing an already canonical
    list returns an equal list.
    """
    unique = set()
    total = 0
    for seg in soup:
        total += 1
        if seg.is_degenerate:
            continue
        unique.add(seg.canonical())

    result = sorted(unique)
    log.debug("canonicalized %d segments -> %d unique", total, len(result))
    return result
