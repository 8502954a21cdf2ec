from typing import List, Sequence, Tuple

from contour_grid.models.point import Point2D
from contour_grid.models.segment import Segment
from contour_grid.models.bounding_box import BoundingBox
from contour_grid.utils.geometry import (
    point_in_polygon,
    polygon_signed_area,
    as_xy_list,
)


class Polygon:
    """
    Closed polygon produced by stitching one cycle of segments.

    It supports:
      - ordered vertex storage (first vertex implicitly connects to last)
      - bounding box computation
      - even-odd point containment
      - signed area / orientation
      - rebuilding the segments it was stitched from

    Notes:
      • points[k] is the start of the k-th consumed segment, so
        len(points) always equals the number of segments in the cycle.
      • The bounding box is computed once, when the polygon is built;
        points are stored as a tuple and never change afterwards.
    """

    def __init__(self, points: Sequence[Point2D]):
        self.points: Tuple[Point2D, ...] = tuple(points)
        self.bbox: BoundingBox = BoundingBox.from_points(self.points)
        self._xy: List[Tuple[float, float]] = as_xy_list(self.points)

    # ------------------------------------------------------------------
    # Basic properties
    # ------------------------------------------------------------------

    def __len__(self):
        return len(self.points)

    def __iter__(self):
        return iter(self.points)

    @property
    def vertices(self) -> List[Tuple[float, float]]:
        """Vertices as plain (x, y) tuples, in cycle order."""
        return list(self._xy)

    def edges(self) -> List[Segment]:
        """
        Directed edges in cycle order, including the closing edge.
        """
        n = len(self.points)
        return [Segment(self.points[i], self.points[(i + 1) % n]) for i in range(n)]

    def canonical_segments(self) -> List[Segment]:
        """Edges in canonical form, sorted. Independent of start vertex and direction."""
        return sorted(e.canonical() for e in self.edges())

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------

    def signed_area(self) -> float:
        return polygon_signed_area(self._xy)

    def area(self) -> float:
        return abs(self.signed_area())

    def contains_point(self, x: float, y: float) -> bool:
        """
        Even-odd ray-casting test. Cheap bounding-box rejection first.
        Undefined (but deterministic) for self-intersecting polygons.
        """
        if not self.bbox.contains_point(x, y):
            return False
        return point_in_polygon(x, y, self._xy)

    # ------------------------------------------------------------------
    # Equality (same cycle, any start vertex or direction)
    # ------------------------------------------------------------------

    def __eq__(self, other):
        return isinstance(other, Polygon) and self.canonical_segments() == other.canonical_segments()

    def __hash__(self):
        return hash(tuple(self.canonical_segments()))

    def __repr__(self):
        return f"Polygon(n={len(self.points)}, bbox={self.bbox!r})"
