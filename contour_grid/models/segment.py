from dataclasses import dataclass
from typing import Optional

from contour_grid.models.point import Point2D


@dataclass(frozen=True, order=True)
class Segment:
    """
    Line segment between two Point2D endpoints.

    Supports:
      - degenerate check (both endpoints equal)
      - canonical endpoint order (a <= b, lexicographic on (x, y))
      - shared-endpoint lookup used while stitching cycles

    Two canonical segments compare equal iff they are geometrically the same
    segment, whatever direction they were originally recorded in. Sorting a
    list of canonical segments gives the canonical order (by a, then b).
    """

    a: Point2D
    b: Point2D

    @property
    def is_degenerate(self) -> bool:
        return self.a == self.b

    @property
    def is_canonical(self) -> bool:
        return self.a <= self.b

    def canonical(self) -> "Segment":
        """Returns the segment with its lexicographically smaller endpoint first."""
        if self.is_canonical:
            return self
        return Segment(self.b, self.a)

    def reversed(self) -> "Segment":
        return Segment(self.b, self.a)

    def oriented_from(self, point: Point2D) -> Optional["Segment"]:
        """
        Returns this segment oriented so that it starts at point, or None
        if point is not one of its endpoints.
        """
        if self.a == point:
            return self
        if self.b == point:
            return Segment(self.b, self.a)
        return None

    def __repr__(self):
        return f"Segment({self.a!r} -> {self.b!r})"
