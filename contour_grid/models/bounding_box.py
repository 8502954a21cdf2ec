from dataclasses import dataclass
from typing import Iterable

from contour_grid.models.point import Point2D


@dataclass(frozen=True)
class BoundingBox:
    """
    2D axis-aligned bounding box in world units.

    Never mutated after creation: union() and from_points() always build a
    new box.

    Example:
        >>> b = BoundingBox(0.0, 10.0, 0.0, 5.0)
        >>> b.width
        10.0
        >>> b.contains_point(5.0, 5.0)
        True
    """

    xmin: float
    xmax: float
    ymin: float
    ymax: float

    @classmethod
    def from_points(cls, points: Iterable[Point2D]) -> "BoundingBox":
        pts = list(points)
        if not pts:
            raise ValueError("cannot compute a bounding box of zero points")
        xs = [p.x for p in pts]
        ys = [p.y for p in pts]
        return cls(min(xs), max(xs), min(ys), max(ys))

    @property
    def width(self) -> float:
        return self.xmax - self.xmin

    @property
    def height(self) -> float:
        return self.ymax - self.ymin

    def union(self, other: "BoundingBox") -> "BoundingBox":
        """Elementwise union of two boxes."""
        return BoundingBox(
            min(self.xmin, other.xmin),
            max(self.xmax, other.xmax),
            min(self.ymin, other.ymin),
            max(self.ymax, other.ymax),
        )

    def contains_point(self, x: float, y: float) -> bool:
        """Inclusive containment check."""
        return self.xmin <= x <= self.xmax and self.ymin <= y <= self.ymax

    def __repr__(self):
        return (
            f"BoundingBox(x={self.xmin:.3f}..{self.xmax:.3f}, "
            f"y={self.ymin:.3f}..{self.ymax:.3f})"
        )
