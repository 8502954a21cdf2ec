from dataclasses import dataclass
from typing import Optional, Sequence

from contour_grid.models.point import Point2D


@dataclass(frozen=True)
class ContourVertex:
    """
    One vertex of the planner's contour graph, as a plain value.

    position : 2D or 3D coordinates; the third one is dropped on projection.
    front, back : indices of the neighbor vertices in the same sequence,
        or None when the link is not populated.
    """

    position: Sequence[float]
    front: Optional[int] = None
    back: Optional[int] = None

    @property
    def point(self) -> Point2D:
        return Point2D.from_position(self.position)
