from dataclasses import dataclass
from typing import Sequence

from contour_grid.errors import MalformedInput


@dataclass(frozen=True, order=True)
class Point2D:
    """
    Immutable 2D position.

    Ordering is lexicographic on (x, y), which is the total order used to
    canonicalize segments. Equality and hashing are exact on the float
    coordinates: shared vertex positions upstream are bit-identical, so no
    tolerance is applied.
    """

    x: float
    y: float

    @classmethod
    def from_position(cls, position: Sequence[float]) -> "Point2D":
        """
        Flat 2D projection of a 2D or 3D position: any third coordinate
        is dropped.
        """
        try:
            return cls(float(position[0]), float(position[1]))
        except (IndexError, KeyError, TypeError, ValueError):
            raise MalformedInput(
                f"position needs at least 2 numeric coordinates, got {position!r}",
                value=position,
            ) from None

    def __repr__(self):
        return f"Point2D({self.x:g}, {self.y:g})"
