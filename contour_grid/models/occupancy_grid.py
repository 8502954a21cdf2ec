import math
from dataclasses import dataclass, field

import numpy as np

from contour_grid.models.point import Point2D
from contour_grid.config import FREE_VALUE, OCCUPIED_VALUE


@dataclass(eq=False)
class OccupancyGrid:
    """
    Dense 2D occupancy grid in the nav_msgs/OccupancyGrid convention.

    cells is a flat uint8 buffer of width*height values, row-major with
    row 0 at origin.y (the lower edge of the map). Values are 0 (free) or
    100 (occupied); nothing else is ever written by the pipeline.

    The grid owns its buffer: copy() duplicates it, and the rasterizer
    works on a copy rather than on the allocator's buffer.
    """

    resolution: float
    width: int
    height: int
    origin: Point2D
    cells: np.ndarray = field(default=None, repr=False)

    def __post_init__(self):
        if self.cells is None:
            self.cells = np.full(self.width * self.height, FREE_VALUE, dtype=np.uint8)
        elif self.cells.size != self.width * self.height:
            raise ValueError(
                f"cell buffer has {self.cells.size} values, "
                f"expected {self.width}x{self.height}"
            )

    # ------------------------------------------------------------
    # Coordinate mapping
    # ------------------------------------------------------------

    @property
    def size(self) -> int:
        return self.width * self.height

    def world_to_grid(self, x: float, y: float):
        """(i, j) cell indices of world point (x, y); may fall outside the grid."""
        i = math.floor((x - self.origin.x) / self.resolution)
        j = math.floor((y - self.origin.y) / self.resolution)
        return i, j

    def cell_center(self, i: int, j: int):
        return (
            self.origin.x + (i + 0.5) * self.resolution,
            self.origin.y + (j + 0.5) * self.resolution,
        )

    def index_of(self, x: float, y: float) -> int:
        """
        Flat index floor((x-ox)/r) + width*floor((y-oy)/r).
        Not range checked; see in_range().
        """
        i, j = self.world_to_grid(x, y)
        return i + self.width * j

    def in_range(self, index: int) -> bool:
        return 0 <= index < self.size

    # ------------------------------------------------------------
    # Cell access
    # ------------------------------------------------------------

    def as_array(self) -> np.ndarray:
        """(height, width) view on the cell buffer; row 0 is the bottom row."""
        return self.cells.reshape(self.height, self.width)

    def occupied_count(self) -> int:
        return int(np.count_nonzero(self.cells == OCCUPIED_VALUE))

    def copy(self) -> "OccupancyGrid":
        return OccupancyGrid(
            resolution=self.resolution,
            width=self.width,
            height=self.height,
            origin=self.origin,
            cells=self.cells.copy(),
        )

    # ------------------------------------------------------------
    # Wire format
    # ------------------------------------------------------------

    def to_message(self) -> dict:
        """
        Plain-dict rendition of a nav_msgs/OccupancyGrid:
        info.resolution / width / height / origin plus the flat data list.
        """
        return {
            "info": {
                "resolution": float(self.resolution),
                "width": int(self.width),
                "height": int(self.height),
                "origin": {"x": float(self.origin.x), "y": float(self.origin.y)},
            },
            "data": [int(v) for v in self.cells],
        }

    def __str__(self):
        return (
            f"OccupancyGrid(width={self.width}, height={self.height}, "
            f"resolution={self.resolution}, origin={self.origin.x}, {self.origin.y})"
        )
