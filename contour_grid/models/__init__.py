"""
Data Models

Defines the core data structures:
- Point2D
- Segment
- BoundingBox
- Polygon
- OccupancyGrid
- ContourVertex
"""

from .point import Point2D
from .segment import Segment
from .bounding_box import BoundingBox
from .polygon import Polygon
from .occupancy_grid import OccupancyGrid
from .contour_vertex import ContourVertex

__all__ = [
    "Point2D",
    "Segment",
    "BoundingBox",
    "Polygon",
    "OccupancyGrid",
    "ContourVertex",
]
