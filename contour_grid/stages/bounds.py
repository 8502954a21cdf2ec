from typing import Iterable, List, Optional, Tuple

from contour_grid.models.bounding_box import BoundingBox
from contour_grid.models.polygon import Polygon


def compute_bounds(polygons: Iterable[Polygon]) -> Tuple[List[BoundingBox], Optional[BoundingBox]]:
    """
    Returns (per_polygon_boxes, overall_box).

    overall_box is the elementwise union of every per-polygon box, or None
    when there are no polygons. Pure function of the point sets: rotating
    a cycle's start vertex does not change any box.
    """
    boxes = [BoundingBox.from_points(p.points) for p in polygons]

    overall = None
    for box in boxes:
        overall = box if overall is None else overall.union(box)

    return boxes, overall
