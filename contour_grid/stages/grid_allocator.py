import logging
import math
from typing import Optional

from contour_grid.models.bounding_box import BoundingBox
from contour_grid.models.occupancy_grid import OccupancyGrid
from contour_grid.models.point import Point2D
from contour_grid.errors import InvalidGridSize
from contour_grid.config import RESOLUTION, MARGIN_FACTOR

log = logging.getLogger(__name__)


def _positive_finite(value) -> bool:
    try:
        return math.isfinite(value) and value > 0
    except TypeError:
        return False


def allocate_grid(
    bounds: Optional[BoundingBox],
    resolution: float = RESOLUTION,
    margin: float = MARGIN_FACTOR,
) -> OccupancyGrid:
    """
    Sizes and allocates an empty grid covering bounds.

        width  = floor((xmax - xmin) * margin / resolution)
        height = floor((ymax - ymin) * margin / resolution)
        origin = (xmin, ymin)

    The margin only grows the grid towards +x / +y; the origin stays on
    the lower-left corner of the box.

    Raises
    ------
    InvalidGridSize
        bounds is None, resolution or margin is not a positive finite
        number, or the computed width / height is zero or negative.
    """
    if bounds is None:
        raise InvalidGridSize("no bounding box to size the grid from (no closed polygons)")

    if not _positive_finite(resolution):
        raise InvalidGridSize(f"resolution must be positive and finite, got {resolution!r}", bounds=bounds)
    if not _positive_finite(margin):
        raise InvalidGridSize(f"margin must be positive and finite, got {margin!r}", bounds=bounds)

    raw_w = bounds.width * margin / resolution
    raw_h = bounds.height * margin / resolution
    if not (math.isfinite(raw_w) and math.isfinite(raw_h)):
        raise InvalidGridSize(f"non-finite grid extent for {bounds!r}", bounds=bounds)

    width = math.floor(raw_w)
    height = math.floor(raw_h)

    if width <= 0 or height <= 0:
        raise InvalidGridSize(
            f"grid would be {width}x{height} cells for {bounds!r} "
            f"at resolution {resolution} and margin {margin}",
            width=width,
            height=height,
            bounds=bounds,
        )

    grid = OccupancyGrid(
        resolution=float(resolution),
        width=width,
        height=height,
        origin=Point2D(bounds.xmin, bounds.ymin),
    )
    log.debug("allocated %s", grid)
    return grid
