"""
Visualization utilities for rendering occupancy grids.

This module provides:
    • render_grid(grid)

Used by:
    - save_outputs.py
    - draw_polygons.py (as the background image)
"""

import numpy as np

from contour_grid.models.occupancy_grid import OccupancyGrid
from contour_grid.config import COLOR_FREE, COLOR_OCCUPIED, OCCUPIED_VALUE


def render_grid(grid: OccupancyGrid, scale: int = 1) -> np.ndarray:
    """
    Renders the grid as a BGR image, one pixel per cell (times scale).

    Grid row 0 is the bottom of the map, image row 0 is the top, so the
    rows are flipped: the picture reads like a map with +y up.
    """
    occupied = grid.as_array() == OCCUPIED_VALUE

    image = np.empty((grid.height, grid.width, 3), dtype=np.uint8)
    image[:] = COLOR_FREE
    image[occupied] = COLOR_OCCUPIED
    image = np.flipud(image)

    if scale > 1:
        image = np.repeat(np.repeat(image, scale, axis=0), scale, axis=1)
    return np.ascontiguousarray(image)
