"""
Visualization utilities for rendering assembled polygons over a grid.

This module provides:
    • polygon_to_pixels(polygon, grid)
    • draw_polygons(image, polygons, grid)

Used by:
    - save_outputs.py
"""

from typing import List, Tuple

import cv2

from contour_grid.models.occupancy_grid import OccupancyGrid
from contour_grid.models.polygon import Polygon
from contour_grid.utils.bresenham_utils import bres_outline
from contour_grid.config import COLOR_OUTLINE, COLOR_VERTEX


# ---------------------------------------------------------------------
#  World -> image pixel coordinates
# ---------------------------------------------------------------------

def polygon_to_pixels(polygon: Polygon, grid: OccupancyGrid) -> List[Tuple[int, int]]:
    """
    Maps polygon vertices to (col, row) pixels of an image produced by
    render_grid (row axis flipped, +y up).
    """
    pixels = []
    for p in polygon.points:
        i, j = grid.world_to_grid(p.x, p.y)
        pixels.append((int(i), int(grid.height - 1 - j)))
    return pixels


# ---------------------------------------------------------------------
#  Draw outlines + vertices
# ---------------------------------------------------------------------

def draw_polygons(image, polygons: List[Polygon], grid: OccupancyGrid, scale: int = 1):
    """
    Draws every polygon outline (Bresenham pixels) and marks its vertices.

    Args:
        image: BGR numpy array from render_grid(grid, scale) (modified in-place)
        polygons: assembled polygons
        grid: the grid the image was rendered from
        scale: the scale passed to render_grid
    """
    h, w = image.shape[:2]

    for poly in polygons:
        verts = [(x * scale + scale // 2, y * scale + scale // 2) for x, y in polygon_to_pixels(poly, grid)]

        for x, y in bres_outline(verts):
            if 0 <= x < w and 0 <= y < h:
                image[y, x] = COLOR_OUTLINE

        for x, y in verts:
            cv2.circle(image, (int(x), int(y)), max(1, scale // 2), COLOR_VERTEX, thickness=-1)

    return image
