"""
Centralized output-saving utilities for the contour-to-grid pipeline.

This module provides:
    • save_all_outputs(...)
    • save_grid_image(...)
    • save_polygon_overlay(...)

Uses draw modules to visualize and utils.contour_io for filesystem handling.
"""

from typing import List

from contour_grid.models.occupancy_grid import OccupancyGrid
from contour_grid.models.polygon import Polygon
from contour_grid.visualization.render_grid import render_grid
from contour_grid.visualization.draw_polygons import draw_polygons
from contour_grid.utils.contour_io import (
    ensure_output_dir,
    save_image,
    save_grid_npz,
    save_grid_json,
)


# -------------------------------------------------------------------------
#   Save individual components
# -------------------------------------------------------------------------

def save_grid_image(path: str, grid: OccupancyGrid, scale: int = 1):
    """
    Saves the occupancy grid as an image (occupied black, free white).
    """
    save_image(path, render_grid(grid, scale))


def save_polygon_overlay(path: str, grid: OccupancyGrid, polygons: List[Polygon], scale: int = 4):
    """
    Draws the polygon outlines over the rendered grid and saves the result.
    """
    vis = render_grid(grid, scale)
    draw_polygons(vis, polygons, grid, scale)
    save_image(path, vis)


# -------------------------------------------------------------------------
#   Master save function (used by main.py)
# -------------------------------------------------------------------------

def save_all_outputs(
    output_dir: str,
    contour_id: str,
    grid: OccupancyGrid,
    polygons: List[Polygon],
):
    """
    Saves every output artifact for one processed contour.

    Example output:
        <id>_grid.png
        <id>_polygons.png
        <id>_grid.npz
        <id>_grid.json
    """
    ensure_output_dir(output_dir)

    # 1) Occupancy grid image
    save_grid_image(f"{output_dir}/{contour_id}_grid.png", grid)

    # 2) Polygon overlay
    save_polygon_overlay(f"{output_dir}/{contour_id}_polygons.png", grid, polygons)

    # 3) Raw cells
    save_grid_npz(f"{output_dir}/{contour_id}_grid.npz", grid)

    # 4) Message layout
    save_grid_json(f"{output_dir}/{contour_id}_grid.json", grid)
