"""
Visualization Tools

Provides drawing utilities for:
- Occupancy grids
- Assembled polygon outlines
"""

from .render_grid import render_grid
from .draw_polygons import draw_polygons, polygon_to_pixels
from .save_outputs import (
    save_all_outputs,
    save_grid_image,
    save_polygon_overlay,
)

__all__ = [
    "render_grid",
    "draw_polygons",
    "polygon_to_pixels",
    "save_all_outputs",
    "save_grid_image",
    "save_polygon_overlay",
]
