"""
Utility Functions

Provides geometry operations, Bresenham wrappers and contour / grid I/O
used across stages.
"""

from .geometry import (
    point_in_polygon,
    points_in_polygon,
    polygon_signed_area,
    polygon_edges,
)
from .bresenham_utils import bres_line, bres_outline
from .contour_io import (
    load_contours,
    find_contour_files,
    read_contour,
    parse_contour,
    extract_numeric_id,
    ensure_output_dir,
    save_image,
    save_grid_npz,
    load_grid_npz,
    save_grid_json,
)

__all__ = [
    "point_in_polygon",
    "points_in_polygon",
    "polygon_signed_area",
    "polygon_edges",
    "bres_line",
    "bres_outline",
    "load_contours",
    "find_contour_files",
    "read_contour",
    "parse_contour",
    "extract_numeric_id",
    "ensure_output_dir",
    "save_image",
    "save_grid_npz",
    "load_grid_npz",
    "save_grid_json",
]
