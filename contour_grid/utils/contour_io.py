"""
I/O utilities for the contour-to-grid pipeline.

This module provides:
    • load_contours(path_pattern)
    • find_contour_files(path_pattern) / read_contour(path)
    • parse_contour(data)
    • extract_numeric_id(filename)
    • ensure_output_dir(path)
    • save_image(path, image)
    • save_grid_npz(path, grid) / load_grid_npz(path)
    • save_grid_json(path, grid)

Handles all filesystem interaction in a consistent, testable way.
"""

import glob
import json
import logging
import os
import re
from typing import List, Tuple

import cv2
import numpy as np

from contour_grid.models.contour_vertex import ContourVertex
from contour_grid.models.occupancy_grid import OccupancyGrid
from contour_grid.models.point import Point2D
from contour_grid.errors import MalformedInput

log = logging.getLogger(__name__)


# -------------------------------------------------------------------------
#  FILENAME HANDLING
# -------------------------------------------------------------------------

def extract_numeric_id(filename: str) -> str:
    """
    Extract the first integer found in the file's base name, or the bare
    stem when it has none.

    Example:
        'contours/038.json' → '038'
    """
    base = os.path.basename(filename)
    m = re.search(r'\d+', base)
    return m.group(0) if m else os.path.splitext(base)[0]


# -------------------------------------------------------------------------
#  CONTOUR LOADING
# -------------------------------------------------------------------------

def parse_contour(data: dict):
    """
    Converts one decoded contour document into pipeline input.

    Accepted layouts:
        {"vertices": [{"position": [x, y, (z)], "front": i|null, "back": j|null}, ...]}
        {"pairs": [[[x1, y1], [x2, y2]], ...]}

    Raises MalformedInput for any other shape.

    Returns
    -------
    ("vertices", list[ContourVertex]) or ("pairs", list)
    """
    if not isinstance(data, dict):
        raise MalformedInput("contour document must be a JSON object", value=data)

    if "vertices" in data:
        try:
            vertices = [
                ContourVertex(
                    position=tuple(v["position"]),
                    front=v.get("front"),
                    back=v.get("back"),
                )
                for v in data["vertices"]
            ]
        except (AttributeError, KeyError, TypeError) as exc:
            raise MalformedInput(f"bad vertex entry: {exc!r}", value=data["vertices"]) from exc
        return "vertices", vertices
    if "pairs" in data:
        if not isinstance(data["pairs"], list):
            raise MalformedInput("'pairs' must be a list", value=data["pairs"])
        return "pairs", list(data["pairs"])
    raise MalformedInput("contour document has neither 'vertices' nor 'pairs'", value=data)


def find_contour_files(path_pattern: str) -> List[str]:
    """Contour files matching the glob pattern, in filename order."""
    return sorted(glob.glob(path_pattern))


def read_contour(path: str):
    """
    Reads and parses one contour file.

    Raises OSError when the file cannot be read and MalformedInput when it
    is not a contour document.
    """
    with open(path, "r", encoding="utf-8") as fh:
        try:
            data = json.load(fh)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise MalformedInput(f"{path} is not a UTF-8 JSON document: {exc}") from exc
    return parse_contour(data)


def load_contours(path_pattern: str) -> Tuple[List[tuple], List[str]]:
    """
    Loads all contour JSON files matching the given glob pattern.
    Unreadable or malformed files are skipped with a warning.

    Returns:
        contours: list of (kind, payload) as returned by parse_contour
        names:    list of numeric identifiers extracted from filenames
    """
    contours = []
    names = []

    for fname in find_contour_files(path_pattern):
        try:
            contours.append(read_contour(fname))
        except (OSError, MalformedInput) as exc:
            log.warning("skipping %s: %s", fname, exc)
            continue
        names.append(extract_numeric_id(fname))

    return contours, names


# -------------------------------------------------------------------------
#  OUTPUT DIRECTORY HANDLING
# -------------------------------------------------------------------------

def ensure_output_dir(path: str):
    """
    Ensures that an output directory exists.
    """
    if path and not os.path.exists(path):
        os.makedirs(path, exist_ok=True)


# -------------------------------------------------------------------------
#  SAVING
# -------------------------------------------------------------------------

def save_image(path: str, image: np.ndarray):
    """
    Save an image to disk, ensuring the directory exists.
    """
    ensure_output_dir(os.path.dirname(path))
    if not cv2.imwrite(path, image):
        raise OSError(f"could not write image {path}")


def save_grid_npz(path: str, grid: OccupancyGrid):
    ensure_output_dir(os.path.dirname(path))
    np.savez(
        path,
        cells=grid.cells.astype(np.uint8),
        width=grid.width,
        height=grid.height,
        resolution=grid.resolution,
        origin_x=grid.origin.x,
        origin_y=grid.origin.y,
    )


def load_grid_npz(path: str) -> OccupancyGrid:
    with np.load(path) as data:
        return OccupancyGrid(
            resolution=float(data["resolution"]),
            width=int(data["width"]),
            height=int(data["height"]),
            origin=Point2D(float(data["origin_x"]), float(data["origin_y"])),
            cells=data["cells"].astype(np.uint8),
        )


def save_grid_json(path: str, grid: OccupancyGrid):
    """Writes the grid in its occupancy-grid message layout."""
    ensure_output_dir(os.path.dirname(path))
    with open(path, "w", encoding="utf-8") as fh:
        json.dump(grid.to_message(), fh)
