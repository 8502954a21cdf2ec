"""
Polygon rasterizer.

This module provides:
    • rasterize(grid, polygons, index_policy, workers)
    • candidate_range(...)  (cell columns / rows whose centers fall in a box)

A cell is occupied when its center lies inside any polygon under the
even-odd rule (see utils.geometry for the self-intersection caveat).
"""

import logging
import math
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, List, Optional, Tuple

import numpy as np

from contour_grid.models.occupancy_grid import OccupancyGrid
from contour_grid.models.polygon import Polygon
from contour_grid.utils.geometry import points_in_polygon
from contour_grid.config import get_active_params, INDEX_POLICIES

log = logging.getLogger(__name__)


# ----------------------------------------------------------------------
#  CANDIDATE CELLS
# ----------------------------------------------------------------------

def candidate_range(lo: float, hi: float, origin: float, resolution: float, count: int) -> Optional[Tuple[int, int]]:
    """
    Inclusive index range [first, last] of cells along one axis whose
    centers origin + (k + 0.5) * resolution lie within [lo, hi], clipped
    to [0, count - 1]. None when no such cell exists.
    """
    first = math.ceil((lo - origin) / resolution - 0.5)
    last = math.floor((hi - origin) / resolution - 0.5)
    first = max(first, 0)
    last = min(last, count - 1)
    if first > last:
        return None
    return first, last


# ----------------------------------------------------------------------
#  ONE POLYGON, ONE ROW BAND
# ----------------------------------------------------------------------

def _rasterize_band(
    cells2d: np.ndarray,
    grid: OccupancyGrid,
    polygons: List[Polygon],
    row_lo: int,
    row_hi: int,
    index_policy: str,
    occupied_value: int,
):
    """
    Marks occupied cells of rows [row_lo, row_hi) only. Returns
    (tested, occupied, rejected, clamped) counters.
    """
    tested = occupied = rejected = clamped = 0
    ox, oy, r = grid.origin.x, grid.origin.y, grid.resolution

    for poly in polygons:
        box = poly.bbox
        cols = candidate_range(box.xmin, box.xmax, ox, r, grid.width)
        rows = candidate_range(box.ymin, box.ymax, oy, r, grid.height)
        if cols is None or rows is None:
            continue
        j0, j1 = max(rows[0], row_lo), min(rows[1], row_hi - 1)
        if j0 > j1:
            continue

        xs = ox + (np.arange(cols[0], cols[1] + 1) + 0.5) * r
        ys = oy + (np.arange(j0, j1 + 1) + 0.5) * r
        X, Y = np.meshgrid(xs, ys)
        tested += X.size

        inside = points_in_polygon(X, Y, poly.vertices)
        if not inside.any():
            continue

        # index = floor((x-ox)/r) + width*floor((y-oy)/r), per axis
        ix = np.floor((X[inside] - ox) / r).astype(np.int64)
        iy = np.floor((Y[inside] - oy) / r).astype(np.int64)

        out_of_range = (ix < 0) | (ix >= grid.width) | (iy < row_lo) | (iy >= row_hi)
        if out_of_range.any():
            if index_policy == "clamp":
                clamped += int(out_of_range.sum())
                ix = np.clip(ix, 0, grid.width - 1)
                iy = np.clip(iy, row_lo, row_hi - 1)
            else:
                rejected += int(out_of_range.sum())
                ix = ix[~out_of_range]
                iy = iy[~out_of_range]

        cells2d[iy, ix] = occupied_value
        occupied += int(ix.size)

    return tested, occupied, rejected, clamped


def _row_bands(height: int, workers: int) -> List[Tuple[int, int]]:
    step = max(1, math.ceil(height / workers))
    return [(lo, min(lo + step, height)) for lo in range(0, height, step)]


# ----------------------------------------------------------------------
#  PUBLIC API
# ----------------------------------------------------------------------

def rasterize(
    grid: OccupancyGrid,
    polygons: Iterable[Polygon],
    index_policy: Optional[str] = None,
    workers: Optional[int] = None,
    params: Optional[dict] = None,
) -> OccupancyGrid:
    """
    Returns a copy of grid with every cell whose center lies inside any
    polygon set to OCCUPIED_VALUE (100).

    Parameters
    ----------
    grid : OccupancyGrid
        Allocated grid; not modified.
    polygons : iterable[Polygon]
    index_policy : {"reject", "clamp"}, optional
        What to do with a computed cell index that falls outside the grid
        (a floating-point edge effect at the box boundary): drop it, or
        clamp it per axis onto the nearest edge cell. Defaults to the
        active INDEX_POLICY.
    workers : int, optional
        >1 splits the grid into disjoint row bands rasterized in a thread
        pool. Every band owns its rows and writes are the idempotent
        "set occupied", so the result does not depend on scheduling.

    Notes
    -----
    Only centers inside each polygon's own bounding box are tested. A
    polygon entirely outside the grid tests nothing and leaves the grid
    untouched.
    """
    if params is None:
        params = get_active_params()
    if index_policy is None:
        index_policy = params["INDEX_POLICY"]
    if workers is None:
        workers = params["RASTER_WORKERS"]
    if index_policy not in INDEX_POLICIES:
        raise ValueError(f"unknown index policy {index_policy!r}; expected one of {INDEX_POLICIES}")

    occupied_value = params["OCCUPIED_VALUE"]
    polygons = list(polygons)
    out = grid.copy()
    cells2d = out.as_array()

    if workers <= 1 or out.height < 2:
        totals = [_rasterize_band(cells2d, out, polygons, 0, out.height, index_policy, occupied_value)]
    else:
        bands = _row_bands(out.height, workers)
        with ThreadPoolExecutor(max_workers=workers) as executor:
            futures = [
                executor.submit(
                    _rasterize_band, cells2d, out, polygons, lo, hi, index_policy, occupied_value
                )
                for lo, hi in bands
            ]
            totals = [f.result() for f in futures]

    tested, occupied, rejected, clamped = (sum(t[k] for t in totals) for k in range(4))
    log.debug(
        "rasterized %d polygons: %d centers tested, %d marked, %d rejected, %d clamped",
        len(polygons), tested, occupied, rejected, clamped,
    )
    return out
