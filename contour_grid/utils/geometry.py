"""
This module provides:
    - point_in_polygon       (even-odd ray casting, scalar)
    - points_in_polygon      (even-odd ray casting, vectorized over numpy arrays)
    - polygon_signed_area    (shoelace formula)
    - polygon_edges

Known limitation: the even-odd rule is only meaningful for simple
polygons. A self-intersecting polygon gets whatever parity the ray
crossings produce, which can disagree with visual intuition (the overlap
of a figure-eight lobe counts as outside). Points exactly on an edge may
land either way.
"""

from typing import Iterator, List, Sequence, Tuple

import numpy as np


# ----------------------------------------------------------------------
#  EDGE ITERATION
# ----------------------------------------------------------------------

def polygon_edges(vertices: Sequence[Tuple[float, float]]) -> Iterator[Tuple[Tuple[float, float], Tuple[float, float]]]:
    """
    Yields (start, end) for every edge of the closed polygon, including the
    closing edge from the last vertex back to the first.
    """
    n = len(vertices)
    for i in range(n):
        yield vertices[i - 1], vertices[i]


# ----------------------------------------------------------------------
#  POINT-IN-POLYGON (SCALAR)
# ----------------------------------------------------------------------

def point_in_polygon(x: float, y: float, vertices: Sequence[Tuple[float, float]]) -> bool:
    """
    Casts a ray from (x, y) towards +x and counts edge crossings.
    Odd count -> inside.
    """
    if len(vertices) < 3:
        return False

    inside = False
    for (xj, yj), (xi, yi) in polygon_edges(vertices):
        if (yi > y) != (yj > y):
            x_cross = (xj - xi) * (y - yi) / (yj - yi) + xi
            if x < x_cross:
                inside = not inside
    return inside


# ----------------------------------------------------------------------
#  POINT-IN-POLYGON (VECTORIZED)
# ----------------------------------------------------------------------

def points_in_polygon(xs: np.ndarray, ys: np.ndarray, vertices: Sequence[Tuple[float, float]]) -> np.ndarray:
    """
    Same rule as point_in_polygon, evaluated for every (xs[k], ys[k]) at
    once. xs and ys must broadcast together; the result has their
    broadcast shape and dtype bool.
    """
    xs = np.asarray(xs, dtype=np.float64)
    ys = np.asarray(ys, dtype=np.float64)
    inside = np.zeros(np.broadcast(xs, ys).shape, dtype=bool)

    if len(vertices) < 3:
        return inside

    for (xj, yj), (xi, yi) in polygon_edges(vertices):
        if yi == yj:
            # horizontal edges never straddle the ray
            continue
        straddles = (yi > ys) != (yj > ys)
        x_cross = (xj - xi) * (ys - yi) / (yj - yi) + xi
        inside ^= straddles & (xs < x_cross)

    return inside


# ----------------------------------------------------------------------
#  AREA
# ----------------------------------------------------------------------

def polygon_signed_area(vertices: Sequence[Tuple[float, float]]) -> float:
    """
    Shoelace formula. Positive for counter-clockwise vertex order,
    negative for clockwise.
    """
    total = 0.0
    for (x1, y1), (x2, y2) in polygon_edges(vertices):
        total += x1 * y2 - x2 * y1
    return total / 2.0


def as_xy_list(points) -> List[Tuple[float, float]]:
    """Converts Point2D-like objects (anything with .x/.y) into plain tuples."""
    return [(p.x, p.y) for p in points]
