"""
Utility wrappers around the pybresenham library.

This module provides:
    • bres_line(x1, y1, x2, y2)
    • bres_outline(vertices)

These functions return lists of (x, y) integer pixel coordinates.
"""

from typing import List, Sequence, Tuple

import pybresenham as bres


# -----------------------------------------------------------
#   Line drawing wrapper
# -----------------------------------------------------------

def bres_line(x1: int, y1: int, x2: int, y2: int) -> List[Tuple[int, int]]:
    """
    Returns a list of integer pixel coordinates forming a Bresenham line.
    """
    return [(int(x), int(y)) for x, y in bres.line(x1, y1, x2, y2)]


# -----------------------------------------------------------
#   Closed outline
# -----------------------------------------------------------

def bres_outline(vertices: Sequence[Tuple[int, int]]) -> List[Tuple[int, int]]:
    """
    Pixels of the closed outline through integer vertices, including the
    closing edge. Shared corner pixels are not repeated.
    """
    n = len(vertices)
    if n == 0:
        return []
    if n == 1:
        return [tuple(vertices[0])]

    pixels: List[Tuple[int, int]] = []
    seen = set()
    for i in range(n):
        x1, y1 = vertices[i]
        x2, y2 = vertices[(i + 1) % n]
        for p in bres_line(int(x1), int(y1), int(x2), int(y2)):
            if p not in seen:
                seen.add(p)
                pixels.append(p)
    return pixels
