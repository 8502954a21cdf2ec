"""
Contour Grid Package

Turns the planner's contour graph (an unordered soup of vertex-to-neighbor
edges) into a dense occupancy grid:

- Segment soup construction & canonicalization
- Cycle assembly into closed polygons
- Bounding boxes & grid allocation
- Polygon rasterization (even-odd rule)
- Output visualization utilities
"""
__all__ = [
    "config",
    "errors",
    "main",
    "pipeline",
    "models",
    "stages",
    "utils",
    "visualization",
]
