"""
Error kinds raised by the contour-to-grid pipeline.

All of them are input validation failures: retrying the same input
produces the same error.
"""


class ContourGridError(ValueError):
    """Base class for every pipeline input error."""


class MalformedContour(ContourGridError):
    """Raised when segments cannot be stitched into closed cycles."""

    def __init__(self, message, segment=None, endpoint=None, polygons=None):
        super().__init__(message)
        self.segment = segment
        self.endpoint = endpoint
        # polygons that did close before the failure
        self.polygons = list(polygons or [])


class InvalidGridSize(ContourGridError):
    """Raised when a bounding box or resolution yields an empty grid."""

    def __init__(self, message, width=None, height=None, bounds=None):
        super().__init__(message)
        self.width = width
        self.height = height
        self.bounds = bounds


class DanglingReference(ContourGridError):
    """Raised when a neighbor link points outside the vertex sequence."""

    def __init__(self, message, vertex_index=None, link=None, reference=None):
        super().__init__(message)
        self.vertex_index = vertex_index
        self.link = link
        self.reference = reference


class MalformedInput(ContourGridError):
    """Raised when a contour document or endpoint list has the wrong shape."""

    def __init__(self, message, value=None):
        super().__init__(message)
        self.value = value
