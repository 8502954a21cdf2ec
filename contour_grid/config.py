"""
Configuration file for the contour-to-grid pipeline.

Contains both STRICT and LENIENT parameter sets.
Modules should read values using the get_active_params() function.
"""

# ---------------------------------------------------------------
# MODE SELECTION
# ---------------------------------------------------------------

# Set to False to keep the polygons that did close when a contour is malformed
STRICT_MODE = True


# ---------------------------------------------------------------
# I/O PATHS
# ---------------------------------------------------------------

SELECTED_CONTOUR_PATTERN = "contours/*.json"
OUTPUT_FOLDER = "output"


# ===============================================================
# STRICT-MODE PARAMETERS
# ===============================================================

STRICT = {
    "ALLOW_PARTIAL": False,
    "INDEX_POLICY": "reject",
}


# ===============================================================
# LENIENT-MODE PARAMETERS
# ===============================================================

LENIENT = {
    "ALLOW_PARTIAL": True,
    "INDEX_POLICY": "clamp",
}


# ---------------------------------------------------------------
# SHARED PARAMETERS (used in both modes)
# ---------------------------------------------------------------

RESOLUTION = 0.05          # world units per cell
MARGIN_FACTOR = 1.2        # grid extent = bbox extent * margin
RASTER_WORKERS = 1         # >1 rasterizes row bands in a thread pool

FREE_VALUE = 0
OCCUPIED_VALUE = 100

INDEX_POLICIES = ("reject", "clamp")


# ---------------------------------------------------------------
# VISUALIZATION COLORS (BGR)
# ---------------------------------------------------------------

COLOR_FREE = (255, 255, 255)     # white
COLOR_OCCUPIED = (0, 0, 0)       # black
COLOR_OUTLINE = (0, 0, 255)      # red
COLOR_VERTEX = (255, 0, 0)       # blue


# ---------------------------------------------------------------
# PARAMETER ACCESS LOGIC
# ---------------------------------------------------------------

def get_active_params(strict=None):
    """
    Returns the active set of parameters:
    - A combination of SHARED + mode-specific constants.
    - Used by stages so they only import one dictionary.

    strict overrides STRICT_MODE for a single call.
    """
    if strict is None:
        strict = STRICT_MODE

    base = {
        "RESOLUTION": RESOLUTION,
        "MARGIN_FACTOR": MARGIN_FACTOR,
        "RASTER_WORKERS": RASTER_WORKERS,
        "FREE_VALUE": FREE_VALUE,
        "OCCUPIED_VALUE": OCCUPIED_VALUE,
    }

    if strict:
        base.update(STRICT)
    else:
        base.update(LENIENT)

    return base
