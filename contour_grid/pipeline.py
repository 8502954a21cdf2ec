"""
End-to-end contour -> occupancy grid pipeline.

Each stage takes its predecessor's output and returns a fresh value;
nothing is cached between calls, so concurrent calls never interfere.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence

from contour_grid.models.segment import Segment
from contour_grid.models.polygon import Polygon
from contour_grid.models.bounding_box import BoundingBox
from contour_grid.models.occupancy_grid import OccupancyGrid
from contour_grid.models.contour_vertex import ContourVertex
from contour_grid.stages.segment_soup import build_segment_soup, segments_from_pairs
from contour_grid.stages.canonicalizer import canonicalize_segments
from contour_grid.stages.cycle_assembler import assemble_cycles
from contour_grid.stages.bounds import compute_bounds
from contour_grid.stages.grid_allocator import allocate_grid
from contour_grid.stages.rasterizer import rasterize
from contour_grid.config import get_active_params

log = logging.getLogger(__name__)


@dataclass
class PipelineResult:
    """
    Everything one pipeline run produced.

    complete is False only when partial assembly was allowed and some
    chains could not be closed; their segments are in unmatched and the
    grid covers the closed polygons only.
    """

    grid: OccupancyGrid
    polygons: List[Polygon]
    polygon_bounds: List[BoundingBox]
    bounds: BoundingBox
    unmatched: List[Segment] = field(default_factory=list)

    @property
    def complete(self) -> bool:
        return not self.unmatched


def run_pipeline_from_segments(soup: Iterable[Segment], params: Optional[dict] = None) -> PipelineResult:
    """
    Runs canonicalize -> assemble -> bounds -> allocate -> rasterize on a
    raw segment soup.

    Raises MalformedContour (strict mode) or InvalidGridSize.
    """
    if params is None:
        params = get_active_params()

    # STEP 1: CANONICALIZE & DEDUPLICATE
    segments = canonicalize_segments(soup)

    # STEP 2: STITCH CYCLES
    assembly = assemble_cycles(segments, allow_partial=params["ALLOW_PARTIAL"])

    # STEP 3: BOUNDS
    polygon_bounds, overall = compute_bounds(assembly.polygons)

    # STEP 4: ALLOCATE GRID
    grid = allocate_grid(overall, params["RESOLUTION"], params["MARGIN_FACTOR"])

    # STEP 5: RASTERIZE
    grid = rasterize(grid, assembly.polygons, params=params)

    result = PipelineResult(
        grid=grid,
        polygons=list(assembly.polygons),
        polygon_bounds=polygon_bounds,
        bounds=overall,
        unmatched=list(assembly.unmatched),
    )
    if not result.complete:
        log.warning(
            "grid built from %d closed polygons; %d segments could not be closed",
            len(result.polygons), len(result.unmatched),
        )
    return result


def run_pipeline(vertices: Sequence[ContourVertex], params: Optional[dict] = None) -> PipelineResult:
    """
    Full pipeline from a contour vertex sequence.

    Raises DanglingReference, MalformedContour (strict mode) or
    InvalidGridSize.
    """
    return run_pipeline_from_segments(build_segment_soup(vertices), params=params)


def run_pipeline_from_pairs(pairs, params: Optional[dict] = None) -> PipelineResult:
    """Full pipeline from plain endpoint pairs."""
    return run_pipeline_from_segments(segments_from_pairs(pairs), params=params)
