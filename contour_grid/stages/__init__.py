"""
Stages Package

Contains the pipeline stages, leaves first:
- Segment soup construction
- Segment canonicalization & deduplication
- Cycle assembly
- Bounding boxes
- Grid allocation
- Rasterization
"""

from .segment_soup import build_segment_soup, segments_from_pairs
from .canonicalizer import canonicalize_segments
from .cycle_assembler import assemble_cycles, CycleAssembly
from .bounds import compute_bounds
from .grid_allocator import allocate_grid
from .rasterizer import rasterize, candidate_range

__all__ = [
    "build_segment_soup",
    "segments_from_pairs",
    "canonicalize_segments",
    "assemble_cycles",
    "CycleAssembly",
    "compute_bounds",
    "allocate_grid",
    "rasterize",
    "candidate_range",
]
