import argparse
import logging

from contour_grid.pipeline import run_pipeline, run_pipeline_from_pairs
from contour_grid.errors import ContourGridError
from contour_grid.utils.contour_io import (
    ensure_output_dir,
    extract_numeric_id,
    find_contour_files,
    read_contour,
)
from contour_grid.errors import MalformedInput
from contour_grid.visualization.save_outputs import save_all_outputs
from contour_grid.config import (
    SELECTED_CONTOUR_PATTERN,
    OUTPUT_FOLDER,
    get_active_params,
)

log = logging.getLogger("contour_grid")


def process_contour(kind: str, payload, contour_name: str, output_dir: str = OUTPUT_FOLDER, params=None):
    """
    Runs the complete pipeline for one contour:
      1. Segment soup (vertex links or plain pairs)
      2. Canonicalization & deduplication
      3. Cycle assembly
      4. Bounding boxes
      5. Grid allocation
      6. Rasterization
      7. Save all outputs (grid image, polygon overlay, npz, json)

    Returns the PipelineResult, or None when the contour was rejected.
    """
    log.info("=== Processing contour with name: %s ===", contour_name)
    if params is None:
        params = get_active_params()

    try:
        if kind == "vertices":
            result = run_pipeline(payload, params=params)
        else:
            result = run_pipeline_from_pairs(payload, params=params)
    except ContourGridError as exc:
        log.warning("%s rejected (%s): %s", contour_name, type(exc).__name__, exc)
        return None

    save_all_outputs(
        output_dir=output_dir,
        contour_id=contour_name,
        grid=result.grid,
        polygons=result.polygons,
    )

    status = "OK" if result.complete else "PARTIAL"
    log.info(
        "[%s] Finished %s: %d polygons, %dx%d grid, %d occupied",
        status, contour_name, len(result.polygons),
        result.grid.width, result.grid.height, result.grid.occupied_count(),
    )
    return result


def build_arg_parser():
    parser = argparse.ArgumentParser(description="Rasterize contour polygons into occupancy grids.")
    parser.add_argument("--pattern", default=SELECTED_CONTOUR_PATTERN, help="glob of contour JSON files")
    parser.add_argument("--output", default=OUTPUT_FOLDER, help="output directory")
    parser.add_argument("--resolution", type=float, default=None, help="world units per cell")
    parser.add_argument("--margin", type=float, default=None, help="grid margin factor")
    parser.add_argument("--workers", type=int, default=None, help="rasterizer threads")
    parser.add_argument("--lenient", action="store_true", help="keep closed polygons of malformed contours")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def main(argv=None):
    """
    Main entry point:
      - Loads contour files
      - Processes each one independently
      - Saves output files
    """
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="[%(levelname)s] %(message)s",
    )

    params = get_active_params(strict=not args.lenient)
    if args.resolution is not None:
        params["RESOLUTION"] = args.resolution
    if args.margin is not None:
        params["MARGIN_FACTOR"] = args.margin
    if args.workers is not None:
        params["RASTER_WORKERS"] = args.workers

    ensure_output_dir(args.output)

    files = find_contour_files(args.pattern)
    if not files:
        log.error("No contours matched pattern: %s", args.pattern)
        return 1

    failures = 0
    for fname in files:
        name = extract_numeric_id(fname)
        try:
            kind, payload = read_contour(fname)
        except (OSError, MalformedInput) as exc:
            log.warning("%s rejected (%s): %s", name, type(exc).__name__, exc)
            failures += 1
            continue
        if process_contour(kind, payload, name, output_dir=args.output, params=params) is None:
            failures += 1

    log.info("=== All contours processed (%d rejected) ===", failures)
    return 0 if failures == 0 else 2


if __name__ == "__main__":
    raise SystemExit(main())
