import argparse
import logging
import sys
from typing import Optional, Sequence

from voronoi_skeleton import (
    COLLISION_MODES,
    GeometryError,
    Rect,
    SamplingError,
    ValidationError,
    build_voronoi,
    format_lines,
    get_default_options,
)
from voronoi_skeleton.sampling import SAMPLING_MODES

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.WARNING)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def main(argv: Optional[Sequence[str]] = None) -> None:
    defaults = get_default_options()

    parser = argparse.ArgumentParser(
        description="Print a pruned midpoint-line skeleton for random points"
    )
    parser.add_argument(
        "--points",
        type=int,
        default=defaults.point_count,
        help=f"Number of points to sample (default: {defaults.point_count})",
    )
    parser.add_argument(
        "--bounds",
        type=int,
        nargs=4,
        metavar=("X0", "Y0", "X1", "Y1"),
        help="Bounding rectangle corners (default: -10 -10 10 10)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=defaults.seed,
        help="Random seed; omit for a fresh sample each run",
    )
    parser.add_argument(
        "--sampling",
        choices=SAMPLING_MODES,
        default=defaults.sampling,
        help=f"Point sampling mode (default: {defaults.sampling})",
    )
    parser.add_argument(
        "--collision",
        choices=COLLISION_MODES,
        default=defaults.collision,
        help=f"Collision predicate used while pruning (default: {defaults.collision})",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    options = defaults
    options.point_count = args.points
    options.seed = args.seed
    options.sampling = args.sampling
    options.collision = args.collision

    try:
        if args.bounds is not None:
            options.bounds = Rect.from_coords(*args.bounds)
        result = build_voronoi(options)
    except (GeometryError, ValidationError) as exc:
        logger.error("Invalid options: %s", exc)
        raise SystemExit(2) from exc
    except SamplingError as exc:
        logger.error("Point sampling failed: %s", exc)
        raise SystemExit(1) from exc

    logger.info("Writing %d line(s)", len(result.lines))
    sys.stdout.write(format_lines(result.lines))


if __name__ == "__main__":
    main()
