"""Sample -> pair lines -> midpoint lines -> prune."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

import numpy as np

from .config import PipelineOptions, get_default_options
from .geometry import Line, Point, Polygon
from .lines import midpoint_lines, pair_lines
from .prune import prune_lines
from .sampling import make_sampler, sample_points
from .validate import validate_options

logger = logging.getLogger(__name__)


@dataclass
class VoronoiResult:
    """Output of one pipeline run.

    ``polygons`` is never filled; the usable artefact is ``lines``, the pruned
    segments in descending length order.
    """

    points: List[Point]
    lines: List[Line]
    polygons: List[Polygon] = field(default_factory=list)
    stats: Dict[str, int] = field(default_factory=dict)


def build_voronoi(
    options: Optional[PipelineOptions] = None,
    *,
    rng: Optional[np.random.Generator] = None,
) -> VoronoiResult:
    """Run the full pipeline for ``options``.

    ``rng`` takes precedence over ``options.seed``. Cost grows with the sixth
    power of the point count: ``n`` points give ``n(n-1)/2`` pair lines, their
    midpoints give the square of that, and pruning is quadratic again.
    """

    options = options or get_default_options()
    validate_options(options)
    if rng is None:
        rng = np.random.default_rng(options.seed)

    logger.info(
        "Building skeleton: points=%d sampling=%s collision=%s",
        options.point_count,
        options.sampling,
        options.collision,
    )

    sampler = make_sampler(options.sampling, options.bounds, max_redraws=options.max_redraws)
    points = sample_points(options.point_count, rng, sampler)
    initial = pair_lines(points)
    mids = midpoint_lines(initial)
    pruned = prune_lines(mids, options.collision)

    stats = {
        "points": len(points),
        "pair_lines": len(initial),
        "midpoint_lines": len(mids),
        "pruned_lines": len(pruned),
    }
    logger.info("Pipeline finished: %s", stats)
    return VoronoiResult(points=points, lines=pruned, stats=stats)
