"""All-pairs segment construction."""

from __future__ import annotations

import logging
from itertools import combinations
from typing import List, Sequence

from .geometry import Line, Point
from .logging_utils import apply_debug_logging

logger = logging.getLogger(__name__)


def pair_lines(points: Sequence[Point]) -> List[Line]:
    """Connect every unordered pair of distinct indices ``i < j``.

    Output follows ``(i, j)`` lexicographic order; nothing downstream relies
    on it.
    """

    lines = [Line(a, b) for a, b in combinations(points, 2)]
    logger.info("Built %d pair line(s) from %d point(s)", len(lines), len(points))
    return lines


def midpoints(lines: Sequence[Line]) -> List[Point]:
    return [line.midpoint() for line in lines]


def midpoint_lines(lines: Sequence[Line]) -> List[Line]:
    """Connect the midpoints of every pair of ``lines``."""

    mids = midpoints(lines)
    logger.debug("Computed %d midpoint(s)", len(mids))
    return pair_lines(mids)


apply_debug_logging(globals(), logger=logger)
