"""Greedy descending-length pruning pass."""

from __future__ import annotations

import logging
from typing import List, Sequence

from .collision import COLLISION_MODES, collision_mask, lines_to_array
from .geometry import Line
from .logging_utils import debug_log_call

logger = logging.getLogger(__name__)


@debug_log_call(logger)
def prune_lines(lines: Sequence[Line], mode: str = "legacy") -> List[Line]:
    """Keep each line that collides with none of the lines sorted after it.

    Lines are stably sorted by truncated length, longest first, so ties keep
    their input order. Line ``i`` survives only if ``collides(line_i, line_j)``
    is false for every ``j > i``; the last line always survives. The result is
    in sorted order and pruning it again returns it unchanged.
    """

    if mode not in COLLISION_MODES:
        raise ValueError(f"unknown collision mode {mode!r}; expected one of {COLLISION_MODES}")

    ordered = sorted(lines, key=Line.length, reverse=True)
    if not ordered:
        return []

    packed = lines_to_array(ordered)
    pruned: List[Line] = []
    for i, line in enumerate(ordered):
        if not collision_mask(line, packed[i + 1:], mode).any():
            pruned.append(line)

    logger.info(
        "Pruned %d line(s) down to %d using %s collisions",
        len(ordered),
        len(pruned),
        mode,
    )
    return pruned
