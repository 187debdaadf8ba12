"""Random point sampling strategies."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import List, Optional, Protocol

import numpy as np

from .geometry import COORD_MAX, COORD_MIN, Point, Rect, to_coord

logger = logging.getLogger(__name__)

SAMPLING_MODES = ("log2", "rect")


class SamplingError(RuntimeError):
    """Raised when a sampler cannot produce an acceptable coordinate."""


class BaseSampler(Protocol):
    """Protocol implemented by sampling strategies."""

    def sample(self, rng: np.random.Generator) -> Point:
        """Draw a single point from ``rng``."""


def _draw(rng: np.random.Generator, low: int, high: int) -> int:
    return int(rng.integers(low, high, endpoint=True))


@dataclass
class Log2Sampler:
    """Draw raw 16-bit values and keep their base-2 logarithm.

    Raw draws that are not positive have no logarithm and are rejected and
    redrawn. Accepted coordinates land in ``[0, 14]``; the rectangle handed to
    the pipeline does not constrain them.
    """

    max_redraws: int = 64

    def _coord(self, rng: np.random.Generator) -> int:
        for _ in range(self.max_redraws):
            raw = _draw(rng, COORD_MIN, COORD_MAX)
            if raw > 0:
                return to_coord(math.log2(raw))
        raise SamplingError(
            f"no positive raw value after {self.max_redraws} draws"
        )

    def sample(self, rng: np.random.Generator) -> Point:
        x = self._coord(rng)
        y = self._coord(rng)
        return Point(x, y)


@dataclass
class RectSampler:
    """Draw each coordinate uniformly from the rectangle's inclusive range."""

    bounds: Rect

    def sample(self, rng: np.random.Generator) -> Point:
        x = _draw(rng, self.bounds.min_x, self.bounds.max_x)
        y = _draw(rng, self.bounds.min_y, self.bounds.max_y)
        return Point(x, y)


def make_sampler(kind: str, bounds: Rect, *, max_redraws: int = 64) -> BaseSampler:
    if kind == "log2":
        return Log2Sampler(max_redraws=max_redraws)
    if kind == "rect":
        return RectSampler(bounds)
    raise ValueError(f"unknown sampling mode {kind!r}; expected one of {SAMPLING_MODES}")


def sample_points(
    count: int,
    rng: Optional[np.random.Generator] = None,
    sampler: Optional[BaseSampler] = None,
) -> List[Point]:
    """Return exactly ``count`` points drawn from ``rng``.

    A fresh unseeded generator and the log2 sampler are used when none are
    given.
    """

    if count < 0:
        raise ValueError(f"point count must be non-negative, got {count}")
    if rng is None:
        rng = np.random.default_rng()
    if sampler is None:
        sampler = Log2Sampler()

    points = [sampler.sample(rng) for _ in range(count)]
    logger.info("Sampled %d point(s) with %s", len(points), type(sampler).__name__)
    return points
