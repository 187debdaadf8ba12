"""Pipeline options and process-wide defaults."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Optional

from .geometry import Rect


def _default_bounds() -> Rect:
    return Rect.from_coords(-10, -10, 10, 10)


@dataclass
class PipelineOptions:
    """Inputs for a single pipeline run.

    ``bounds`` only affects sampling in ``"rect"`` mode. ``seed`` is used when
    the caller does not hand in its own generator.
    """

    point_count: int = 10
    bounds: Rect = field(default_factory=_default_bounds)
    seed: Optional[int] = None
    sampling: str = "log2"
    collision: str = "legacy"
    max_redraws: int = 64


_DEFAULT_OPTIONS = PipelineOptions()


def get_default_options() -> PipelineOptions:
    return copy.deepcopy(_DEFAULT_OPTIONS)


def set_default_options(options: PipelineOptions) -> None:
    global _DEFAULT_OPTIONS
    _DEFAULT_OPTIONS = copy.deepcopy(options)
