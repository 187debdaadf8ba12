"""Collision predicates used by the pruning pass.

Two predicates are available:

``legacy``
    Compares :func:`cross_signum` for both endpoints of the second line
    measured against the first. The formula mixes a cross-product term with a
    sign of ``p.y - l.a.x``, so it is not a real orientation test. It is kept
    verbatim so pruning output stays comparable with earlier runs.

``cross``
    Proper segment crossing: the interiors of the two segments intersect.
    Shared endpoints, touching and collinear overlap do not count.

Each predicate has a scalar form and a vectorised form that scores one line
against an ``(n, 4)`` array of ``(ax, ay, bx, by)`` rows.
"""

from __future__ import annotations

from typing import Callable, Dict, Sequence

import numpy as np

from .geometry import Line, Point

COLLISION_MODES = ("legacy", "cross")


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def cross_signum(line: Line, point: Point) -> int:
    a, b = line.a, line.b
    return (a.x - b.x) * (point.y - a.y) - (a.y - b.y) * _sign(point.y - a.x)


def legacy_collides(l1: Line, l2: Line) -> bool:
    return cross_signum(l1, l2.a) == cross_signum(l1, l2.b)


def _orient(p: Point, q: Point, r: Point) -> int:
    return _sign((q.x - p.x) * (r.y - p.y) - (q.y - p.y) * (r.x - p.x))


def segments_cross(l1: Line, l2: Line) -> bool:
    d1 = _orient(l2.a, l2.b, l1.a)
    d2 = _orient(l2.a, l2.b, l1.b)
    d3 = _orient(l1.a, l1.b, l2.a)
    d4 = _orient(l1.a, l1.b, l2.b)
    return d1 * d2 < 0 and d3 * d4 < 0


_SCALAR: Dict[str, Callable[[Line, Line], bool]] = {
    "legacy": legacy_collides,
    "cross": segments_cross,
}


def get_predicate(mode: str) -> Callable[[Line, Line], bool]:
    try:
        return _SCALAR[mode]
    except KeyError as exc:
        raise ValueError(f"unknown collision mode {mode!r}; expected one of {COLLISION_MODES}") from exc


def collides(l1: Line, l2: Line, mode: str = "legacy") -> bool:
    return get_predicate(mode)(l1, l2)


def lines_to_array(lines: Sequence[Line]) -> np.ndarray:
    """Pack ``lines`` into an ``(n, 4)`` int64 array."""

    if not lines:
        return np.zeros((0, 4), dtype=np.int64)
    return np.asarray([line.as_tuple() for line in lines], dtype=np.int64)


def _legacy_mask(line: Line, others: np.ndarray) -> np.ndarray:
    ax, ay, bx, by = line.as_tuple()
    dx = ax - bx
    dy = ay - by
    at_a = dx * (others[:, 1] - ay) - dy * np.sign(others[:, 1] - ax)
    at_b = dx * (others[:, 3] - ay) - dy * np.sign(others[:, 3] - ax)
    return at_a == at_b


def _orient_rows(px, py, qx, qy, rx, ry) -> np.ndarray:
    return np.sign((qx - px) * (ry - py) - (qy - py) * (rx - px))


def _cross_mask(line: Line, others: np.ndarray) -> np.ndarray:
    ax, ay, bx, by = line.as_tuple()
    cx, cy, dx, dy = others[:, 0], others[:, 1], others[:, 2], others[:, 3]
    d1 = _orient_rows(cx, cy, dx, dy, ax, ay)
    d2 = _orient_rows(cx, cy, dx, dy, bx, by)
    d3 = _orient_rows(ax, ay, bx, by, cx, cy)
    d4 = _orient_rows(ax, ay, bx, by, dx, dy)
    return (d1 * d2 < 0) & (d3 * d4 < 0)


_VECTORISED: Dict[str, Callable[[Line, np.ndarray], np.ndarray]] = {
    "legacy": _legacy_mask,
    "cross": _cross_mask,
}


def collision_mask(line: Line, others: np.ndarray, mode: str = "legacy") -> np.ndarray:
    """Boolean mask: ``mask[k]`` is ``collides(line, others[k], mode)``."""

    try:
        fn = _VECTORISED[mode]
    except KeyError as exc:
        raise ValueError(f"unknown collision mode {mode!r}; expected one of {COLLISION_MODES}") from exc
    others = np.asarray(others, dtype=np.int64).reshape(-1, 4)
    return fn(line, others)
