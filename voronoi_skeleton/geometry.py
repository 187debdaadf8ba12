"""Integer geometry primitives shared by the pipeline stages."""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass, field
from typing import List, Tuple

COORD_MIN = -(2 ** 15)
COORD_MAX = 2 ** 15 - 1


class GeometryError(ValueError):
    """Raised when a coordinate cannot be represented."""


def to_coord(value: float) -> int:
    """Truncate ``value`` toward zero into the coordinate range."""

    if isinstance(value, numbers.Integral):
        result = int(value)
    else:
        value = float(value)
        if not math.isfinite(value):
            raise GeometryError(f"cannot convert non-finite value {value!r} to a coordinate")
        result = math.trunc(value)
    if result < COORD_MIN or result > COORD_MAX:
        raise GeometryError(f"coordinate {result} outside [{COORD_MIN}, {COORD_MAX}]")
    return result


def _check_coord(value: object, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise GeometryError(f"{name} must be an integer, got {value!r}")
    value = int(value)
    if value < COORD_MIN or value > COORD_MAX:
        raise GeometryError(f"{name}={value} outside [{COORD_MIN}, {COORD_MAX}]")
    return value


@dataclass(frozen=True, order=True)
class Point:
    x: int
    y: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", _check_coord(self.x, "x"))
        object.__setattr__(self, "y", _check_coord(self.y, "y"))

    def as_tuple(self) -> Tuple[int, int]:
        return (self.x, self.y)


@dataclass(frozen=True, order=True)
class Line:
    """Segment from ``a`` to ``b``.

    Direction only matters to the legacy collision test, which measures the
    endpoints of another line against ``a``. Ordering is lexicographic on
    ``(a, b)``.
    """

    a: Point
    b: Point

    @classmethod
    def from_coords(cls, x0: int, y0: int, x1: int, y1: int) -> "Line":
        return cls(Point(x0, y0), Point(x1, y1))

    def reversed(self) -> "Line":
        return Line(self.b, self.a)

    def as_tuple(self) -> Tuple[int, int, int, int]:
        return (self.a.x, self.a.y, self.b.x, self.b.y)

    def length(self) -> int:
        """Euclidean length, truncated toward zero and saturated at ``COORD_MAX``."""

        dx = self.a.x - self.b.x
        dy = self.a.y - self.b.y
        return min(math.trunc(math.sqrt(dx * dx + dy * dy)), COORD_MAX)

    def midpoint(self) -> Point:
        """Average of the endpoints; each coordinate is truncated toward zero."""

        return Point(
            to_coord((self.a.x + self.b.x) / 2.0),
            to_coord((self.a.y + self.b.y) / 2.0),
        )


@dataclass(frozen=True)
class Rect:
    """Axis-aligned region spanned by two corner points."""

    corners: Line

    @classmethod
    def from_coords(cls, x0: int, y0: int, x1: int, y1: int) -> "Rect":
        return cls(Line.from_coords(x0, y0, x1, y1))

    @classmethod
    def from_points(cls, p0: Point, p1: Point) -> "Rect":
        return cls(Line(p0, p1))

    @property
    def x0(self) -> int:
        return self.corners.a.x

    @property
    def y0(self) -> int:
        return self.corners.a.y

    @property
    def x1(self) -> int:
        return self.corners.b.x

    @property
    def y1(self) -> int:
        return self.corners.b.y

    @property
    def min_x(self) -> int:
        return min(self.x0, self.x1)

    @property
    def max_x(self) -> int:
        return max(self.x0, self.x1)

    @property
    def min_y(self) -> int:
        return min(self.y0, self.y1)

    @property
    def max_y(self) -> int:
        return max(self.y0, self.y1)

    def contains(self, point: Point) -> bool:
        return self.min_x <= point.x <= self.max_x and self.min_y <= point.y <= self.max_y


@dataclass
class Polygon:
    """Closed cell boundary. Cell assembly is not implemented, so these stay empty."""

    lines: List[Line] = field(default_factory=list)
