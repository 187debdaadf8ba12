import math

import pytest

from voronoi_skeleton import COORD_MAX, COORD_MIN, GeometryError, Line, Point, Polygon, Rect, to_coord


def test_length_of_pythagorean_triple_is_exact():
    assert Line.from_coords(0, 0, 3, 4).length() == 5


def test_length_truncates_toward_zero():
    assert Line.from_coords(0, 0, 1, 1).length() == 1
    assert Line.from_coords(0, 0, 2, 3).length() == 3
    assert Line.from_coords(5, 5, 5, 5).length() == 0


def test_length_saturates_at_coordinate_max():
    assert Line.from_coords(-20000, 0, 20000, 0).length() == COORD_MAX
    assert Line.from_coords(COORD_MIN, COORD_MIN, COORD_MAX, COORD_MAX).length() == COORD_MAX
    assert Line.from_coords(0, 0, COORD_MAX, 0).length() == COORD_MAX


def test_midpoint_even_sum():
    assert Line.from_coords(0, 0, 4, 4).midpoint() == Point(2, 2)


def test_midpoint_truncates_half_toward_zero():
    assert Line.from_coords(0, 0, 3, 3).midpoint() == Point(1, 1)
    assert Line.from_coords(0, 0, -3, -3).midpoint() == Point(-1, -1)
    assert Line.from_coords(-1, 0, 0, 1).midpoint() == Point(0, 0)


def test_to_coord_truncates_and_checks_range():
    assert to_coord(2.9) == 2
    assert to_coord(-2.9) == -2
    assert to_coord(COORD_MAX) == COORD_MAX
    with pytest.raises(GeometryError):
        to_coord(COORD_MAX + 1)
    with pytest.raises(GeometryError):
        to_coord(float(COORD_MIN) - 1.0)


@pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
def test_to_coord_rejects_non_finite(value):
    with pytest.raises(GeometryError):
        to_coord(value)


@pytest.mark.parametrize("x", [1.5, "3", True, COORD_MAX + 1, COORD_MIN - 1])
def test_point_rejects_invalid_coordinates(x):
    with pytest.raises(GeometryError):
        Point(x, 0)


def test_point_and_line_order_lexicographically():
    points = [Point(1, 2), Point(0, 5), Point(1, -1)]
    assert sorted(points) == [Point(0, 5), Point(1, -1), Point(1, 2)]

    l1 = Line.from_coords(0, 0, 1, 1)
    l2 = Line.from_coords(0, 0, 0, 9)
    l3 = Line.from_coords(-1, 7, 0, 0)
    assert sorted([l1, l2, l3]) == [l3, l2, l1]


def test_points_are_immutable_and_hashable():
    p = Point(3, 4)
    with pytest.raises(AttributeError):
        p.x = 5  # type: ignore[misc]
    assert len({Point(3, 4), p}) == 1


def test_line_helpers():
    line = Line.from_coords(1, 2, 3, 4)
    assert line.as_tuple() == (1, 2, 3, 4)
    assert line.reversed() == Line.from_coords(3, 4, 1, 2)
    assert line.reversed().length() == line.length()


def test_rect_accessors_and_contains():
    rect = Rect.from_coords(10, -10, -10, 10)
    assert (rect.x0, rect.y0, rect.x1, rect.y1) == (10, -10, -10, 10)
    assert (rect.min_x, rect.max_x, rect.min_y, rect.max_y) == (-10, 10, -10, 10)
    assert rect.contains(Point(-10, 10))
    assert rect.contains(Point(0, 0))
    assert not rect.contains(Point(11, 0))
    assert Rect.from_points(Point(10, -10), Point(-10, 10)) == rect


def test_polygon_defaults_to_empty():
    assert Polygon().lines == []
