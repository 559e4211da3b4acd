import math

import pytest

from epath.geometry import (
    DegenerateVectorError,
    Line,
    cross,
    distance,
    normalized,
    turn_angle,
    vector,
)


def test_normalized_unit_length():
    ux, uy = normalized((3.0, 4.0))
    assert math.isclose(ux, 0.6)
    assert math.isclose(uy, 0.8)


def test_normalized_zero_vector_raises():
    with pytest.raises(DegenerateVectorError):
        normalized((0.0, 0.0))
    assert issubclass(DegenerateVectorError, ValueError)


def test_cross_sign_follows_screen_turns():
    heading_up = vector((0.0, 100.0), (0.0, 0.0))
    heading_right = (1.0, 0.0)
    # y grows downwards: going up then right is a clockwise (right) turn
    assert cross(heading_up, heading_right) > 0
    assert cross(heading_right, heading_up) < 0
    assert cross((2.0, 2.0), (1.0, 1.0)) == 0


def test_turn_angle_is_signed():
    assert math.isclose(turn_angle((1.0, 0.0), (0.0, 1.0)), math.pi / 2)
    assert math.isclose(turn_angle((1.0, 0.0), (0.0, -1.0)), -math.pi / 2)
    assert math.isclose(turn_angle((1.0, 0.0), (1.0, 0.0)), 0.0)


def test_line_points_from_both_ends():
    line = Line((0.0, 0.0), (10.0, 0.0))
    assert line.point_from_start(3.0) == pytest.approx((3.0, 0.0))
    assert line.point_from_end(3.0) == pytest.approx((7.0, 0.0))
    assert line.reversed() == Line((10.0, 0.0), (0.0, 0.0))
    assert line.length == 10.0


def test_zero_length_line_cannot_walk():
    line = Line((1.0, 1.0), (1.0, 1.0))
    with pytest.raises(DegenerateVectorError):
        line.point_from_start(1.0)
    with pytest.raises(DegenerateVectorError):
        line.point_from_end(1.0)


def test_line_intersection():
    horizontal = Line((0.0, 0.0), (10.0, 0.0))
    vertical = Line((5.0, -5.0), (5.0, 5.0))
    assert horizontal.intersection(vertical) == pytest.approx((5.0, 0.0))


def test_intersection_extends_beyond_endpoints():
    a = Line((0.0, 0.0), (1.0, 1.0))
    b = Line((10.0, 0.0), (9.0, 1.0))
    assert a.intersection(b) == pytest.approx((5.0, 5.0))


def test_parallel_lines_have_no_intersection():
    a = Line((0.0, 0.0), (1.0, 0.0))
    b = Line((0.0, 1.0), (5.0, 1.0))
    assert a.intersection(b) is None
    assert a.intersection(Line((2.0, 0.0), (3.0, 0.0))) is None


def test_distance():
    assert distance((0.0, 0.0), (3.0, 4.0)) == 5.0
