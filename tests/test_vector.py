import math

import pytest

from tankarena.vector import Vec2


def test_length_of_three_four():
    assert Vec2(3.0, 4.0).length() == pytest.approx(5.0)


def test_normalized_has_unit_length_and_same_direction():
    v = Vec2(-2.5, 7.0)
    n = v.normalized()
    assert n.length() == pytest.approx(1.0)
    assert n.cross(v) == pytest.approx(0.0)
    assert n.dot(v) > 0


def test_normalized_zero_raises():
    with pytest.raises(ValueError):
        Vec2(0.0, 0.0).normalized()


def test_dot_of_perpendicular_is_zero():
    assert Vec2(2.0, 0.0).dot(Vec2(0.0, 3.0)) == 0.0


def test_cross_is_antisymmetric():
    a = Vec2(1.5, -2.0)
    b = Vec2(0.5, 4.0)
    assert a.cross(b) == pytest.approx(-b.cross(a))
    assert a.cross(a) == 0.0


def test_rotated_quarter_turn():
    r = Vec2(1.0, 0.0).rotated(math.pi / 2)
    assert r.x == pytest.approx(0.0, abs=1e-12)
    assert r.y == pytest.approx(1.0)


@pytest.mark.parametrize("angle", [0.3, -1.2, math.pi, 5.0])
def test_rotation_round_trip_and_length(angle):
    v = Vec2(3.0, -1.0)
    r = v.rotated(angle)
    assert r.length() == pytest.approx(v.length())
    back = r.rotated(-angle)
    assert back.x == pytest.approx(v.x)
    assert back.y == pytest.approx(v.y)


def test_arithmetic_round_trip():
    a = Vec2(1.0, 2.0)
    b = Vec2(-3.0, 0.5)
    assert (a + b) - b == a
    assert a * 2.0 == 2.0 * a
    assert (a * 4.0) / 4.0 == a
    assert -a + a == Vec2(0.0, 0.0)


def test_unpacking_and_equality():
    x, y = Vec2(7.0, 8.0)
    assert (x, y) == (7.0, 8.0)
    assert Vec2(7.0, 8.0) == Vec2(7.0, 8.0)