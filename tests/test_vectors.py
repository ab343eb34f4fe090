import math

import pytest

from engine3d import constants
from engine3d.vectors import (
    Vector2,
    Vector3,
    Vector4,
    clamp,
    cross,
    distance,
    distance_sqr,
    dot,
    lerp,
    magnitude,
    magnitude_sqr,
    normalize,
    sqr,
)


def test_constants_relations():
    assert lerp(0.0, constants.TWO_PI, 0.5) == pytest.approx(constants.PI)
    assert sqr(constants.HALF_PI * 2) == pytest.approx(sqr(constants.PI))
    assert clamp(constants.DEG_TO_RAD * constants.RAD_TO_DEG, 0.0, 2.0) == pytest.approx(1.0)


def test_default_vectors_are_zero():
    assert Vector3() == Vector3.ZERO
    assert tuple(Vector2()) == (0.0, 0.0)
    assert tuple(Vector4()) == (0.0, 0.0, 0.0, 0.0)


def test_filled():
    assert Vector3.filled(2.5) == Vector3(2.5, 2.5, 2.5)
    assert Vector2.filled(1.0) == Vector2.ONE


def test_vector3_arithmetic_round_trip():
    a = Vector3(1.0, -2.0, 3.5)
    b = Vector3(0.25, 4.0, -1.0)
    assert (a + b) - b == a
    assert -(-a) == a
    assert tuple((a * 4.0) / 4.0) == pytest.approx(tuple(a))
    assert 2.0 * a == a * 2.0


def test_vector_in_place_ops_rebind():
    v = Vector2(1.0, 2.0)
    v += Vector2(3.0, 4.0)
    assert v == Vector2(4.0, 6.0)
    v *= 0.5
    assert v == Vector2(2.0, 3.0)


def test_vector4_colour_aliases():
    c = Vector4(0.1, 0.2, 0.3, 0.4)
    assert (c.r, c.g, c.b, c.a) == (c.x, c.y, c.z, c.w)
    assert c + (-c) == Vector4()


def test_vectors_are_immutable():
    v = Vector3(1.0, 2.0, 3.0)
    with pytest.raises(AttributeError):
        v.x = 5.0
    assert v == Vector3(1.0, 2.0, 3.0)


def test_clamp():
    assert clamp(5, 0, 3) == 3
    assert clamp(-1, 0, 3) == 0
    assert clamp(2, 0, 3) == 2


def test_lerp_endpoints():
    a = Vector3(1.0, 2.0, 3.0)
    b = Vector3(-4.0, 0.0, 8.0)
    assert lerp(a, b, 0.0) == a
    assert lerp(a, b, 1.0) == b
    assert lerp(2.0, 6.0, 0.5) == pytest.approx(4.0)


def test_sqr():
    assert sqr(-3) == 9


def test_dot_and_magnitude_agree():
    v = Vector3(3.0, -4.0, 12.0)
    assert dot(v, v) == magnitude_sqr(v)
    assert magnitude(v) == pytest.approx(math.sqrt(magnitude_sqr(v)))


def test_axes_are_orthonormal():
    axes = [Vector3.X_AXIS, Vector3.Y_AXIS, Vector3.Z_AXIS]
    for a in axes:
        assert magnitude(a) == 1.0
        for b in axes:
            if a is not b:
                assert dot(a, b) == 0.0


def test_cross_of_axes():
    assert cross(Vector3.X_AXIS, Vector3.Y_AXIS) == Vector3.Z_AXIS
    assert cross(Vector3.Y_AXIS, Vector3.Z_AXIS) == Vector3.X_AXIS
    assert cross(Vector3.Z_AXIS, Vector3.X_AXIS) == Vector3.Y_AXIS


def test_cross_is_perpendicular_and_anticommutative():
    a = Vector3(1.0, 2.0, 3.0)
    b = Vector3(-2.0, 0.5, 4.0)
    c = cross(a, b)
    assert dot(c, a) == pytest.approx(0.0)
    assert dot(c, b) == pytest.approx(0.0)
    assert cross(b, a) == -c


def test_distance_symmetric_and_consistent():
    a = Vector3(1.0, 5.0, -2.0)
    b = Vector3(4.0, 1.0, 10.0)
    assert distance(a, b) == pytest.approx(distance(b, a))
    assert distance_sqr(a, b) == pytest.approx(magnitude_sqr(a - b))
    assert distance(a, a) == 0.0


def test_normalize_gives_unit_length():
    v = normalize(Vector3(2.0, -7.0, 0.5))
    assert magnitude(v) == pytest.approx(1.0)


def test_normalize_zero_vector_raises():
    with pytest.raises(ZeroDivisionError):
        normalize(Vector3.ZERO)