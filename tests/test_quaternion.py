import math

import pytest

from engine3d.matrix import Matrix4
from engine3d.quaternion import Quaternion, matrix_from_quaternion
from engine3d.vectors import Vector3


def assert_quat_close(a, b, tol=1e-9):
    assert all(math.isclose(p, q, abs_tol=tol) for p, q in zip(a, b)), (a, b)


def assert_matrix_close(a, b, tol=1e-9):
    assert all(math.isclose(p, q, abs_tol=tol) for p, q in zip(a.values, b.values)), (a, b)


def test_identity_and_zero_constants():
    assert tuple(Quaternion.IDENTITY) == (0.0, 0.0, 0.0, 1.0)
    assert tuple(Quaternion.ZERO) == (0.0, 0.0, 0.0, 0.0)
    assert Quaternion.IDENTITY.magnitude() == 1.0
    assert Quaternion.ZERO.magnitude_sqr() == 0.0


def test_operators():
    a = Quaternion(1.0, 2.0, 3.0, 4.0)
    b = Quaternion(0.5, 0.5, 0.5, 0.5)
    assert a + b == Quaternion(1.5, 2.5, 3.5, 4.5)
    assert a * 2.0 == Quaternion(2.0, 4.0, 6.0, 8.0)
    assert 2.0 * a == a * 2.0
    assert a / 2.0 == Quaternion(0.5, 1.0, 1.5, 2.0)
    assert -a == Quaternion(-1.0, -2.0, -3.0, -4.0)
    assert a != b


def test_conjugate_negates_vector_part():
    q = Quaternion(1.0, -2.0, 3.0, 4.0)
    assert q.conjugate() == Quaternion(-1.0, 2.0, -3.0, 4.0)
    assert q.conjugate().conjugate() == q


def test_magnitude_and_dot():
    q = Quaternion(1.0, 2.0, 3.0, 4.0)
    assert q.magnitude_sqr() == q.dot(q)
    assert math.isclose(q.magnitude() ** 2, q.magnitude_sqr())


def test_normalized_has_unit_length():
    q = Quaternion(1.0, 2.0, 3.0, 4.0).normalized()
    assert math.isclose(q.magnitude(), 1.0)


def test_inverse_of_unit_quaternion_is_conjugate():
    q = Quaternion.from_axis_angle(Vector3(1.0, 2.0, 3.0), 0.7)
    assert_quat_close(q.inverse(), q.conjugate())


def test_inverse_scales_by_squared_magnitude():
    q = Quaternion(1.0, 2.0, 3.0, 4.0)
    inv = q.inverse()
    assert_quat_close(inv * q.magnitude_sqr(), q.conjugate())


def test_zero_quaternion_errors():
    with pytest.raises(ZeroDivisionError):
        Quaternion.ZERO.inverse()
    with pytest.raises(ZeroDivisionError):
        Quaternion.ZERO.normalized()


def test_from_axis_angle_is_unit_and_normalizes_axis():
    a = Quaternion.from_axis_angle(Vector3(0.0, 5.0, 0.0), 1.2)
    b = Quaternion.from_axis_angle(Vector3(0.0, 1.0, 0.0), 1.2)
    assert_quat_close(a, b)
    assert math.isclose(a.magnitude(), 1.0)


def test_from_axis_angle_zero_angle_is_identity():
    assert_quat_close(Quaternion.from_axis_angle(Vector3(1.0, 1.0, 0.0), 0.0), Quaternion.IDENTITY)


def test_from_yaw_pitch_roll_zero_is_identity():
    assert_quat_close(Quaternion.from_yaw_pitch_roll(0.0, 0.0, 0.0), Quaternion.IDENTITY)


@pytest.mark.parametrize(
    "ypr, axis",
    [
        ((0.8, 0.0, 0.0), Vector3.Y_AXIS),
        ((0.0, 0.8, 0.0), Vector3.X_AXIS),
        ((0.0, 0.0, 0.8), Vector3.Z_AXIS),
    ],
)
def test_from_yaw_pitch_roll_single_axes(ypr, axis):
    assert_quat_close(Quaternion.from_yaw_pitch_roll(*ypr), Quaternion.from_axis_angle(axis, 0.8))


def test_matrix_from_identity_quaternion():
    assert_matrix_close(matrix_from_quaternion(Quaternion.IDENTITY), Matrix4.IDENTITY)


@pytest.mark.parametrize(
    "axis, builder",
    [
        (Vector3.X_AXIS, Matrix4.rotation_x),
        (Vector3.Y_AXIS, Matrix4.rotation_y),
        (Vector3.Z_AXIS, Matrix4.rotation_z),
    ],
)
def test_matrix_matches_axis_rotations(axis, builder):
    q = Quaternion.from_axis_angle(axis, 0.6)
    assert_matrix_close(matrix_from_quaternion(q), builder(0.6))


def test_matrix_matches_rotation_axis():
    axis = Vector3(1.0, 2.0, 3.0)
    q = Quaternion.from_axis_angle(axis, 1.1)
    assert_matrix_close(matrix_from_quaternion(q), Matrix4.rotation_axis(axis, 1.1))


def test_from_rotation_matrix_identity():
    assert_quat_close(Quaternion.from_rotation_matrix(Matrix4.IDENTITY), Quaternion.IDENTITY)


def test_from_rotation_matrix_round_trip_small_rotation():
    q = Quaternion.from_axis_angle(Vector3(1.0, 2.0, 3.0), 0.3)
    back = Quaternion.from_rotation_matrix(matrix_from_quaternion(q))
    assert_quat_close(back, q)


def test_lerp_endpoints_and_midpoint():
    a = Quaternion(0.0, 0.0, 0.0, 1.0)
    b = Quaternion(1.0, 0.0, 0.0, 0.0)
    assert_quat_close(Quaternion.lerp(a, b, 0.0), a)
    assert_quat_close(Quaternion.lerp(a, b, 1.0), b)
    assert_quat_close(Quaternion.lerp(a, b, 0.5), (a + b) * 0.5)


def test_slerp_endpoints():
    a = Quaternion.IDENTITY
    b = Quaternion.from_axis_angle(Vector3.Y_AXIS, math.pi / 2)
    assert_quat_close(Quaternion.slerp(a, b, 0.0), a)
    assert_quat_close(Quaternion.slerp(a, b, 1.0), b)


def test_slerp_midpoint_halves_angle():
    a = Quaternion.IDENTITY
    b = Quaternion.from_axis_angle(Vector3.Y_AXIS, math.pi / 2)
    mid = Quaternion.slerp(a, b, 0.5)
    assert_quat_close(mid, Quaternion.from_axis_angle(Vector3.Y_AXIS, math.pi / 4))


def test_slerp_takes_shorter_arc():
    a = Quaternion.IDENTITY
    b = Quaternion.from_axis_angle(Vector3.Y_AXIS, math.pi / 2)
    assert_quat_close(Quaternion.slerp(a, -b, 1.0), b)


def test_slerp_nearly_equal_quaternions():
    q = Quaternion.from_axis_angle(Vector3.Z_AXIS, 0.4)
    result = Quaternion.slerp(q, q, 0.5)
    assert_quat_close(result, q)
    assert math.isclose(result.magnitude(), 1.0)