"""Quaternions for rotations, and their conversion to and from matrices."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar, Iterator

from .matrix import Matrix4
from .vectors import Vector3, normalize

__all__ = ["Quaternion", "matrix_from_quaternion"]


def _sqrt(value: float) -> float:
    """Square root that yields NaN for negative input instead of raising."""
    return math.sqrt(value) if value >= 0.0 else math.nan


@dataclass(frozen=True, slots=True)
class Quaternion:
    """A quaternion stored as (x, y, z, w), with w the scalar part."""

    x: float
    y: float
    z: float
    w: float

    IDENTITY: ClassVar[Quaternion]
    ZERO: ClassVar[Quaternion]

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def __neg__(self) -> Quaternion:
        return Quaternion(-self.x, -self.y, -self.z, -self.w)

    def __add__(self, other: Quaternion) -> Quaternion:
        return Quaternion(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def __mul__(self, s: float) -> Quaternion:
        if isinstance(s, Quaternion):
            return NotImplemented
        return Quaternion(self.x * s, self.y * s, self.z * s, self.w * s)

    __rmul__ = __mul__

    def __truediv__(self, s: float) -> Quaternion:
        return Quaternion(self.x / s, self.y / s, self.z / s, self.w / s)

    def conjugate(self) -> Quaternion:
        """Return the quaternion with its vector part negated."""
        return Quaternion(-self.x, -self.y, -self.z, self.w)

    def inverse(self) -> Quaternion:
        """Return the multiplicative inverse; the zero quaternion raises ZeroDivisionError."""
        return self.conjugate() / self.magnitude_sqr()

    def magnitude(self) -> float:
        return math.sqrt(self.magnitude_sqr())

    def magnitude_sqr(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z + self.w * self.w

    def normalized(self) -> Quaternion:
        """Return this quaternion scaled to unit length."""
        return self / self.magnitude()

    def dot(self, other: Quaternion) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z + self.w * other.w

    @staticmethod
    def from_axis_angle(axis: Vector3, angle: float) -> Quaternion:
        c = math.cos(angle * 0.5)
        s = math.sin(angle * 0.5)
        n = normalize(axis)
        return Quaternion(n.x * s, n.y * s, n.z * s, c)

    @staticmethod
    def from_yaw_pitch_roll(yaw: float, pitch: float, roll: float) -> Quaternion:
        cy, sy = math.cos(yaw * 0.5), math.sin(yaw * 0.5)
        cp, sp = math.cos(pitch * 0.5), math.sin(pitch * 0.5)
        cr, sr = math.cos(roll * 0.5), math.sin(roll * 0.5)
        return Quaternion(
            cr * sp * cy + sr * cp * sy,
            cr * cp * sy - sr * sp * cy,
            sr * cp * cy - cr * sp * sy,
            cr * cp * cy + sr * sp * sy,
        )

    @staticmethod
    def from_rotation_matrix(m: Matrix4) -> Quaternion:
        """Extract a rotation from the upper 3x3 part of ``m``."""
        (m11, m12, m13, _,
         m21, m22, m23, _,
         m31, m32, m33, _,
         _, _, _, _) = m.values
        w = _sqrt(m11 + m22 + m33 + 1.0) * 0.5
        x = _sqrt(m11 - m22 - m33 + 1.0) * 0.5
        y = _sqrt(m11 + m22 - m33 + 1.0) * 0.5
        z = _sqrt(m11 - m22 + m33 + 1.0) * 0.5

        if w >= x and w >= y and w >= z:
            return Quaternion(
                (m23 - m32) / (4.0 * w),
                (m31 - m13) / (4.0 * w),
                (m12 - m21) / (4.0 * w),
                w,
            )
        if x >= w and x >= y and x >= z:
            return Quaternion(
                x,
                (m12 - m21) / (4.0 * x),
                (m31 - m13) / (4.0 * x),
                (m23 - m32) / (4.0 * x),
            )
        if y >= w and y >= x and y >= z:
            return Quaternion(
                (m12 - m21) / (4.0 * y),
                y,
                (m23 - m32) / (4.0 * z),
                (m31 - m13) / (4.0 * y),
            )
        if z >= w and z >= x and z >= y:
            return Quaternion(
                (m31 - m13) / (4.0 * z),
                (m23 - m32) / (4.0 * z),
                z,
                (m12 - m21) / (4.0 * z),
            )
        return Quaternion.ZERO

    @staticmethod
    def lerp(q0: Quaternion, q1: Quaternion, t: float) -> Quaternion:
        return q0 * (1.0 - t) + q1 * t

    @staticmethod
    def slerp(q0: Quaternion, q1: Quaternion, t: float) -> Quaternion:
        """Spherical interpolation along the shorter arc, normalised."""
        d = q0.dot(q1)
        q1_scale = 1.0
        if d < 0.0:
            d = -d
            q1_scale = -1.0

        if d > 0.9999:
            return Quaternion.lerp(q0, q1, t).normalized()

        theta = math.acos(d)
        sin_theta = math.sin(theta)
        scale0 = math.sin(theta * (1.0 - t)) / sin_theta
        scale1 = q1_scale * math.sin(theta * t) / sin_theta
        return (q0 * scale0 + q1 * scale1).normalized()


Quaternion.IDENTITY = Quaternion(0.0, 0.0, 0.0, 1.0)
Quaternion.ZERO = Quaternion(0.0, 0.0, 0.0, 0.0)


def matrix_from_quaternion(q: Quaternion) -> Matrix4:
    """Return the rotation matrix described by ``q``."""
    x, y, z, w = q
    return Matrix4((
        1.0 - 2.0 * y * y - 2.0 * z * z,
        2.0 * x * y + 2.0 * z * w,
        2.0 * x * z - 2.0 * y * w,
        0.0,

        2.0 * x * y - 2.0 * z * w,
        1.0 - 2.0 * x * x - 2.0 * z * z,
        2.0 * y * z + 2.0 * x * w,
        0.0,

        2.0 * x * z + 2.0 * y * w,
        2.0 * y * z - 2.0 * x * w,
        1.0 - 2.0 * x * x - 2.0 * y * y,
        0.0,

        0.0, 0.0, 0.0, 1.0,
    ))