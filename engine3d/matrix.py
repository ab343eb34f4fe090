"""Row-major 4x4 matrices using the row-vector convention."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar, Iterable

from .vectors import Vector3, normalize

__all__ = [
    "Matrix4",
    "transform_coord",
    "transform_normal",
    "transpose",
    "determinant",
    "adjoint",
    "inverse",
    "get_translation",
    "get_right",
    "get_up",
    "get_look",
    "get_scale",
]

_IDENTITY = (
    1.0, 0.0, 0.0, 0.0,
    0.0, 1.0, 0.0, 0.0,
    0.0, 0.0, 1.0, 0.0,
    0.0, 0.0, 0.0, 1.0,
)


@dataclass(frozen=True, slots=True)
class Matrix4:
    """A 4x4 matrix holding its sixteen elements row by row."""

    values: tuple[float, ...] = _IDENTITY

    ZERO: ClassVar[Matrix4]
    IDENTITY: ClassVar[Matrix4]

    def __post_init__(self) -> None:
        values = tuple(float(v) for v in self.values)
        if len(values) != 16:
            raise ValueError(f"Matrix4 needs 16 values, got {len(values)}")
        object.__setattr__(self, "values", values)

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[float]]) -> Matrix4:
        return cls(tuple(v for row in rows for v in row))

    def __getitem__(self, key: tuple[int, int]) -> float:
        row, col = key
        if not (0 <= row < 4 and 0 <= col < 4):
            raise IndexError(f"matrix index out of range: {key}")
        return self.values[row * 4 + col]

    @property
    def rows(self) -> tuple[tuple[float, ...], ...]:
        return tuple(self.values[i:i + 4] for i in range(0, 16, 4))

    @property
    def columns(self) -> tuple[tuple[float, ...], ...]:
        return tuple(self.values[i::4] for i in range(4))

    @staticmethod
    def translation(x: float, y: float, z: float) -> Matrix4:
        return Matrix4((
            1.0, 0.0, 0.0, 0.0,
            0.0, 1.0, 0.0, 0.0,
            0.0, 0.0, 1.0, 0.0,
            x, y, z, 1.0,
        ))

    @staticmethod
    def rotation_axis(axis: Vector3, rad: float) -> Matrix4:
        u = normalize(axis)
        x, y, z = u.x, u.y, u.z
        s = math.sin(rad)
        c = math.cos(rad)
        t = 1.0 - c
        return Matrix4((
            c + x * x * t, x * y * t + z * s, x * z * t - y * s, 0.0,
            x * y * t - z * s, c + y * y * t, y * z * t + x * s, 0.0,
            x * z * t + y * s, y * z * t - x * s, c + z * z * t, 0.0,
            0.0, 0.0, 0.0, 1.0,
        ))

    @staticmethod
    def rotation_x(rad: float) -> Matrix4:
        c, s = math.cos(rad), math.sin(rad)
        return Matrix4((
            1.0, 0.0, 0.0, 0.0,
            0.0, c, s, 0.0,
            0.0, -s, c, 0.0,
            0.0, 0.0, 0.0, 1.0,
        ))

    @staticmethod
    def rotation_y(rad: float) -> Matrix4:
        c, s = math.cos(rad), math.sin(rad)
        return Matrix4((
            c, 0.0, -s, 0.0,
            0.0, 1.0, 0.0, 0.0,
            s, 0.0, c, 0.0,
            0.0, 0.0, 0.0, 1.0,
        ))

    @staticmethod
    def rotation_z(rad: float) -> Matrix4:
        c, s = math.cos(rad), math.sin(rad)
        return Matrix4((
            c, s, 0.0, 0.0,
            -s, c, 0.0, 0.0,
            0.0, 0.0, 1.0, 0.0,
            0.0, 0.0, 0.0, 1.0,
        ))

    @staticmethod
    def scaling(sx: float, sy: float | None = None, sz: float | None = None) -> Matrix4:
        """Scale matrix; with one argument the scale is uniform."""
        if sy is None:
            sy = sx
        if sz is None:
            sz = sx
        return Matrix4((
            sx, 0.0, 0.0, 0.0,
            0.0, sy, 0.0, 0.0,
            0.0, 0.0, sz, 0.0,
            0.0, 0.0, 0.0, 1.0,
        ))

    def __neg__(self) -> Matrix4:
        return Matrix4(tuple(-v for v in self.values))

    def __add__(self, other: Matrix4) -> Matrix4:
        return Matrix4(tuple(a + b for a, b in zip(self.values, other.values)))

    def __sub__(self, other: Matrix4) -> Matrix4:
        return Matrix4(tuple(a - b for a, b in zip(self.values, other.values)))

    def __mul__(self, s: float) -> Matrix4:
        if isinstance(s, Matrix4):
            return NotImplemented
        return Matrix4(tuple(v * s for v in self.values))

    __rmul__ = __mul__

    def __truediv__(self, s: float) -> Matrix4:
        return Matrix4(tuple(v / s for v in self.values))

    def __matmul__(self, other: Matrix4) -> Matrix4:
        cols = other.columns
        return Matrix4(tuple(
            sum(a * b for a, b in zip(row, col))
            for row in self.rows
            for col in cols
        ))


Matrix4.ZERO = Matrix4((0.0,) * 16)
Matrix4.IDENTITY = Matrix4()


def transform_coord(v: Vector3, m: Matrix4) -> Vector3:
    """Transform a point, applying the translation row."""
    r = m.rows
    return Vector3(
        v.x * r[0][0] + v.y * r[1][0] + v.z * r[2][0] + r[3][0],
        v.x * r[0][1] + v.y * r[1][1] + v.z * r[2][1] + r[3][1],
        v.x * r[0][2] + v.y * r[1][2] + v.z * r[2][2] + r[3][2],
    )


def transform_normal(v: Vector3, m: Matrix4) -> Vector3:
    """Transform a direction, ignoring the translation row."""
    r = m.rows
    return Vector3(
        v.x * r[0][0] + v.y * r[1][0] + v.z * r[2][0],
        v.x * r[0][1] + v.y * r[1][1] + v.z * r[2][1],
        v.x * r[0][2] + v.y * r[1][2] + v.z * r[2][2],
    )


def transpose(m: Matrix4) -> Matrix4:
    return Matrix4.from_rows(m.columns)


def determinant(m: Matrix4) -> float:
    (m11, m12, m13, m14,
     m21, m22, m23, m24,
     m31, m32, m33, m34,
     m41, m42, m43, m44) = m.values
    det = 0.0
    det += m11 * (m22 * (m33 * m44 - m43 * m34) - m23 * (m32 * m44 - m42 * m34) + m24 * (m32 * m43 - m42 * m33))
    det -= m12 * (m21 * (m33 * m44 - m43 * m34) - m23 * (m31 * m44 - m41 * m34) + m24 * (m31 * m43 - m41 * m33))
    det += m13 * (m21 * (m32 * m44 - m42 * m34) - m22 * (m31 * m44 - m41 * m34) + m24 * (m31 * m42 - m41 * m32))
    det -= m14 * (m21 * (m32 * m43 - m42 * m33) - m22 * (m31 * m43 - m41 * m33) + m23 * (m31 * m42 - m41 * m32))
    return det


def adjoint(m: Matrix4) -> Matrix4:
    """Return the adjugate (transposed cofactor matrix)."""
    (m11, m12, m13, m14,
     m21, m22, m23, m24,
     m31, m32, m33, m34,
     m41, m42, m43, m44) = m.values
    return Matrix4((
        +(m22 * (m33 * m44 - m43 * m34) - m23 * (m32 * m44 - m42 * m34) + m24 * (m32 * m43 - m42 * m33)),
        -(m12 * (m33 * m44 - m43 * m34) - m13 * (m32 * m44 - m42 * m34) + m14 * (m32 * m43 - m42 * m33)),
        +(m12 * (m23 * m44 - m43 * m24) - m13 * (m22 * m44 - m42 * m24) + m14 * (m22 * m43 - m42 * m23)),
        -(m12 * (m23 * m34 - m33 * m24) - m13 * (m22 * m34 - m32 * m24) + m14 * (m22 * m33 - m32 * m23)),

        -(m21 * (m33 * m44 - m43 * m34) - m31 * (m23 * m44 - m24 * m43) + m41 * (m23 * m34 - m24 * m33)),
        +(m11 * (m33 * m44 - m43 * m34) - m13 * (m31 * m44 - m41 * m34) + m14 * (m31 * m43 - m41 * m33)),
        -(m11 * (m23 * m44 - m43 * m24) - m13 * (m21 * m44 - m41 * m24) + m14 * (m21 * m43 - m41 * m23)),
        +(m11 * (m23 * m34 - m33 * m24) - m13 * (m21 * m34 - m31 * m24) + m14 * (m21 * m33 - m31 * m23)),

        +(m21 * (m32 * m44 - m42 * m34) - m31 * (m22 * m44 - m42 * m24) + m41 * (m22 * m34 - m32 * m24)),
        -(m11 * (m32 * m44 - m42 * m34) - m31 * (m12 * m44 - m42 * m14) + m41 * (m12 * m34 - m32 * m14)),
        +(m11 * (m22 * m44 - m42 * m24) - m12 * (m21 * m44 - m41 * m24) + m14 * (m21 * m42 - m41 * m22)),
        -(m11 * (m22 * m34 - m32 * m24) - m21 * (m12 * m34 - m32 * m14) + m31 * (m12 * m24 - m22 * m14)),

        -(m21 * (m32 * m43 - m42 * m33) - m31 * (m22 * m43 - m42 * m23) + m41 * (m22 * m33 - m32 * m23)),
        +(m11 * (m32 * m43 - m42 * m33) - m12 * (m31 * m43 - m41 * m33) + m13 * (m31 * m42 - m41 * m32)),
        -(m11 * (m22 * m43 - m42 * m23) - m12 * (m21 * m43 - m41 * m23) + m13 * (m21 * m42 - m41 * m22)),
        +(m11 * (m22 * m33 - m32 * m23) - m12 * (m21 * m33 - m31 * m23) + m13 * (m21 * m32 - m31 * m22)),
    ))


def inverse(m: Matrix4) -> Matrix4:
    """Return the inverse of ``m``; a singular matrix raises ValueError."""
    det = determinant(m)
    if det == 0.0:
        raise ValueError("matrix is singular and has no inverse")
    return adjoint(m) * (1.0 / det)


def get_translation(m: Matrix4) -> Vector3:
    return Vector3(m[3, 0], m[3, 1], m[3, 2])


def get_right(m: Matrix4) -> Vector3:
    return Vector3(m[0, 0], m[0, 1], m[0, 2])


def get_up(m: Matrix4) -> Vector3:
    return Vector3(m[1, 0], m[1, 1], m[1, 2])


def get_look(m: Matrix4) -> Vector3:
    return Vector3(m[2, 0], m[2, 1], m[2, 2])


def get_scale(m: Matrix4) -> Vector3:
    return Vector3(m[0, 0], m[1, 1], m[2, 2])