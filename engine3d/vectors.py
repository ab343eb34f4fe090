"""Small immutable vector types and the free functions that work on them."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar, Iterator, TypeVar

__all__ = [
    "Vector2",
    "Vector3",
    "Vector4",
    "clamp",
    "lerp",
    "sqr",
    "dot",
    "magnitude_sqr",
    "magnitude",
    "distance_sqr",
    "distance",
    "normalize",
    "cross",
]


@dataclass(frozen=True, slots=True)
class Vector2:
    """A two-component vector."""

    x: float = 0.0
    y: float = 0.0

    ZERO: ClassVar[Vector2]
    ONE: ClassVar[Vector2]
    X_AXIS: ClassVar[Vector2]
    Y_AXIS: ClassVar[Vector2]

    @classmethod
    def filled(cls, value: float) -> Vector2:
        """Return a vector with every component set to ``value``."""
        return cls(value, value)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, s: float) -> Vector2:
        return Vector2(self.x * s, self.y * s)

    __rmul__ = __mul__

    def __truediv__(self, s: float) -> Vector2:
        return Vector2(self.x / s, self.y / s)


Vector2.ZERO = Vector2()
Vector2.ONE = Vector2(1.0, 1.0)
Vector2.X_AXIS = Vector2(1.0, 0.0)
Vector2.Y_AXIS = Vector2(0.0, 1.0)


@dataclass(frozen=True, slots=True)
class Vector3:
    """A three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    ZERO: ClassVar[Vector3]
    ONE: ClassVar[Vector3]
    X_AXIS: ClassVar[Vector3]
    Y_AXIS: ClassVar[Vector3]
    Z_AXIS: ClassVar[Vector3]

    @classmethod
    def filled(cls, value: float) -> Vector3:
        """Return a vector with every component set to ``value``."""
        return cls(value, value, value)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def __add__(self, other: Vector3) -> Vector3:
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, s: float) -> Vector3:
        return Vector3(self.x * s, self.y * s, self.z * s)

    __rmul__ = __mul__

    def __truediv__(self, s: float) -> Vector3:
        return Vector3(self.x / s, self.y / s, self.z / s)


Vector3.ZERO = Vector3()
Vector3.ONE = Vector3(1.0, 1.0, 1.0)
Vector3.X_AXIS = Vector3(1.0, 0.0, 0.0)
Vector3.Y_AXIS = Vector3(0.0, 1.0, 0.0)
Vector3.Z_AXIS = Vector3(0.0, 0.0, 1.0)


@dataclass(frozen=True, slots=True)
class Vector4:
    """A four-component vector, also readable as an RGBA colour."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    @classmethod
    def filled(cls, value: float) -> Vector4:
        """Return a vector with every component set to ``value``."""
        return cls(value, value, value, value)

    @property
    def r(self) -> float:
        return self.x

    @property
    def g(self) -> float:
        return self.y

    @property
    def b(self) -> float:
        return self.z

    @property
    def a(self) -> float:
        return self.w

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def __neg__(self) -> Vector4:
        return Vector4(-self.x, -self.y, -self.z, -self.w)

    def __add__(self, other: Vector4) -> Vector4:
        return Vector4(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def __sub__(self, other: Vector4) -> Vector4:
        return Vector4(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def __mul__(self, s: float) -> Vector4:
        return Vector4(self.x * s, self.y * s, self.z * s, self.w * s)

    __rmul__ = __mul__

    def __truediv__(self, s: float) -> Vector4:
        return Vector4(self.x / s, self.y / s, self.z / s, self.w / s)


T = TypeVar("T")


def clamp(value, low, high):
    """Limit ``value`` to the range [low, high]."""
    return max(low, min(high, value))


def lerp(a: T, b: T, t: float) -> T:
    """Linear interpolation from ``a`` to ``b`` by ``t``."""
    return a + (b - a) * t


def sqr(value):
    """Return ``value`` squared."""
    return value * value


def dot(a: Vector3, b: Vector3) -> float:
    return a.x * b.x + a.y * b.y + a.z * b.z


def magnitude_sqr(a: Vector3) -> float:
    return a.x * a.x + a.y * a.y + a.z * a.z


def magnitude(a: Vector3) -> float:
    return math.sqrt(magnitude_sqr(a))


def distance_sqr(a: Vector3, b: Vector3) -> float:
    return abs(magnitude_sqr(a - b))


def distance(a: Vector3, b: Vector3) -> float:
    return math.sqrt(distance_sqr(a, b))


def normalize(a: Vector3) -> Vector3:
    """Return ``a`` scaled to unit length; a zero vector raises ZeroDivisionError."""
    return a / magnitude(a)


def cross(a: Vector3, b: Vector3) -> Vector3:
    return Vector3(
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - a.y * b.x,
    )