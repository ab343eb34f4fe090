"""A free-flying camera producing view and projection matrices."""

from __future__ import annotations

import math
from enum import Enum

from .constants import DEG_TO_RAD
from .matrix import Matrix4, transform_normal
from .vectors import Vector3, clamp, cross, dot, magnitude, normalize

__all__ = ["ProjectionMode", "Camera"]

_MIN_FOV = 10.0 * DEG_TO_RAD
_MAX_FOV = 170.0 * DEG_TO_RAD
_MAX_VERTICAL_DOT = 0.995


class ProjectionMode(Enum):
    PERSPECTIVE = "perspective"
    ORTHOGRAPHIC = "orthographic"


class Camera:
    """Position, look direction and projection parameters of a viewer.

    An aspect ratio or orthographic size of zero means "use the back buffer";
    set ``back_buffer_size`` to (width, height) for that to work.
    """

    def __init__(self) -> None:
        self.mode = ProjectionMode.PERSPECTIVE
        self.position = Vector3.ZERO
        self._direction = Vector3.Z_AXIS
        self._fov = 60.0 * DEG_TO_RAD
        self.aspect_ratio = 0.0
        self.width = 0.0
        self.height = 0.0
        self.near_plane = 0.01
        self.far_plane = 1000.0
        self.back_buffer_size: tuple[float, float] | None = None

    @property
    def direction(self) -> Vector3:
        return self._direction

    @property
    def fov(self) -> float:
        return self._fov

    @fov.setter
    def fov(self, value: float) -> None:
        self.set_fov(value)

    @property
    def size(self) -> float:
        """Orthographic width."""
        return self.width

    def set_direction(self, direction: Vector3) -> None:
        """Look along ``direction``; near-vertical or zero directions are ignored."""
        length = magnitude(direction)
        if length == 0.0:
            return
        d = direction / length
        if abs(dot(d, Vector3.Y_AXIS)) < _MAX_VERTICAL_DOT:
            self._direction = d

    def look_at(self, target: Vector3) -> None:
        self.set_direction(target - self.position)

    def set_fov(self, fov: float) -> None:
        self._fov = clamp(fov, _MIN_FOV, _MAX_FOV)

    def set_size(self, width: float, height: float) -> None:
        self.width = width
        self.height = height

    def _right(self) -> Vector3:
        return normalize(cross(Vector3.Y_AXIS, self._direction))

    def walk(self, distance: float) -> None:
        self.position = self.position + self._direction * distance

    def strafe(self, distance: float) -> None:
        self.position = self.position + self._right() * distance

    def rise(self, distance: float) -> None:
        self.position = self.position + Vector3.Y_AXIS * distance

    def yaw(self, radians: float) -> None:
        self.set_direction(transform_normal(self._direction, Matrix4.rotation_y(radians)))

    def pitch(self, radians: float) -> None:
        rotation = Matrix4.rotation_axis(self._right(), radians)
        self.set_direction(transform_normal(self._direction, rotation))

    def zoom(self, amount: float) -> None:
        self.set_fov(self._fov + amount)

    def view_matrix(self) -> Matrix4:
        look = self._direction
        right = self._right()
        up = normalize(cross(look, right))
        a = -dot(right, self.position)
        b = -dot(up, self.position)
        c = -dot(look, self.position)
        return Matrix4((
            right.x, up.x, look.x, 0.0,
            right.y, up.y, look.y, 0.0,
            right.z, up.z, look.z, 0.0,
            a, b, c, 1.0,
        ))

    def projection_matrix(self) -> Matrix4:
        if self.mode is ProjectionMode.PERSPECTIVE:
            return self.perspective_matrix()
        return self.orthographic_matrix()

    def _back_buffer(self) -> tuple[float, float]:
        if self.back_buffer_size is None:
            raise RuntimeError("camera needs a back buffer size or explicit projection parameters")
        return self.back_buffer_size

    def perspective_matrix(self) -> Matrix4:
        if self.aspect_ratio == 0.0:
            width, height = self._back_buffer()
            aspect = float(width) / float(height)
        else:
            aspect = self.aspect_ratio
        d = 1.0 / math.tan(self._fov * 0.5)
        w = d / aspect
        zf = self.far_plane
        zn = self.near_plane
        q = zf / (zf - zn)
        return Matrix4((
            w, 0.0, 0.0, 0.0,
            0.0, d, 0.0, 0.0,
            0.0, 0.0, q, 1.0,
            0.0, 0.0, -zn * q, 0.0,
        ))

    def orthographic_matrix(self) -> Matrix4:
        w = self._back_buffer()[0] if self.width == 0.0 else self.width
        h = self._back_buffer()[1] if self.height == 0.0 else self.height
        f = self.far_plane
        n = self.near_plane
        return Matrix4((
            2.0 / w, 0.0, 0.0, 0.0,
            0.0, 2.0 / h, 0.0, 0.0,
            0.0, 0.0, 1.0 / (f - n), 0.0,
            0.0, 0.0, n / (n - f), 1.0,
        ))