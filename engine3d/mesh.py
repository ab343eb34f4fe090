"""Vertex formats, meshes and the builders that create them."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import IntFlag
from itertools import repeat
from typing import ClassVar, Generic, Iterator, NamedTuple, Protocol, TypeVar

from . import colors
from .colors import Color
from .vectors import Vector2, Vector3

__all__ = [
    "VertexElement",
    "LayoutElement",
    "VertexP",
    "VertexPC",
    "VertexPX",
    "Vertex",
    "Mesh",
    "vertex_layout",
    "create_cube_pc",
]


class VertexElement(IntFlag):
    """Flags naming the elements a vertex format carries."""

    NONE = 0
    POSITION = 1 << 0
    NORMAL = 1 << 1
    TANGENT = 1 << 2
    COLOR = 1 << 3
    TEXCOORD = 1 << 4


class LayoutElement(NamedTuple):
    """One entry of an input layout: its semantic and float component count."""

    semantic: str
    components: int


_LAYOUT = (
    (VertexElement.POSITION, LayoutElement("POSITION", 3)),
    (VertexElement.NORMAL, LayoutElement("NORMAL", 3)),
    (VertexElement.TANGENT, LayoutElement("TANGENT", 3)),
    (VertexElement.COLOR, LayoutElement("COLOR", 4)),
    (VertexElement.TEXCOORD, LayoutElement("TEXCOORD", 2)),
)


def vertex_layout(fmt: int) -> list[LayoutElement]:
    """Return the input layout elements for a vertex format, in layout order."""
    flags = VertexElement(fmt)
    return [element for flag, element in _LAYOUT if flag & flags]


@dataclass(frozen=True, slots=True)
class VertexP:
    FORMAT: ClassVar[VertexElement] = VertexElement.POSITION
    position: Vector3 = Vector3.ZERO


@dataclass(frozen=True, slots=True)
class VertexPC:
    FORMAT: ClassVar[VertexElement] = VertexElement.POSITION | VertexElement.COLOR
    position: Vector3 = Vector3.ZERO
    color: Color = Color()


@dataclass(frozen=True, slots=True)
class VertexPX:
    FORMAT: ClassVar[VertexElement] = VertexElement.POSITION | VertexElement.TEXCOORD
    position: Vector3 = Vector3.ZERO
    uv_coord: Vector2 = Vector2.ZERO


@dataclass(frozen=True, slots=True)
class Vertex:
    FORMAT: ClassVar[VertexElement] = (
        VertexElement.POSITION
        | VertexElement.NORMAL
        | VertexElement.TANGENT
        | VertexElement.TEXCOORD
    )
    position: Vector3 = Vector3.ZERO
    normal: Vector3 = Vector3.ZERO
    tangent: Vector3 = Vector3.ZERO
    uv_coord: Vector2 = Vector2.ZERO


V = TypeVar("V")


@dataclass
class Mesh(Generic[V]):
    """Vertices of one type plus an optional triangle index list."""

    vertex_type: type[V]
    vertices: list[V] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)

    @property
    def vertex_format(self) -> VertexElement:
        return self.vertex_type.FORMAT


class _RandRange(Protocol):
    def randrange(self, stop: int) -> int: ...


_DEBUG_COLORS = (
    colors.LIGHT_PINK,
    colors.LIGHT_GREEN,
    colors.LIGHT_BLUE,
    colors.YELLOW,
    colors.CYAN,
    colors.MAGENTA,
    colors.WHITE,
)

_CUBE_CORNERS = (
    # front face
    (-1, -1, -1), (-1, 1, -1), (1, 1, -1), (1, -1, -1),
    # back face
    (-1, -1, 1), (-1, 1, 1), (1, 1, 1), (1, -1, 1),
)

_CUBE_INDICES = (
    0, 1, 2, 0, 2, 3,  # front
    7, 5, 4, 7, 6, 5,  # back
    3, 2, 6, 3, 6, 7,  # right
    4, 5, 1, 4, 1, 0,  # left
    1, 5, 6, 1, 6, 2,  # top
    0, 3, 7, 0, 7, 4,  # bottom
)


def _debug_colors(start: int) -> Iterator[Color]:
    index = start
    while True:
        index = (index + 1) % len(_DEBUG_COLORS)
        yield _DEBUG_COLORS[index]


def create_cube_pc(
    size: float,
    color: Color | None = None,
    rng: _RandRange | None = None,
) -> Mesh[VertexPC]:
    """Build an indexed cube with half-extent 0.5 around the origin.

    With ``color`` every corner gets that colour; otherwise corners cycle
    through a debug palette from a random starting point drawn from ``rng``.
    ``size`` is accepted for interface compatibility; the cube is unit-sized.
    """
    hs = 0.5
    if color is not None:
        palette: Iterator[Color] = repeat(color)
    else:
        source = rng if rng is not None else random
        palette = _debug_colors(source.randrange(100))

    vertices = [
        VertexPC(Vector3(sx * hs, sy * hs, sz * hs), shade)
        for (sx, sy, sz), shade in zip(_CUBE_CORNERS, palette)
    ]
    return Mesh(VertexPC, vertices, list(_CUBE_INDICES))