import random

import pytest

from engine3d import colors
from engine3d.mesh import (
    Mesh,
    Vertex,
    VertexElement,
    VertexP,
    VertexPC,
    VertexPX,
    create_cube_pc,
    vertex_layout,
)
from engine3d.vectors import cross, dot

PALETTE = [
    colors.LIGHT_PINK,
    colors.LIGHT_GREEN,
    colors.LIGHT_BLUE,
    colors.YELLOW,
    colors.CYAN,
    colors.MAGENTA,
    colors.WHITE,
]


class _FixedRng:
    def __init__(self, value):
        self.value = value
        self.calls = []

    def randrange(self, stop):
        self.calls.append(stop)
        return self.value


def test_layout_for_position_color():
    assert [e.semantic for e in vertex_layout(VertexPC.FORMAT)] == ["POSITION", "COLOR"]


def test_layout_for_full_vertex_keeps_order():
    semantics = [e.semantic for e in vertex_layout(Vertex.FORMAT)]
    assert semantics == ["POSITION", "NORMAL", "TANGENT", "TEXCOORD"]


def test_layout_component_counts():
    layout = vertex_layout(VertexPX.FORMAT)
    assert [(e.semantic, e.components) for e in layout] == [("POSITION", 3), ("TEXCOORD", 2)]


def test_layout_empty_format():
    assert vertex_layout(VertexElement.NONE) == []


def test_position_only_format():
    assert vertex_layout(VertexP.FORMAT)[0].semantic == "POSITION"
    assert len(vertex_layout(VertexP.FORMAT)) == 1


def test_cube_with_colour_has_uniform_colour():
    mesh = create_cube_pc(1.0, colors.RED)
    assert len(mesh.vertices) == 8
    assert all(v.color == colors.RED for v in mesh.vertices)
    assert mesh.vertex_type is VertexPC
    assert mesh.vertex_format == VertexPC.FORMAT


def test_cube_corners_at_half_extent_and_distinct():
    mesh = create_cube_pc(1.0, colors.RED)
    positions = [tuple(v.position) for v in mesh.vertices]
    assert len(set(positions)) == 8
    assert all(abs(c) == 0.5 for p in positions for c in p)


def test_cube_indices():
    mesh = create_cube_pc(1.0, colors.RED)
    assert len(mesh.indices) == 36
    assert mesh.indices[:6] == [0, 1, 2, 0, 2, 3]
    assert all(0 <= i < len(mesh.vertices) for i in mesh.indices)


def test_cube_triangles_face_outward():
    mesh = create_cube_pc(1.0, colors.BLUE)
    pts = [v.position for v in mesh.vertices]
    for i in range(0, len(mesh.indices), 3):
        a, b, c = (pts[j] for j in mesh.indices[i:i + 3])
        normal = cross(b - a, c - a)
        centroid = (a + b + c) / 3.0
        assert dot(normal, centroid) > 0.0


def test_cube_debug_colours_cycle_through_palette():
    mesh = create_cube_pc(1.0, rng=random.Random(7))
    indices = [PALETTE.index(v.color) for v in mesh.vertices]
    for prev, cur in zip(indices, indices[1:]):
        assert cur == (prev + 1) % len(PALETTE)


def test_cube_same_seed_same_colours():
    first = create_cube_pc(1.0, rng=random.Random(3))
    second = create_cube_pc(1.0, rng=random.Random(3))
    assert first.vertices == second.vertices


def test_mesh_defaults_are_independent():
    a = Mesh(VertexP)
    b = Mesh(VertexP)
    a.vertices.append(VertexP())
    assert b.vertices == []
    assert a.indices == []


def test_vertex_is_immutable():
    vertex = create_cube_pc(1.0, colors.BLUE).vertices[0]
    with pytest.raises(AttributeError):
        vertex.color = colors.RED
    assert vertex.color == colors.BLUE