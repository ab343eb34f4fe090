"""Sample applications: switching states, coloured 2D shapes and a fly-through cube."""

from __future__ import annotations

import logging

from . import colors
from .app import App, AppConfig, AppState
from .camera import Camera
from .input import KeyCode, MouseButton
from .matrix import Matrix4, transpose
from .mesh import Mesh, VertexPC, create_cube_pc
from .vectors import Vector3

__all__ = [
    "MainState",
    "GameState",
    "ShapeState",
    "TriangleShapeState",
    "TreeShapeState",
    "DiamondShapeState",
    "CubeState",
    "hello_window_app",
    "hello_shapes_app",
    "hello_cube_app",
]

_log = logging.getLogger(__name__)

_MIN_STEP = 0.01
_LIFETIME = 2.0


class _TimedState(AppState):
    """Switches to ``NEXT_STATE`` after two seconds."""

    NEXT_STATE = ""

    def __init__(self) -> None:
        self.life_time = 0.0

    def initialize(self) -> None:
        _log.debug("%s: Initialize", type(self).__name__)
        self.life_time = _LIFETIME

    def terminate(self) -> None:
        _log.debug("%s: Terminate", type(self).__name__)

    def update(self, delta_time: float) -> None:
        self.life_time -= max(delta_time, _MIN_STEP)
        if self.life_time <= 0.0:
            self.app.change_state(self.NEXT_STATE)


class MainState(_TimedState):
    NEXT_STATE = "GameState"


class GameState(_TimedState):
    NEXT_STATE = "MainState"


def _v(x: float, y: float, color: colors.Color) -> VertexPC:
    return VertexPC(Vector3(x, y, 0.0), color)


class ShapeState(AppState):
    """Draws a triangle list; the arrow keys switch between the shapes."""

    # Checked in order each frame; the last pressed key wins.
    NAVIGATION: tuple[tuple[KeyCode, str], ...] = (
        (KeyCode.UP, "TriangleShapeState"),
        (KeyCode.DOWN, "ShapeState"),
        (KeyCode.LEFT, "TreeShapeState"),
        (KeyCode.RIGHT, "DiamondShapeState"),
    )

    def __init__(self) -> None:
        self.mesh: Mesh[VertexPC] = Mesh(VertexPC)

    def create_shape(self) -> Mesh[VertexPC]:
        """Return the mesh this state draws."""
        red, blue, green = colors.RED, colors.BLUE, colors.GREEN
        return Mesh(VertexPC, [
            _v(-0.5, 0.0, red), _v(0.0, 0.75, blue), _v(0.5, 0.0, green),
            _v(-0.5, 0.0, red), _v(0.5, 0.0, blue), _v(0.0, -0.75, green),
        ])

    def initialize(self) -> None:
        self.mesh = self.create_shape()

    def terminate(self) -> None:
        self.mesh = Mesh(VertexPC)

    def update(self, delta_time: float) -> None:
        input_system = self.input
        for key, state_name in self.NAVIGATION:
            if input_system.is_key_pressed(key):
                self.app.change_state(state_name)

    def render(self) -> None:
        self.frontend.draw(self.mesh)


class TriangleShapeState(ShapeState):
    NAVIGATION = (
        (KeyCode.DOWN, "ShapeState"),
        (KeyCode.UP, "TriangleShapeState"),
        (KeyCode.LEFT, "TreeShapeState"),
        (KeyCode.RIGHT, "DiamondShapeState"),
    )

    def create_shape(self) -> Mesh[VertexPC]:
        red, blue, green = colors.RED, colors.BLUE, colors.GREEN
        return Mesh(VertexPC, [
            _v(-0.75, -0.75, red), _v(-0.5, 0.0, blue), _v(-0.25, -0.75, green),
            _v(-0.5, 0.0, red), _v(0.0, 0.75, blue), _v(0.5, 0.0, green),
            _v(0.25, -0.75, red), _v(0.5, 0.0, blue), _v(0.75, -0.75, green),
        ])


class TreeShapeState(ShapeState):
    NAVIGATION = (
        (KeyCode.LEFT, "TreeShapeState"),
        (KeyCode.DOWN, "ShapeState"),
        (KeyCode.UP, "TriangleShapeState"),
        (KeyCode.RIGHT, "DiamondShapeState"),
    )

    def create_shape(self) -> Mesh[VertexPC]:
        red, blue, green = colors.RED, colors.BLUE, colors.GREEN
        return Mesh(VertexPC, [
            _v(-0.5, -0.75, red), _v(0.0, -0.25, blue), _v(0.5, -0.75, green),
            _v(-0.4, -0.5, red), _v(0.0, 0.0, blue), _v(0.4, -0.5, green),
            _v(-0.3, -0.25, red), _v(0.0, 0.25, blue), _v(0.3, -0.25, green),
        ])


class DiamondShapeState(ShapeState):
    NAVIGATION = (
        (KeyCode.LEFT, "TreeShapeState"),
        (KeyCode.DOWN, "ShapeState"),
        (KeyCode.UP, "TriangleShapeState"),
        (KeyCode.RIGHT, "DiamondShapeState"),
    )

    def create_shape(self) -> Mesh[VertexPC]:
        red, blue, green = colors.RED, colors.BLUE, colors.GREEN
        return Mesh(VertexPC, [
            _v(-0.5, 0.0, red), _v(0.5, 0.0, blue), _v(0.0, -0.8, green),
            _v(-0.5, 0.0, red), _v(-0.35, 0.4, blue), _v(0.0, 0.0, green),
            _v(0.0, 0.0, green), _v(0.35, 0.4, blue), _v(0.5, 0.0, red),
            _v(-0.35, 0.4, blue), _v(0.35, 0.4, green), _v(0.0, 0.0, red),
        ])


class CubeState(AppState):
    """A coloured cube viewed through a camera flown with WASDQE and the right mouse button."""

    MOVE_SPEED = 1.0
    FAST_MOVE_SPEED = 10.0
    TURN_SPEED = 0.1

    def __init__(self) -> None:
        self.camera = Camera()
        self.mesh: Mesh[VertexPC] = Mesh(VertexPC)

    def create_shape(self) -> Mesh[VertexPC]:
        return create_cube_pc(1.0)

    def _back_buffer_size(self) -> tuple[float, float]:
        if self.app is not None and self.app.frontend is not None:
            size = self.app.frontend.back_buffer_size
            if size is not None:
                return size
        config = AppConfig()
        return float(config.win_width), float(config.win_height)

    def initialize(self) -> None:
        self.camera.back_buffer_size = self._back_buffer_size()
        self.camera.position = Vector3(0.0, 1.0, -3.0)
        self.camera.look_at(Vector3(0.0, 0.0, 0.0))
        self.mesh = self.create_shape()

    def terminate(self) -> None:
        self.mesh = Mesh(VertexPC)

    def update(self, delta_time: float) -> None:
        input_system = self.input
        camera = self.camera
        speed = self.FAST_MOVE_SPEED if input_system.is_key_down(KeyCode.LSHIFT) else self.MOVE_SPEED
        step = speed * delta_time

        if input_system.is_key_down(KeyCode.W):
            camera.walk(step)
        if input_system.is_key_down(KeyCode.S):
            camera.walk(-step)
        if input_system.is_key_down(KeyCode.A):
            camera.strafe(-step)
        if input_system.is_key_down(KeyCode.D):
            camera.strafe(step)
        if input_system.is_key_down(KeyCode.Q):
            camera.rise(-step)
        if input_system.is_key_down(KeyCode.E):
            camera.rise(step)

        if input_system.is_mouse_down(MouseButton.RBUTTON):
            camera.yaw(input_system.mouse_move_x * self.TURN_SPEED * delta_time)
            camera.pitch(input_system.mouse_move_y * self.TURN_SPEED * delta_time)

    def world_view_projection(self) -> Matrix4:
        """The transposed world-view-projection matrix sent to the shader."""
        world = Matrix4.IDENTITY
        final = world @ self.camera.view_matrix() @ self.camera.projection_matrix()
        return transpose(final)

    def render(self) -> None:
        self.frontend.draw(self.mesh, self.world_view_projection())


def hello_window_app() -> App:
    """Two states that hand over to each other every two seconds."""
    app = App(AppConfig())
    app.add_state("MainState", MainState)
    app.add_state("GameState", GameState)
    return app


def hello_shapes_app() -> App:
    """Four 2D shapes selected with the arrow keys."""
    app = App(AppConfig(app_name="Hello Shapes"))
    app.add_state("ShapeState", ShapeState)
    app.add_state("TriangleShapeState", TriangleShapeState)
    app.add_state("TreeShapeState", TreeShapeState)
    app.add_state("DiamondShapeState", DiamondShapeState)
    return app


def hello_cube_app() -> App:
    """A cube to fly around."""
    app = App(AppConfig(app_name="Hello Cube"))
    app.add_state("ShapeState", CubeState)
    return app