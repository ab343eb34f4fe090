"""Application object that owns named states and drives the frame loop."""

from __future__ import annotations

import functools
import logging
from collections import deque
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from .input import InputSystem, KeyCode
from .timeutil import Clock

if TYPE_CHECKING:
    from .matrix import Matrix4
    from .mesh import Mesh

__all__ = ["AppConfig", "AppState", "Frontend", "App", "main_app"]

_log = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppConfig:
    """Window settings handed to the frontend when the app starts."""

    app_name: str = "AppName"
    win_width: int = 1280
    win_height: int = 720


class AppState:
    """One screen of an application; subclasses override the hooks they need.

    ``app`` is set by :meth:`App.add_state` once the state is registered.
    The default hooks keep simple bookkeeping: whether the state is
    current, the time it has been updated for and the frames it drew.
    """

    app: App | None = None
    initialized: bool = False
    elapsed: float = 0.0
    frames_rendered: int = 0

    def initialize(self) -> None:
        """Called when the state becomes current; resets the bookkeeping."""
        self.initialized = True
        self.elapsed = 0.0
        self.frames_rendered = 0

    def terminate(self) -> None:
        """Called when the state stops being current."""
        self.initialized = False

    def update(self, delta_time: float) -> None:
        """Advance the state by ``delta_time`` seconds."""
        self.elapsed += delta_time

    def render(self) -> None:
        """Draw the state through the app's frontend."""
        self.frames_rendered += 1

    def debug_ui(self) -> dict[str, Any]:
        """Return the values a debugging overlay shows for this state."""
        return {
            "state": type(self).__name__,
            "initialized": self.initialized,
            "elapsed": self.elapsed,
            "frames_rendered": self.frames_rendered,
        }

    @property
    def input(self) -> InputSystem:
        """The input system of the running app."""
        if self.app is None or self.app.input is None:
            raise RuntimeError("state is not attached to a running app")
        return self.app.input

    @property
    def frontend(self) -> Frontend:
        """The frontend of the running app."""
        if self.app is None or self.app.frontend is None:
            raise RuntimeError("state is not attached to a running app")
        return self.app.frontend


class Frontend:
    """Window, input and rendering hooks that the app loop drives.

    The base class is headless: events queued with :meth:`post` are
    delivered to ``input`` on the next :meth:`process_messages`, draw calls
    are collected per frame, and it stays active until ``active`` is
    cleared. Subclasses connect it to a real window or script it for tests.
    """

    def __init__(self, input_system: InputSystem | None = None, clock: Clock | None = None) -> None:
        self.input = input_system if input_system is not None else InputSystem()
        self._clock = clock if clock is not None else Clock()
        self.active = True
        self.config: AppConfig | None = None
        self.back_buffer_size: tuple[float, float] | None = None
        self._pending: deque[Callable[[InputSystem], Any]] = deque()
        self._frame_draws: list[tuple[Mesh[Any], Matrix4 | None]] = []
        self.last_frame: tuple[tuple[Mesh[Any], Matrix4 | None], ...] = ()
        self.frames_presented = 0

    def open(self, config: AppConfig) -> None:
        """Create the window described by ``config``."""
        self.config = config
        self.back_buffer_size = (float(config.win_width), float(config.win_height))
        self.active = True

    def close(self) -> None:
        """Destroy the window."""
        self.active = False

    def post(self, event: Callable[[InputSystem], Any]) -> None:
        """Queue an event; it is applied to ``input`` on the next message pass."""
        self._pending.append(event)

    def process_messages(self) -> None:
        """Deliver pending window events to ``input``."""
        while self._pending:
            self._pending.popleft()(self.input)

    def is_active(self) -> bool:
        return self.active

    def delta_time(self) -> float:
        """Seconds since the previous frame."""
        return self._clock.delta_time()

    def begin_render(self) -> None:
        """Start a frame."""
        self._frame_draws = []

    def end_render(self) -> None:
        """Present a frame."""
        self.last_frame = tuple(self._frame_draws)
        self.frames_presented += 1

    def draw(self, mesh: Mesh[Any], transform: Matrix4 | None = None) -> None:
        """Draw ``mesh`` with an optional world-view-projection transform."""
        self._frame_draws.append((mesh, transform))


class App:
    """Holds named states, switches between them and runs the main loop.

    With ``max_delta`` set, frames whose delta time reaches it skip the
    state update, which keeps a paused debugger from causing huge steps.
    """

    def __init__(self, config: AppConfig | None = None, max_delta: float | None = None) -> None:
        self.config = config if config is not None else AppConfig()
        self.max_delta = max_delta
        self._states: dict[str, AppState] = {}
        self._current: AppState | None = None
        self._next: AppState | None = None
        self._running = False
        self.frontend: Frontend | None = None
        self.input: InputSystem | None = None

    @property
    def current_state(self) -> AppState | None:
        return self._current

    @property
    def running(self) -> bool:
        return self._running

    def state(self, name: str) -> AppState:
        """Return the registered state called ``name``."""
        return self._states[name]

    def add_state(self, name: str, state_type: type[AppState]) -> AppState:
        """Register a new instance of ``state_type`` under ``name``.

        A name already in use is left as it is. The first state added
        becomes the current one.
        """
        if not (isinstance(state_type, type) and issubclass(state_type, AppState)):
            raise TypeError("App: add_state needs a subclass of AppState")
        existing = self._states.get(name)
        if existing is not None:
            return existing
        state = state_type()
        state.app = self
        self._states[name] = state
        if self._current is None:
            _log.debug("App: Current state %s", name)
            self._current = state
        return state

    def change_state(self, name: str) -> None:
        """Switch to ``name`` at the start of the next frame; unknown names are ignored."""
        state = self._states.get(name)
        if state is not None:
            self._next = state

    def quit(self) -> None:
        self._running = False

    def run(self, config: AppConfig | None = None, frontend: Frontend | None = None) -> None:
        """Open the frontend and run frames until the app quits."""
        if self._current is None:
            raise RuntimeError("App: Need an app state to run")
        config = config if config is not None else self.config
        frontend = frontend if frontend is not None else Frontend()

        _log.debug("App Started")
        frontend.open(config)
        self.frontend = frontend
        self.input = frontend.input
        try:
            self._loop(frontend)
        finally:
            frontend.close()
            self.frontend = None
            self.input = None

    def _loop(self, frontend: Frontend) -> None:
        input_system = frontend.input
        self._current.initialize()
        self._running = True
        while self._running:
            frontend.process_messages()
            input_system.update()

            if not frontend.is_active() or input_system.is_key_pressed(KeyCode.ESCAPE):
                self.quit()
                continue

            if self._next is not None:
                self._current.terminate()
                self._current, self._next = self._next, None
                self._current.initialize()

            delta_time = frontend.delta_time()
            if self.max_delta is None or delta_time < self.max_delta:
                self._current.update(delta_time)

            frontend.begin_render()
            self._current.render()
            frontend.end_render()

        _log.debug("App Quit")
        self._current.terminate()


@functools.lru_cache(maxsize=None)
def main_app() -> App:
    """Return the process-wide application object."""
    return App()