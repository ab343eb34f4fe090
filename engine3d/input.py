"""Keyboard and mouse state tracking fed by window events."""

from __future__ import annotations

from enum import IntEnum

__all__ = ["KeyCode", "MouseButton", "InputSystem", "WHEEL_DELTA"]

WHEEL_DELTA = 120
_KEY_SLOTS = 512
_EVENT_KEY_LIMIT = 256


class KeyCode(IntEnum):
    """Virtual key codes; keys sharing a code are aliases of each other."""

    # Keyboard row 1
    ESCAPE = 0x1B
    F1 = 0x70
    F2 = 0x71
    F3 = 0x72
    F4 = 0x73
    F5 = 0x74
    F6 = 0x75
    F7 = 0x76
    F8 = 0x77
    F9 = 0x78
    F10 = 0x79
    F11 = 0x7A
    F12 = 0x7B

    # Keyboard row 2
    GRAVE = 0xC0
    ONE = ord("1")
    TWO = ord("2")
    THREE = ord("3")
    FOUR = ord("4")
    FIVE = ord("5")
    SIX = ord("6")
    SEVEN = ord("7")
    EIGHT = ord("8")
    NINE = ord("9")
    ZERO = ord("0")
    MINUS = 0xBD
    EQUALS = 0xBB
    BACKSPACE = 0x08

    # Keyboard row 3
    TAB = 0x09
    Q = ord("Q")
    W = ord("W")
    E = ord("E")
    R = ord("R")
    T = ord("T")
    Y = ord("Y")
    U = ord("U")
    I = ord("I")  # noqa: E741
    O = ord("O")  # noqa: E741
    P = ord("P")
    LBRACKET = 0xDB
    RBRACKET = 0xDD
    BACKSLASH = 0xDC

    # Keyboard row 4
    A = ord("A")
    S = ord("S")
    D = ord("D")
    F = ord("F")
    G = ord("G")
    H = ord("H")
    J = ord("J")
    K = ord("K")
    L = ord("L")
    SEMICOLON = 0xBA
    APOSTROPHE = 0xDE
    ENTER = 0x0D

    # Keyboard row 5
    Z = ord("Z")
    X = ord("X")
    C = ord("C")
    V = ord("V")
    B = ord("B")
    N = ord("N")
    M = ord("M")
    COMMA = 0xBC
    PERIOD = 0xBE
    SLASH = 0xBF

    # Lock keys
    CAPSLOCK = 0x14
    NUMLOCK = 0x90
    SCROLLLOCK = 0x91

    # Numpad keys
    NUMPAD1 = 0x61
    NUMPAD2 = 0x62
    NUMPAD3 = 0x63
    NUMPAD4 = 0x64
    NUMPAD5 = 0x65
    NUMPAD6 = 0x66
    NUMPAD7 = 0x67
    NUMPAD8 = 0x68
    NUMPAD9 = 0x69
    NUMPAD0 = 0x60
    NUM_ADD = 0x6B
    NUM_SUB = 0x6D
    NUM_MUL = 0x6A
    NUM_DIV = 0x6F
    NUM_ENTER = 0x0D
    NUM_DECIMAL = 0x6E

    # Navigation keys
    INS = 0x2D
    DEL = 0x2E
    HOME = 0x24
    END = 0x23
    PGUP = 0x21
    PGDN = 0x22

    # Support keys
    LSHIFT = 0x10
    RSHIFT = 0x10
    LCONTROL = 0x11
    RCONTROL = 0x11
    LALT = 0x12
    RALT = 0x12
    LWIN = 0x5B
    RWIN = 0x5C
    SPACE = 0x20

    # Arrow keys
    UP = 0x26
    DOWN = 0x28
    LEFT = 0x25
    RIGHT = 0x27


class MouseButton(IntEnum):
    LBUTTON = 0
    RBUTTON = 1
    MBUTTON = 2


def _key_index(key: int) -> int:
    index = int(key)
    if not 0 <= index < _KEY_SLOTS:
        raise IndexError(f"key code out of range: {index}")
    return index


class InputSystem:
    """Per-frame keyboard and mouse state.

    Window events are delivered through ``key_down``, ``mouse_move`` and the
    other event methods; ``update`` is called once per frame to work out
    which keys were newly pressed and how far the mouse moved.
    """

    def __init__(self) -> None:
        self._curr_keys = [False] * _KEY_SLOTS
        self._prev_keys = [False] * _KEY_SLOTS
        self._pressed_keys = [False] * _KEY_SLOTS

        self.clip_mouse_to_window = False

        self._curr_mouse_x = -1
        self._curr_mouse_y = -1
        self._prev_mouse_x = -1
        self._prev_mouse_y = -1
        self._mouse_move_x = 0
        self._mouse_move_y = 0
        self._mouse_wheel = 0.0

        self._curr_buttons = [False] * len(MouseButton)
        self._prev_buttons = [False] * len(MouseButton)
        self._pressed_buttons = [False] * len(MouseButton)

        self._left_edge = False
        self._right_edge = False
        self._top_edge = False
        self._bottom_edge = False

    # Frame update

    def update(self) -> None:
        """Advance one frame: compute presses and mouse movement."""
        self._pressed_keys = [
            curr and not prev for curr, prev in zip(self._curr_keys, self._prev_keys)
        ]
        self._prev_keys = list(self._curr_keys)

        self._mouse_move_x = self._curr_mouse_x - self._prev_mouse_x
        self._mouse_move_y = self._curr_mouse_y - self._prev_mouse_y
        self._prev_mouse_x = self._curr_mouse_x
        self._prev_mouse_y = self._curr_mouse_y

        self._pressed_buttons = [
            curr and not prev for curr, prev in zip(self._curr_buttons, self._prev_buttons)
        ]
        self._prev_buttons = list(self._curr_buttons)

    # Queries

    def is_key_down(self, key: int) -> bool:
        return self._curr_keys[_key_index(key)]

    def is_key_pressed(self, key: int) -> bool:
        """True only in the frame in which the key went down."""
        return self._pressed_keys[_key_index(key)]

    def is_mouse_down(self, button: MouseButton) -> bool:
        return self._curr_buttons[MouseButton(button)]

    def is_mouse_pressed(self, button: MouseButton) -> bool:
        return self._pressed_buttons[MouseButton(button)]

    @property
    def mouse_move_x(self) -> int:
        return self._mouse_move_x

    @property
    def mouse_move_y(self) -> int:
        return self._mouse_move_y

    @property
    def mouse_move_z(self) -> float:
        """Accumulated wheel movement in notches."""
        return self._mouse_wheel

    @property
    def mouse_screen_x(self) -> int:
        return self._curr_mouse_x

    @property
    def mouse_screen_y(self) -> int:
        return self._curr_mouse_y

    @property
    def mouse_left_edge(self) -> bool:
        return self._left_edge

    @property
    def mouse_right_edge(self) -> bool:
        return self._right_edge

    @property
    def mouse_top_edge(self) -> bool:
        return self._top_edge

    @property
    def mouse_bottom_edge(self) -> bool:
        return self._bottom_edge

    # Window events

    def key_down(self, code: int) -> None:
        code = int(code)
        if 0 <= code < _EVENT_KEY_LIMIT:
            self._curr_keys[code] = True

    def key_up(self, code: int) -> None:
        code = int(code)
        if 0 <= code < _EVENT_KEY_LIMIT:
            self._curr_keys[code] = False

    def mouse_button_down(self, button: MouseButton) -> None:
        self._curr_buttons[MouseButton(button)] = True

    def mouse_button_up(self, button: MouseButton) -> None:
        self._curr_buttons[MouseButton(button)] = False

    def mouse_wheel(self, delta: int) -> None:
        """Add a raw wheel delta, where one notch is WHEEL_DELTA units."""
        self._mouse_wheel += delta / WHEEL_DELTA

    def mouse_move(self, x: int, y: int, width: int, height: int) -> None:
        """Record the cursor at (x, y) inside a client area of width x height."""
        self._curr_mouse_x = x
        self._curr_mouse_y = y
        if self._prev_mouse_x == -1:
            self._prev_mouse_x = x
            self._prev_mouse_y = y

        self._left_edge = x <= 0
        self._right_edge = x + 1 >= width
        self._top_edge = y <= 0
        self._bottom_edge = y + 1 >= height

    def activate(self, active: bool) -> None:
        """Handle the application gaining or losing focus."""
        if not active:
            self._left_edge = False
            self._right_edge = False
            self._top_edge = False
            self._bottom_edge = False