"""Keyboard and mouse state, with functions bound to key and button presses."""

from __future__ import annotations

import enum
from collections import defaultdict
from collections.abc import Callable

# Symbol values match pyglet's key and mouse constants.
KEY_W = ord("w")
KEY_A = ord("a")
KEY_S = ord("s")
KEY_D = ord("d")
MOUSE_LEFT = 1
MOUSE_MIDDLE = 2
MOUSE_RIGHT = 4


class CursorMode(enum.Enum):
    """How the mouse cursor behaves over the window."""

    NORMAL = "normal"
    HIDDEN = "hidden"
    DISABLED = "disabled"


class InputState:
    """Current input state plus callbacks bound to presses."""

    def __init__(self, cursor_listener: Callable[[CursorMode], None] | None = None):
        self.key_bindings: defaultdict[int, list[Callable[[], None]]] = defaultdict(list)
        self.button_bindings: defaultdict[int, list[Callable[[], None]]] = defaultdict(list)
        self.mouse_pos: tuple[float, float] = (0.0, 0.0)
        self.cursor_mode = CursorMode.NORMAL
        self._keys: set[int] = set()
        self._buttons: set[int] = set()
        self._cursor_listener = cursor_listener

    def bind_key(self, key: int, function: Callable[[], None]) -> None:
        """Call ``function`` whenever ``key`` is pressed; bindings run in order."""
        self.key_bindings[key].append(function)

    def bind_button(self, button: int, function: Callable[[], None]) -> None:
        """Call ``function`` whenever mouse ``button`` is pressed."""
        self.button_bindings[button].append(function)

    def on_key_press(self, key: int) -> None:
        self._keys.add(key)
        for function in list(self.key_bindings.get(key, ())):
            function()

    def on_key_release(self, key: int) -> None:
        self._keys.discard(key)

    def on_mouse_press(self, button: int) -> None:
        self._buttons.add(button)
        for function in list(self.button_bindings.get(button, ())):
            function()

    def on_mouse_release(self, button: int) -> None:
        self._buttons.discard(button)

    def on_mouse_motion(self, x: float, y: float) -> None:
        self.mouse_pos = (float(x), float(y))

    def is_key_down(self, key: int) -> bool:
        return key in self._keys

    def is_button_down(self, button: int) -> bool:
        return button in self._buttons

    def set_cursor_mode(self, mode: CursorMode) -> None:
        """Change the cursor mode, telling the listener when it changes."""
        mode = CursorMode(mode)
        if mode is self.cursor_mode:
            return
        self.cursor_mode = mode
        if self._cursor_listener is not None:
            self._cursor_listener(mode)