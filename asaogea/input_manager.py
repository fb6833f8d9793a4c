"""Keyboard and mouse state built from window events."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Hashable, Union


class MouseButton(Enum):
    """Standard mouse buttons; other buttons may be given as integers."""

    LEFT = "left"
    RIGHT = "right"
    MIDDLE = "middle"
    BACK = "back"
    FORWARD = "forward"


@dataclass(frozen=True)
class LineDelta:
    """Scroll amount in lines."""

    x: float
    y: float


@dataclass(frozen=True)
class PixelDelta:
    """Scroll amount in pixels."""

    x: float
    y: float


@dataclass(frozen=True)
class KeyboardInput:
    """A key changed state."""

    key: Hashable
    pressed: bool


@dataclass(frozen=True)
class CursorMoved:
    """The cursor moved to ``(x, y)``."""

    x: float
    y: float


@dataclass(frozen=True)
class MouseWheel:
    """The wheel scrolled."""

    delta: Union[LineDelta, PixelDelta]


@dataclass(frozen=True)
class MouseInput:
    """A mouse button changed state."""

    button: Union[MouseButton, int]
    pressed: bool


_PIXELS_PER_LINE = 12.0


class InputManager:
    """Tracks pressed keys and buttons, cursor position and per-frame scroll."""

    def __init__(self) -> None:
        self._position = (0.0, 0.0)
        self._scroll_delta = (0.0, 0.0)
        self._buttons: dict[MouseButton | int, bool] = {}
        self._keys: dict[Hashable, bool] = {}

    def consume_event(self, event: object) -> None:
        """Update the state from an event; events it does not track are ignored."""
        match event:
            case KeyboardInput(key=key, pressed=pressed):
                self._keys[key] = pressed
            case CursorMoved(x=x, y=y):
                self._position = (float(x), float(y))
            case MouseWheel(delta=LineDelta(x=x, y=y)):
                self._scroll_delta = (x * _PIXELS_PER_LINE, y * _PIXELS_PER_LINE)
            case MouseWheel(delta=PixelDelta(x=x, y=y)):
                self._scroll_delta = (float(x), float(y))
            case MouseInput(button=button, pressed=pressed):
                self._buttons[button] = pressed
            case _:
                pass

    def begin_frame(self) -> None:
        """Reset the scroll delta at the start of a frame."""
        self._scroll_delta = (0.0, 0.0)

    def is_key_pressed(self, key: Hashable) -> bool:
        """Return whether ``key`` is currently held down."""
        return self._keys.get(key, False)

    def is_mouse_button_pressed(self, button: MouseButton | int) -> bool:
        """Return whether ``button`` is currently held down."""
        return self._buttons.get(button, False)

    def mouse_position(self) -> tuple[float, float]:
        """Return the last cursor position."""
        return self._position

    def scroll_delta(self) -> tuple[float, float]:
        """Return the scroll received since the frame began, in pixels."""
        return self._scroll_delta