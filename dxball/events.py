"""Input constants and coordinate helpers shared by the window and the game."""

from __future__ import annotations

from enum import IntEnum

__all__ = ["MouseButton", "ButtonState", "SpecialKey", "flip_y"]


class MouseButton(IntEnum):
    """Mouse buttons reported to an application's mouse handler."""

    LEFT = 0
    MIDDLE = 1
    RIGHT = 2


class ButtonState(IntEnum):
    """Whether a mouse button went down or came up."""

    DOWN = 0
    UP = 1


class SpecialKey(IntEnum):
    """Non-character keys: function keys, arrows and the navigation block."""

    F1 = 1
    F2 = 2
    F3 = 3
    F4 = 4
    F5 = 5
    F6 = 6
    F7 = 7
    F8 = 8
    F9 = 9
    F10 = 10
    F11 = 11
    F12 = 12
    LEFT = 100
    UP = 101
    RIGHT = 102
    DOWN = 103
    PAGE_UP = 104
    PAGE_DOWN = 105
    HOME = 106
    END = 107
    INSERT = 108


def flip_y(screen_height, y):
    """Convert a y coordinate between top-left and bottom-left origins."""
    return screen_height - y