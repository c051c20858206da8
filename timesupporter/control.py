"""Keyboard and mouse state, counted in frames held."""

from __future__ import annotations

from collections.abc import Iterable
from enum import IntEnum

KEY_COUNT = 256
MOUSE_AREA_WIDE = 640
MOUSE_AREA_HEIGHT = 480


class Key(IntEnum):
    """Key codes of the keys the game reads."""

    ESCAPE = 0x01
    Q = 0x10
    W = 0x11
    E = 0x12
    P = 0x19
    A = 0x1E
    S = 0x1F
    D = 0x20
    F = 0x21
    LSHIFT = 0x2A
    Z = 0x2C
    RSHIFT = 0x36
    SPACE = 0x39


def _check_key(key: int) -> int:
    if not 0 <= key < KEY_COUNT:
        raise ValueError(f"key code out of range: {key}")
    return key


class KeyState:
    """How many consecutive frames each key has been held."""

    def __init__(self) -> None:
        self._frames = [0] * KEY_COUNT

    def update(self, pressed_keys: Iterable[int]) -> None:
        """Advance one frame given the codes of the keys held down now."""
        pressed = {_check_key(key) for key in pressed_keys}
        self._frames = [
            count + 1 if code in pressed else 0
            for code, count in enumerate(self._frames)
        ]

    def frames(self, key: int) -> int:
        """Frames the key has been held; 0 when it is up."""
        return self._frames[_check_key(key)]

    def pressed_once(self, key: int) -> bool:
        """True only on the first frame the key is held."""
        return self.frames(key) == 1


class MouseState:
    """How many consecutive frames each mouse button has been held."""

    def __init__(self) -> None:
        self.left_click = 0
        self.right_click = 0

    def update(self, left: bool, right: bool) -> None:
        """Advance one frame given which buttons are held now."""
        self.left_click = self.left_click + 1 if left else 0
        self.right_click = self.right_click + 1 if right else 0


def mouse_limit(hand_x: int, hand_y: int) -> int:
    """Keep the cursor's x inside the play area while it is vertically inside.

    Returns the possibly corrected x; the caller moves the cursor when it changed.
    """
    if 0 < hand_y < MOUSE_AREA_HEIGHT:
        if hand_x < 0:
            return 0
        if hand_x > MOUSE_AREA_WIDE:
            return MOUSE_AREA_WIDE
    return hand_x