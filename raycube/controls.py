"""Keyboard handling: which held keys move the camera."""

from __future__ import annotations

from enum import IntEnum

from raycube import moves
from raycube.scene import Camera


class Key(IntEnum):
    """X11 key symbols the game reacts to."""

    ESC = 65307
    W = 119
    S = 115
    A = 97
    D = 100
    LEFT = 65361
    RIGHT = 65363


_FLAGS = {
    Key.D: "right",
    Key.A: "left",
    Key.S: "forward",
    Key.W: "down",
    Key.RIGHT: "turn_right",
    Key.LEFT: "turn_left",
}

_ACTIONS = (
    ("right", moves.move_right),
    ("left", moves.move_left),
    ("forward", moves.move_forward),
    ("down", moves.move_down),
    ("turn_right", moves.rotate_right),
    ("turn_left", moves.rotate_left),
)


def _set_flag(camera: Camera, key: int, held: bool) -> bool:
    if key == Key.ESC:
        return False
    flag = _FLAGS.get(key)
    if flag is not None:
        setattr(camera, flag, held)
    return True


def key_press(camera: Camera, key: int) -> bool:
    """Mark ``key`` as held. Return False when the game should close."""
    return _set_flag(camera, key, True)


def key_release(camera: Camera, key: int) -> bool:
    """Mark ``key`` as released. Return False when the game should close."""
    return _set_flag(camera, key, False)


def action_keys(camera: Camera) -> None:
    """Apply one step of every movement whose key is held."""
    for flag, action in _ACTIONS:
        if getattr(camera, flag):
            action(camera)