"""Movement and rotation of the camera."""

from __future__ import annotations

import math

from raycube.scene import Camera, Vec

MOVE_SPEED = 0.1
ROT_SPEED = (20.0 / 1000.0) * 3.0
WALL = "1"


def _step(camera: Camera, along: Vec, sign: float) -> bool:
    new_x = camera.pos.x + sign * along.x * MOVE_SPEED
    new_y = camera.pos.y + sign * along.y * MOVE_SPEED
    if camera.cell(math.floor(new_x), math.floor(new_y)) == WALL:
        return False
    camera.pos.x = new_x
    camera.pos.y = new_y
    return True


def _rotate(camera: Camera, angle: float) -> None:
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    for vec in (camera.dir, camera.plane):
        vec.x, vec.y = vec.x * cos_a - vec.y * sin_a, vec.x * sin_a + vec.y * cos_a


def move_down(camera: Camera) -> bool:
    """Step along the view direction; return False if a wall blocks it."""
    return _step(camera, camera.dir, 1.0)


def move_forward(camera: Camera) -> bool:
    """Step against the view direction; return False if a wall blocks it."""
    return _step(camera, camera.dir, -1.0)


def move_left(camera: Camera) -> bool:
    """Strafe against the camera plane; return False if a wall blocks it."""
    return _step(camera, camera.plane, -1.0)


def move_right(camera: Camera) -> bool:
    """Strafe along the camera plane; return False if a wall blocks it."""
    return _step(camera, camera.plane, 1.0)


def rotate_left(camera: Camera) -> None:
    """Turn the direction and plane by minus one rotation step."""
    _rotate(camera, -ROT_SPEED)


def rotate_right(camera: Camera) -> None:
    """Turn the direction and plane by one rotation step."""
    _rotate(camera, ROT_SPEED)