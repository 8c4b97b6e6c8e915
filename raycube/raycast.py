"""Ray casting of the map into a frame of packed colours."""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass, field

from raycube.scene import Camera, SceneConfig, Side, Texture

WALL = "1"
_MIN_DISTANCE = 1e-9
_RGB_MASK = 0xFFFFFF
_ALPHA_MASK = 0xFF000000


@dataclass
class Frame:
    """A screen image of packed colours in row-major order."""

    width: int
    height: int
    pixels: list[int] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("frame dimensions must be positive")
        self.pixels = [0] * (self.width * self.height)

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside frame")
        return y * self.width + x

    def put(self, x: int, y: int, color: int) -> None:
        """Set the colour at column ``x`` and row ``y``."""
        self.pixels[self._index(x, y)] = color

    def get(self, x: int, y: int) -> int:
        """Return the colour at column ``x`` and row ``y``."""
        return self.pixels[self._index(x, y)]


@dataclass(frozen=True)
class RayHit:
    """Where one screen column's ray met a wall."""

    distance: float
    side: Side
    wall_x: float
    map_x: int
    map_y: int


def _delta(ray: float) -> float:
    return abs(1.0 / ray) if ray else math.inf


def _first_side(offset: float, delta: float) -> float:
    return math.inf if math.isinf(delta) else offset * delta


def cast_ray(camera: Camera, x: int, width: int) -> RayHit:
    """Trace the ray of screen column ``x`` until it hits a wall cell.

    Raises IndexError when the ray leaves the map without meeting a wall.
    """
    if width <= 0:
        raise ValueError("width must be positive")
    camera_x = 2.0 * x / width - 1.0
    ray_x = camera.dir.x + camera.plane.x * camera_x
    ray_y = camera.dir.y + camera.plane.y * camera_x
    map_x = int(camera.pos.x)
    map_y = int(camera.pos.y)
    delta_x = _delta(ray_x)
    delta_y = _delta(ray_y)

    if ray_x < 0.0:
        step_x = -1
        side_x = _first_side(camera.pos.x - map_x, delta_x)
    else:
        step_x = 1
        side_x = _first_side(map_x + 1.0 - camera.pos.x, delta_x)
    if ray_y < 0.0:
        step_y = -1
        side_y = _first_side(camera.pos.y - map_y, delta_y)
    else:
        step_y = 1
        side_y = _first_side(map_y + 1.0 - camera.pos.y, delta_y)

    crossed_y = False
    face = Side.EAST
    while True:
        if side_x < side_y:
            side_x += delta_x
            map_x += step_x
            crossed_y = False
            face = Side.WEST if ray_x < 0.0 else Side.EAST
        else:
            side_y += delta_y
            map_y += step_y
            crossed_y = True
            face = Side.NORTH if ray_y < 0.0 else Side.SOUTH
        if camera.cell(map_x, map_y) == WALL:
            break

    if crossed_y:
        distance = side_y - delta_y
        wall_x = camera.pos.x + distance * ray_x
    else:
        distance = side_x - delta_x
        wall_x = camera.pos.y + distance * ray_y
    wall_x -= math.floor(wall_x)
    return RayHit(distance, face, wall_x, map_x, map_y)


def _wall_color(
    hit: RayHit, texture: Texture, y: int, top: float, wall_len: float
) -> int:
    tex_x = int(hit.wall_x * texture.width)
    if hit.side in (Side.WEST, Side.NORTH):
        tex_x = texture.width - tex_x - 1
    rel = int(y - top)
    tex_y = int(rel * texture.height / wall_len)
    tex_x = min(max(tex_x, 0), texture.width - 1)
    tex_y = min(max(tex_y, 0), texture.height - 1)
    return texture.pixel(tex_x, tex_y)


def _draw_column(
    frame: Frame,
    x: int,
    hit: RayHit,
    texture: Texture,
    config: SceneConfig,
) -> None:
    height = frame.height
    half = height // 2
    wall_len = height / max(hit.distance, _MIN_DISTANCE)
    top = half - wall_len / 2

    ceiling = config.ceiling_color
    for y in range(min(height, math.ceil(top)) if top > 0 else 0):
        frame.put(x, y, ceiling)

    start = int(top) if top > 0 else 0
    bottom = half + wall_len / 2
    end = height if bottom >= height else int(bottom)
    for y in range(start, end):
        color = _wall_color(hit, texture, y, top, wall_len)
        kept = frame.get(x, y) & _ALPHA_MASK
        frame.put(x, y, kept | (color & _RGB_MASK))

    floor = config.floor_color
    for y in range(max(end, 0), height):
        frame.put(x, y, floor)


def render(
    camera: Camera,
    frame: Frame,
    textures: Mapping[Side, Texture],
    config: SceneConfig,
) -> Frame:
    """Draw ceiling, textured walls and floor for every column of ``frame``."""
    for x in range(frame.width):
        hit = cast_ray(camera, x, frame.width)
        _draw_column(frame, x, hit, textures[hit.side], config)
    return frame