"""Core data of a scene: textures, colours, the map and the camera."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Side(Enum):
    """Which face of a wall a ray struck."""

    NORTH = 0
    SOUTH = 1
    EAST = 2
    WEST = 3


@dataclass
class Vec:
    """A mutable two-dimensional vector."""

    x: float = 0.0
    y: float = 0.0


def create_trgb(t: int, r: int, g: int, b: int) -> int:
    """Pack transparency and colour channels into one integer."""
    return t << 24 | r << 16 | g << 8 | b


@dataclass(frozen=True)
class Texture:
    """A wall image stored as packed colours in row-major order."""

    width: int
    height: int
    pixels: tuple[int, ...]

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("texture dimensions must be positive")
        object.__setattr__(self, "pixels", tuple(self.pixels))
        if len(self.pixels) != self.width * self.height:
            raise ValueError("pixel count does not match texture size")

    def pixel(self, x: int, y: int) -> int:
        """Return the colour at column ``x`` and row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside texture")
        return self.pixels[y * self.width + x]


@dataclass(frozen=True)
class SceneConfig:
    """Texture paths and floor and ceiling colours of a scene."""

    north: str
    south: str
    east: str
    west: str
    floor: tuple[int, int, int]
    ceiling: tuple[int, int, int]

    @property
    def floor_color(self) -> int:
        return create_trgb(0, *self.floor)

    @property
    def ceiling_color(self) -> int:
        return create_trgb(0, *self.ceiling)

    def texture_path(self, side: Side) -> str:
        """Return the image path used for walls facing ``side``."""
        return {
            Side.NORTH: self.north,
            Side.SOUTH: self.south,
            Side.EAST: self.east,
            Side.WEST: self.west,
        }[side]


@dataclass
class Camera:
    """The player's view: position, direction, camera plane and held keys."""

    grid: list[str]
    pos: Vec
    dir: Vec
    plane: Vec
    right: bool = field(default=False)
    left: bool = field(default=False)
    forward: bool = field(default=False)
    down: bool = field(default=False)
    turn_right: bool = field(default=False)
    turn_left: bool = field(default=False)

    def cell(self, x: int, y: int) -> str:
        """Return the map character at column ``x`` of row ``y``."""
        if not 0 <= y < len(self.grid) or not 0 <= x < len(self.grid[y]):
            raise IndexError(f"cell ({x}, {y}) outside the map")
        return self.grid[y][x]