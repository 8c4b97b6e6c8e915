"""Loading wall images and running the game window."""

from __future__ import annotations

from collections.abc import Mapping

from PIL import Image

from raycube.controls import Key, action_keys, key_press, key_release
from raycube.raycast import Frame, render
from raycube.scene import Camera, SceneConfig, Side, Texture

TITLE = "Welcome to Saint Tropez"
_FPS = 60
_SIDE_NAMES = (
    (Side.NORTH, "north"),
    (Side.SOUTH, "south"),
    (Side.EAST, "east"),
    (Side.WEST, "west"),
)


class TextureError(Exception):
    """A wall image could not be loaded."""


def load_texture(path: str) -> Texture:
    """Read an image file into a texture of packed RGB colours."""
    try:
        with Image.open(path) as image:
            rgb = image.convert("RGB")
            data = rgb.tobytes()
            width, height = rgb.size
    except (OSError, ValueError) as exc:
        raise TextureError(f"cannot load texture {path!r}") from exc
    pixels = tuple(
        int.from_bytes(data[offset:offset + 3], "big")
        for offset in range(0, len(data), 3)
    )
    return Texture(width, height, pixels)


def load_textures(config: SceneConfig) -> dict[Side, Texture]:
    """Load the four wall textures named by ``config``."""
    textures: dict[Side, Texture] = {}
    for side, name in _SIDE_NAMES:
        try:
            textures[side] = load_texture(config.texture_path(side))
        except TextureError as exc:
            raise TextureError(f"Missing texture {name}") from exc
    return textures


def _frame_bytes(frame: Frame) -> bytes:
    out = bytearray()
    for color in frame.pixels:
        out += (color & 0xFFFFFF).to_bytes(3, "big")
    return bytes(out)


class GameWindow:
    """The game loop: keys move the camera and each tick redraws the view."""

    def __init__(
        self,
        camera: Camera,
        config: SceneConfig,
        textures: Mapping[Side, Texture] | None = None,
        width: int | None = None,
        height: int | None = None,
    ) -> None:
        self.camera = camera
        self.config = config
        self.textures = dict(textures) if textures is not None else load_textures(config)
        if width is None or height is None:
            import pygame

            pygame.display.init()
            info = pygame.display.Info()
            width = info.current_w if width is None else width
            height = info.current_h if height is None else height
        self.frame = Frame(width, height)

    def step(self) -> Frame:
        """Apply held keys, redraw the frame and apply held keys again."""
        action_keys(self.camera)
        render(self.camera, self.frame, self.textures, self.config)
        action_keys(self.camera)
        return self.frame

    def run(self) -> None:
        """Open the window and play until it is closed or Escape is pressed."""
        import pygame

        keymap = {
            pygame.K_ESCAPE: Key.ESC,
            pygame.K_w: Key.W,
            pygame.K_s: Key.S,
            pygame.K_a: Key.A,
            pygame.K_d: Key.D,
            pygame.K_LEFT: Key.LEFT,
            pygame.K_RIGHT: Key.RIGHT,
        }
        pygame.init()
        try:
            size = (self.frame.width, self.frame.height)
            screen = pygame.display.set_mode(size)
            pygame.display.set_caption(TITLE)
            clock = pygame.time.Clock()
            running = True
            while running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        running = False
                    elif event.type == pygame.KEYDOWN:
                        key = keymap.get(event.key, event.key)
                        running = key_press(self.camera, key) and running
                    elif event.type == pygame.KEYUP:
                        key = keymap.get(event.key, event.key)
                        running = key_release(self.camera, key) and running
                if not running:
                    break
                self.step()
                surface = pygame.image.frombuffer(_frame_bytes(self.frame), size, "RGB")
                screen.blit(surface, (0, 0))
                pygame.display.flip()
                clock.tick(_FPS)
        finally:
            pygame.quit()