# raycube

`raycube` is a small raycasting engine. It draws a first-person view of a
grid map in which `'1'` cells are walls. Each wall face (north, south, east,
west) has its own texture, and the floor and ceiling are flat colours. The
camera moves and turns with the keyboard.

## Modules

- `raycube.textutils`: string helpers with C-style semantics. It has
  `atoi`, `split`, `split_many`, `count_words`, `strtrim`, `substr`,
  `strncmp`, `strnstr`, `is_digit` (which also accepts `+` and `-`),
  `is_space`, `is_alnum_str` and `sort_strings`.
- `raycube.linereader`: `iter_lines(stream, buffer_size=1000)` yields the
  lines of a text or binary stream, each with its newline. It reads the
  stream `buffer_size` units at a time. A last line that has no newline is
  yielded as it is.
- `raycube.scene`: the data of a scene.
  - `Side` lists the four wall faces.
  - `Vec` is a mutable 2-D vector.
  - `Texture(width, height, pixels)` holds packed RGB colours in row-major
    order. Read one colour with `Texture.pixel(x, y)`.
  - `SceneConfig` holds the four texture paths and the floor and ceiling
    colours as `(r, g, b)` tuples. It provides `floor_color`,
    `ceiling_color` and `texture_path(side)`.
  - `Camera` holds the map rows (`grid`), the position `pos`, the direction
    `dir` and the camera plane `plane`. It also holds the key flags `right`,
    `left`, `forward`, `down`, `turn_right` and `turn_left`.
    `Camera.cell(x, y)` returns a map character and raises `IndexError`
    outside the map.
  - `create_trgb(t, r, g, b)` packs four channels into one integer.
- `raycube.moves`: camera movement.
  - `move_down` steps 0.1 along `dir`, and `move_forward` steps 0.1 against it.
  - `move_right` steps 0.1 along `plane`, and `move_left` steps 0.1 against it.
  - Each step returns `False` and leaves the camera where it was if the step
    would end in a wall cell.
  - `rotate_right` turns `dir` and `plane` by 0.06 radians, and
    `rotate_left` turns them by -0.06 radians.
- `raycube.controls`: key handling.
  - `Key` holds the X11 key codes for W, A, S, D, Left, Right and Escape.
  - `key_press(camera, key)` sets the matching camera flag, and
    `key_release(camera, key)` clears it. Both return `False` for Escape.
  - `action_keys(camera)` applies one step of every movement whose flag is set.
- `raycube.raycast`: ray casting.
  - `Frame(width, height)` is a screen image with `put` and `get`.
  - `cast_ray(camera, x, width)` runs a DDA walk for one screen column and
    returns a `RayHit` with `distance`, `side`, `wall_x`, `map_x` and
    `map_y`. It raises `IndexError` if the ray leaves the map before it
    reaches a wall.
  - `render(camera, frame, textures, config)` fills every column with
    ceiling, textured wall and floor, and returns the frame.
- `raycube.display`: putting the scene on screen.
  - `load_texture(path)` reads any image that Pillow can open.
    `load_textures(config)` loads all four walls. Both raise
    `TextureError`; for a wall that cannot be loaded, the message names it
    (for example "Missing texture north").
  - `GameWindow(camera, config, textures=None, width=None, height=None)`
    draws the game with pygame. When no width or height is given, it takes
    the missing one from the screen size. `step()` applies the held keys,
    renders, applies them again, and returns the frame. `run()` opens the
    window and loops until the window is closed or Escape is pressed.

## Example

```python
from raycube.scene import Camera, SceneConfig, Side, Texture, Vec
from raycube.raycast import Frame, render
from raycube.textutils import atoi, split

atoi("  -42abc")          # -42
split("220,100,0", ",")   # ['220', '100', '0']

grid = ["1111", "1001", "1001", "1111"]
camera = Camera(grid, pos=Vec(1.5, 1.5), dir=Vec(1.0, 0.0), plane=Vec(0.0, 0.66))
config = SceneConfig("n.png", "s.png", "e.png", "w.png",
                     floor=(50, 50, 50), ceiling=(100, 150, 200))
red = Texture(1, 1, (0xFF0000,))
textures = {side: red for side in Side}

frame = render(camera, Frame(8, 6), textures, config)
frame.get(0, 0) == config.ceiling_color   # True
```

Use `GameWindow(camera, config).run()` to play interactively. It loads the
four textures from the paths in `config`.

## Controls in the window

| Key        | Flag set      | Effect                                 |
|------------|---------------|----------------------------------------|
| W          | `down`        | step along the view direction          |
| S          | `forward`     | step against the view direction        |
| A / D      | `left`/`right`| strafe along the camera plane          |
| Left/Right | `turn_left`/`turn_right` | turn by 0.06 radians per step |
| Escape     | none          | close the window                       |

## What it does not do

There is no command-line program, and nothing reads scene description
files. The package does not parse texture lines, colour lines or map
layouts, and it does not check that a map is closed or has a start
position. The caller builds the `Camera` and `SceneConfig` directly.

## Requirements

Python 3.10 or newer, with `pygame` and `pillow`. The tests use `pytest`,
which the `test` extra installs.