import pytest

from raycube.scene import Camera, SceneConfig, Side, Texture, Vec, create_trgb


def make_camera():
    return Camera(
        grid=["111", "1N1", "111"],
        pos=Vec(1.5, 1.5),
        dir=Vec(0.0, -1.0),
        plane=Vec(0.66, 0.0),
    )


def test_create_trgb_channels():
    assert create_trgb(0, 255, 0, 0) == 0xFF0000
    assert create_trgb(0, 0, 0, 255) == 0xFF


def test_create_trgb_round_trip():
    packed = create_trgb(1, 20, 30, 40)
    assert (packed >> 24, packed >> 16 & 0xFF, packed >> 8 & 0xFF, packed & 0xFF) == (1, 20, 30, 40)


def test_texture_pixel_lookup():
    tex = Texture(2, 2, [10, 20, 30, 40])
    assert tex.pixel(1, 0) == 20
    assert tex.pixel(0, 1) == 30


def test_texture_size_mismatch():
    with pytest.raises(ValueError):
        Texture(2, 2, [1, 2, 3])


def test_texture_bad_dimensions():
    with pytest.raises(ValueError):
        Texture(0, 1, [])


@pytest.mark.parametrize("x, y", [(2, 0), (0, 2), (-1, 0)])
def test_texture_out_of_range(x, y):
    with pytest.raises(IndexError):
        Texture(2, 2, [1, 2, 3, 4]).pixel(x, y)


def test_scene_config_colours_and_paths():
    config = SceneConfig("n.xpm", "s.xpm", "e.xpm", "w.xpm", (220, 100, 0), (225, 30, 0))
    assert config.floor_color == create_trgb(0, 220, 100, 0)
    assert config.ceiling_color == create_trgb(0, 225, 30, 0)
    assert [config.texture_path(side) for side in Side] == ["n.xpm", "s.xpm", "e.xpm", "w.xpm"]


def test_camera_cell():
    cam = make_camera()
    assert cam.cell(1, 1) == "N"
    assert cam.cell(0, 1) == "1"


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (3, 0), (0, 3)])
def test_camera_cell_out_of_map(x, y):
    with pytest.raises(IndexError):
        make_camera().cell(x, y)


def test_camera_starts_with_no_keys_held():
    cam = make_camera()
    held = (cam.right, cam.left, cam.forward, cam.down, cam.turn_right, cam.turn_left)
    assert held == (False, False, False, False, False, False)