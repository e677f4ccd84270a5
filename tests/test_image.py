import numpy as np
import pytest
from PIL import Image as PILImage

from cubcaster.errors import Cub3dError
from cubcaster.image import Image, load_texture, rgb


def test_rgb_packs_components():
    assert rgb(255, 0, 0) == 0xFF0000
    assert rgb(0, 0, 0) == 0


def test_rgb_component_order():
    packed = rgb(1, 2, 3)
    assert (packed >> 16) & 0xFF == 1
    assert (packed >> 8) & 0xFF == 2
    assert packed & 0xFF == 3


def test_new_image_is_black():
    image = Image(4, 3)
    assert image.pixels.shape == (3, 4)
    assert not image.pixels.any()


def test_plot_then_get_round_trip():
    image = Image(5, 5)
    color = rgb(10, 20, 30)
    image.plot(2, 3, color)
    assert image.get(2, 3) == color
    assert image.get(3, 2) == 0


def test_plot_outside_raises():
    image = Image(2, 2)
    with pytest.raises(IndexError):
        image.plot(2, 0, 1)
    with pytest.raises(IndexError):
        image.get(0, -1)


def test_mismatched_pixel_array_rejected():
    with pytest.raises(ValueError):
        Image(3, 3, np.zeros((2, 3), dtype=np.uint32))


def test_vertical_line_is_inclusive():
    image = Image(3, 10)
    image.draw_vertical_line(1, 2, 5, 9)
    column = [image.get(1, y) for y in range(10)]
    assert column == [0, 0, 9, 9, 9, 9, 0, 0, 0, 0]
    assert not image.pixels[:, 0].any()
    assert not image.pixels[:, 2].any()


def test_vertical_line_negative_start_clamped():
    image = Image(1, 6)
    image.draw_vertical_line(0, -4, 1, 5)
    assert [image.get(0, y) for y in range(6)] == [5, 5, 0, 0, 0, 0]


def test_vertical_line_starting_below_image_draws_nothing():
    image = Image(1, 4)
    image.draw_vertical_line(0, 4, 10, 5)
    assert not image.pixels.any()


def test_vertical_line_end_before_start_draws_nothing():
    image = Image(1, 4)
    image.draw_vertical_line(0, 3, -2, 5)
    assert not image.pixels.any()


def test_vertical_line_end_kept_inside():
    image = Image(1, 4)
    image.draw_vertical_line(0, 1, 100, 7)
    assert [image.get(0, y) for y in range(4)] == [0, 7, 7, 7]


def test_load_texture_reads_colours(tmp_path):
    path = tmp_path / "wall.xpm"
    picture = PILImage.new("RGB", (3, 2), (12, 34, 56))
    picture.putpixel((2, 1), (200, 100, 50))
    picture.save(path, format="PNG")

    texture = load_texture(path)

    assert (texture.width, texture.height) == (3, 2)
    assert texture.get(0, 0) == rgb(12, 34, 56)
    assert texture.get(2, 1) == rgb(200, 100, 50)


def test_load_texture_missing_file(tmp_path):
    with pytest.raises(Cub3dError, match="could not load texture!"):
        load_texture(tmp_path / "absent.xpm")


def test_load_texture_not_an_image(tmp_path):
    path = tmp_path / "junk.xpm"
    path.write_text("not a picture")
    with pytest.raises(Cub3dError):
        load_texture(path)