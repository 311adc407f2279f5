import pytest
from PIL import Image

from noisekit.noise_image import NoiseImage


def test_new_image_is_transparent():
    image = NoiseImage(2, 3)
    assert image.size == (2, 3)
    assert image.get_value(1, 2) == (0, 0, 0, 0)


def test_set_and_get_round_trip():
    image = NoiseImage(3, 3)
    image.set_value(1, 2, [10, 20, 30, 40])
    assert image.get_value(1, 2) == (10, 20, 30, 40)


def test_outside_points_read_border_color():
    image = NoiseImage(2, 2).set_border_color((1, 2, 3, 4))
    assert image.border_color == (1, 2, 3, 4)
    assert image.get_value(2, 2) == (1, 2, 3, 4)
    assert image.get_value(0, -1) == (1, 2, 3, 4)


def test_set_outside_raises():
    with pytest.raises(IndexError):
        NoiseImage(2, 2).set_value(0, 2, (0, 0, 0, 0))


@pytest.mark.parametrize("color", [(0, 0, 0), (0, 0, 0, 300), (-1, 0, 0, 0)])
def test_invalid_color_rejected(color):
    with pytest.raises(ValueError):
        NoiseImage(1, 1).set_value(0, 0, color)


def test_zero_dimension_empties_image():
    image = NoiseImage(3, 3).set_border_color((5, 5, 5, 5)).set_size(3, 0)
    assert image.size == (0, 0)
    assert image.border_color == (0, 0, 0, 0)


def test_oversized_dimensions_rejected():
    with pytest.raises(ValueError):
        NoiseImage(32_767, 1)


def test_write_to_file_round_trip(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    image = NoiseImage(2, 2)
    colors = {
        (0, 0): (255, 0, 0, 255),
        (1, 0): (0, 255, 0, 128),
        (0, 1): (0, 0, 255, 64),
        (1, 1): (10, 20, 30, 255),
    }
    for (x, y), color in colors.items():
        image.set_value(x, y, color)
    path = image.write_to_file("image.png")
    with Image.open(tmp_path / path) as loaded:
        assert loaded.mode == "RGBA"
        assert {xy: loaded.getpixel(xy) for xy in colors} == colors


def test_write_empty_image_raises(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(ValueError):
        NoiseImage().write_to_file("empty.png")