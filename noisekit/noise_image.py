"""A two-dimensional grid of RGBA colors."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from PIL import Image

from noisekit.color_gradient import Color

RASTER_MAX_WIDTH = 32_767
RASTER_MAX_HEIGHT = 32_767
OUTPUT_DIR = Path("example_images")

_TRANSPARENT: Color = (0, 0, 0, 0)


def _check_dimensions(width: int, height: int) -> None:
    if not 0 <= width < RASTER_MAX_WIDTH:
        raise ValueError(f"width must be in 0..{RASTER_MAX_WIDTH - 1}, got {width}")
    if not 0 <= height < RASTER_MAX_HEIGHT:
        raise ValueError(f"height must be in 0..{RASTER_MAX_HEIGHT - 1}, got {height}")


def _as_color(value: Iterable[int]) -> Color:
    color = tuple(int(channel) for channel in value)
    if len(color) != 4 or not all(0 <= channel <= 255 for channel in color):
        raise ValueError(f"a color needs four channels in 0..255, got {color!r}")
    return color  # type: ignore[return-value]


class NoiseImage:
    """A grid of colors; points outside it read as the border color."""

    def __init__(self, width: int = 0, height: int = 0) -> None:
        self._reset()
        self.set_size(width, height)

    def _reset(self) -> None:
        self._size = (0, 0)
        self._border_color: Color = _TRANSPARENT
        self._pixels: list[Color] = []

    @property
    def size(self) -> tuple[int, int]:
        return self._size

    @property
    def border_color(self) -> Color:
        return self._border_color

    def set_size(self, width: int, height: int) -> NoiseImage:
        """Resize the image; a zero dimension empties it entirely.

        Existing storage is kept when it is already large enough.
        """
        _check_dimensions(width, height)
        if width == 0 or height == 0:
            self._reset()
        else:
            needed = width * height
            if len(self._pixels) < needed:
                self._pixels = [_TRANSPARENT] * needed
            self._size = (width, height)
        return self

    def set_border_color(self, color: Iterable[int]) -> NoiseImage:
        self._border_color = _as_color(color)
        return self

    def _contains(self, x: int, y: int) -> bool:
        width, height = self._size
        return 0 <= x < width and 0 <= y < height

    def set_value(self, x: int, y: int, value: Iterable[int]) -> None:
        if not self._contains(x, y):
            width, height = self._size
            raise IndexError(f"point ({x}, {y}) is outside the {width}x{height} image")
        self._pixels[x + y * self._size[0]] = _as_color(value)

    def get_value(self, x: int, y: int) -> Color:
        if self._contains(x, y):
            return self._pixels[x + y * self._size[0]]
        return self._border_color

    def write_to_file(self, filename: str) -> Path:
        """Save the image as RGBA under ``example_images/``; return the path."""
        width, height = self._size
        if width == 0 or height == 0:
            raise ValueError("cannot write an empty noise image")
        OUTPUT_DIR.mkdir(exist_ok=True)
        path = OUTPUT_DIR / filename
        data = bytes(channel for pixel in self._pixels[: width * height] for channel in pixel)
        Image.frombytes("RGBA", (width, height), data).save(path)
        return path