"""A two-dimensional grid of noise values."""

from __future__ import annotations

from pathlib import Path

from PIL import Image

RASTER_MAX_WIDTH = 32_767
RASTER_MAX_HEIGHT = 32_767
OUTPUT_DIR = Path("example_images")


def _check_dimensions(width: int, height: int) -> None:
    if not 0 <= width < RASTER_MAX_WIDTH:
        raise ValueError(f"width must be in 0..{RASTER_MAX_WIDTH - 1}, got {width}")
    if not 0 <= height < RASTER_MAX_HEIGHT:
        raise ValueError(f"height must be in 0..{RASTER_MAX_HEIGHT - 1}, got {height}")


def _to_gray(value: float) -> int:
    scaled = value * 0.5 + 0.5
    if scaled != scaled:
        return 0
    return int(min(max(scaled, 0.0), 1.0) * 255.0)


class NoiseMap:
    """A grid of floats; points outside it read as the border value."""

    def __init__(self, width: int = 0, height: int = 0) -> None:
        self._reset()
        self.set_size(width, height)

    def _reset(self) -> None:
        self._size = (0, 0)
        self._border_value = 0.0
        self._values: list[float] = []

    @property
    def size(self) -> tuple[int, int]:
        return self._size

    @property
    def border_value(self) -> float:
        return self._border_value

    def set_size(self, width: int, height: int) -> NoiseMap:
        """Resize the map; a zero dimension empties it entirely.

        Existing storage is kept when it is already large enough.
        """
        _check_dimensions(width, height)
        if width == 0 or height == 0:
            self._reset()
        else:
            needed = width * height
            if len(self._values) < needed:
                self._values = [0.0] * needed
            self._size = (width, height)
        return self

    def set_border_value(self, border_value: float) -> NoiseMap:
        self._border_value = border_value
        return self

    def _contains(self, x: int, y: int) -> bool:
        width, height = self._size
        return 0 <= x < width and 0 <= y < height

    def set_value(self, x: int, y: int, value: float) -> None:
        if not self._contains(x, y):
            width, height = self._size
            raise IndexError(f"point ({x}, {y}) is outside the {width}x{height} map")
        self._values[x + y * self._size[0]] = value

    def get_value(self, x: int, y: int) -> float:
        if self._contains(x, y):
            return self._values[x + y * self._size[0]]
        return self._border_value

    def write_to_file(self, filename: str) -> Path:
        """Save the map as a grayscale image under ``example_images/``.

        Values in [-1, 1] map to [0, 255]. Returns the written path.
        """
        width, height = self._size
        if width == 0 or height == 0:
            raise ValueError("cannot write an empty noise map")
        OUTPUT_DIR.mkdir(exist_ok=True)
        path = OUTPUT_DIR / filename
        pixels = bytes(_to_gray(v) for v in self._values[: width * height])
        Image.frombytes("L", (width, height), pixels).save(path)
        return path