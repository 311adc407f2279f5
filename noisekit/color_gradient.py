"""Color gradients that map noise values to RGBA colors."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import NamedTuple

Color = tuple[int, int, int, int]


class _GradientPoint(NamedTuple):
    pos: float
    color: Color


def _as_color(value: Iterable[int]) -> Color:
    color = tuple(int(channel) for channel in value)
    if len(color) != 4 or not all(0 <= channel <= 255 for channel in color):
        raise ValueError(f"a color needs four channels in 0..255, got {color!r}")
    return color  # type: ignore[return-value]


def _saturate_u8(value: float) -> int:
    if value != value:
        return 0
    return int(min(max(value, 0.0), 255.0))


def _clamp(value: float, lower: float, upper: float) -> float:
    if value < lower:
        return lower
    if value > upper:
        return upper
    return value


def blend_channels(channel0: int, channel1: int, alpha: float) -> int:
    """Linearly blend two 8-bit channel values by ``alpha``."""
    c0 = channel0 / 255.0
    c1 = channel1 / 255.0
    return _saturate_u8(((c1 * alpha) + (c0 * (1.0 - alpha))) * 255.0)


def linerp_color(color0: Color, color1: Color, alpha: float) -> Color:
    """Linearly interpolate each channel of two colors."""
    return tuple(  # type: ignore[return-value]
        blend_channels(a, b, alpha) for a, b in zip(color0, color1)
    )


class ColorGradient:
    """An ordered set of control points, each mapping a position to a color.

    A new gradient starts out as a grayscale ramp from -1.0 to 1.0.
    """

    def __init__(self) -> None:
        self._points: list[_GradientPoint] = []
        self.build_grayscale_gradient()

    @property
    def points(self) -> tuple[tuple[float, Color], ...]:
        """The control points as ``(position, color)`` pairs in order."""
        return tuple((p.pos, p.color) for p in self._points)

    def add_gradient_point(self, pos: float, color: Iterable[int]) -> ColorGradient:
        """Insert a control point, ignoring positions that already exist."""
        pos = float(pos)
        if not any(abs(p.pos - pos) < sys.float_info.epsilon for p in self._points):
            index = next(
                (i for i, p in enumerate(self._points) if p.pos >= pos),
                len(self._points),
            )
            self._points.insert(index, _GradientPoint(pos, _as_color(color)))
        return self

    def clear_gradient(self) -> ColorGradient:
        self._points.clear()
        return self

    def build_grayscale_gradient(self) -> ColorGradient:
        return (
            self.clear_gradient()
            .add_gradient_point(-1.0, (0, 0, 0, 255))
            .add_gradient_point(1.0, (255, 255, 255, 255))
        )

    def build_terrain_gradient(self) -> ColorGradient:
        return (
            self.clear_gradient()
            .add_gradient_point(-1.00, (0, 0, 128, 255))
            .add_gradient_point(-0.20, (32, 64, 128, 255))
            .add_gradient_point(-0.04, (64, 96, 192, 255))
            .add_gradient_point(-0.02, (192, 192, 128, 255))
            .add_gradient_point(0.00, (0, 192, 0, 255))
            .add_gradient_point(0.25, (192, 192, 0, 255))
            .add_gradient_point(0.50, (160, 96, 64, 255))
            .add_gradient_point(0.75, (128, 255, 255, 255))
            .add_gradient_point(1.00, (255, 255, 255, 255))
        )

    def build_rainbow_gradient(self) -> ColorGradient:
        return (
            self.clear_gradient()
            .add_gradient_point(-1.0, (255, 0, 0, 255))
            .add_gradient_point(-0.7, (255, 255, 0, 255))
            .add_gradient_point(-0.4, (0, 255, 0, 255))
            .add_gradient_point(0.0, (0, 255, 255, 255))
            .add_gradient_point(0.3, (0, 0, 255, 255))
            .add_gradient_point(0.6, (255, 0, 255, 255))
            .add_gradient_point(1.0, (255, 0, 0, 255))
        )

    def get_color(self, pos: float) -> Color:
        """Return the interpolated color at ``pos``."""
        points = self._points
        if len(points) < 2:
            raise ValueError("a color gradient needs at least two control points")

        clamped = _clamp(pos, points[0].pos, points[-1].pos)
        index = next((i for i, p in enumerate(points) if p.pos > clamped), len(points))

        last = len(points) - 1
        index1 = min(max(index - 1, 0), last)
        index2 = min(index, last)
        if index1 == index2:
            return points[index1].color

        p0, p1 = points[index1], points[index2]
        alpha = (pos - p0.pos) / (p1.pos - p0.pos)
        return linerp_color(p0.color, p1.color, alpha)