"""Render noise maps into color images, with optional hill shading."""

from __future__ import annotations

import math
from collections.abc import Iterable

from noisekit.color_gradient import Color, ColorGradient
from noisekit.noise_image import NoiseImage
from noisekit.noise_map import NoiseMap

_SQRT_2 = math.sqrt(2.0)


def _as_color(value: Iterable[int]) -> Color:
    color = tuple(int(channel) for channel in value)
    if len(color) != 4 or not all(0 <= channel <= 255 for channel in color):
        raise ValueError(f"a color needs four channels in 0..255, got {color!r}")
    return color  # type: ignore[return-value]


def to_unit_channels(color: Iterable[int]) -> tuple[float, float, float, float]:
    """Scale four 8-bit channels to floats in [0, 1]."""
    return tuple(channel / 255.0 for channel in color)  # type: ignore[return-value]


def _lerp(a: float, b: float, alpha: float) -> float:
    return a * (1.0 - alpha) + b * alpha


def _unit_clamp(value: float) -> float:
    if value != value:
        return 0.0
    return min(max(value, 0.0), 1.0)


def _neighbour_offsets(index: int, length: int, wrap: bool) -> tuple[int, int]:
    """Offsets to the previous and next sample along one axis."""
    last = length - 1
    if wrap:
        if index == 0:
            return last, 1
        if index == last:
            return -1, last
    else:
        if index == 0:
            return 0, 1
        if index == last:
            return -1, 0
    return -1, 1


class LightSource:
    """A directional light used to shade rendered terrain."""

    def __init__(self) -> None:
        self._azimuth = 45.0
        self._brightness = 1.0
        self._color: Color = (255, 255, 255, 255)
        self._contrast = 1.0
        self._elevation = 45.0
        self._intensity = 1.0
        self._update_angles()

    def _update_angles(self) -> None:
        azimuth = math.radians(self._azimuth)
        elevation = math.radians(self._elevation)
        self._azimuth_cos = math.cos(azimuth)
        self._azimuth_sin = math.sin(azimuth)
        self._elevation_cos = math.cos(elevation)
        self._elevation_sin = math.sin(elevation)

    @property
    def azimuth(self) -> float:
        """Azimuth of the light, in degrees."""
        return self._azimuth

    @property
    def brightness(self) -> float:
        return self._brightness

    @property
    def color(self) -> Color:
        return self._color

    @property
    def contrast(self) -> float:
        """Contrast between lit areas and areas in shadow."""
        return self._contrast

    @property
    def elevation(self) -> float:
        """Elevation of the light, in degrees."""
        return self._elevation

    @property
    def intensity(self) -> float:
        return self._intensity

    def set_azimuth(self, azimuth: float) -> None:
        self._azimuth = azimuth
        self._update_angles()

    def set_brightness(self, brightness: float) -> None:
        self._brightness = brightness

    def set_color(self, color: Iterable[int]) -> None:
        self._color = _as_color(color)

    def set_contrast(self, contrast: float) -> None:
        """Set the contrast; it must not be negative."""
        if contrast < 0.0:
            raise ValueError(f"contrast value out of bounds: {contrast}")
        self._contrast = contrast

    def set_elevation(self, elevation: float) -> None:
        self._elevation = elevation
        self._update_angles()

    def set_intensity(self, intensity: float) -> None:
        self._intensity = intensity

    def calc_light_intensity(
        self, center: float, left: float, right: float, down: float, up: float
    ) -> float:
        """Light falling on a point given its four neighbours; never negative."""
        i_max = 1.0
        io = i_max * _SQRT_2 * self._elevation_sin / 2.0
        shade = (i_max - io) * self._contrast * _SQRT_2 * self._elevation_cos
        ix = shade * self._azimuth_cos
        iy = shade * self._azimuth_sin

        intensity = ix * (left - right) + iy * (down - up) + io
        return max(intensity, 0.0)


class ImageRenderer:
    """Turns a noise map into an image through a color gradient."""

    def __init__(self) -> None:
        self._gradient = ColorGradient()
        self._light = LightSource()
        self._light_enabled = False
        self._wrap_enabled = False

    @property
    def gradient(self) -> ColorGradient:
        return self._gradient

    @property
    def light_enabled(self) -> bool:
        return self._light_enabled

    @property
    def wrap_enabled(self) -> bool:
        return self._wrap_enabled

    @property
    def light_azimuth(self) -> float:
        return self._light.azimuth

    @property
    def light_brightness(self) -> float:
        return self._light.brightness

    @property
    def light_color(self) -> Color:
        return self._light.color

    @property
    def light_contrast(self) -> float:
        return self._light.contrast

    @property
    def light_elevation(self) -> float:
        return self._light.elevation

    @property
    def light_intensity(self) -> float:
        return self._light.intensity

    def set_gradient(self, gradient: ColorGradient) -> ImageRenderer:
        self._gradient = gradient
        return self

    def enable_light(self) -> None:
        self._light_enabled = True

    def disable_light(self) -> None:
        self._light_enabled = False

    def enable_wrap(self) -> ImageRenderer:
        self._wrap_enabled = True
        return self

    def set_light_azimuth(self, azimuth: float) -> ImageRenderer:
        self._light.set_azimuth(azimuth)
        return self

    def set_light_brightness(self, brightness: float) -> ImageRenderer:
        self._light.set_brightness(brightness)
        return self

    def set_light_color(self, color: Iterable[int]) -> ImageRenderer:
        self._light.set_color(color)
        return self

    def set_light_contrast(self, contrast: float) -> ImageRenderer:
        self._light.set_contrast(contrast)
        return self

    def set_light_elevation(self, elevation: float) -> ImageRenderer:
        self._light.set_elevation(elevation)
        return self

    def set_light_intensity(self, intensity: float) -> ImageRenderer:
        self._light.set_intensity(intensity)
        return self

    def _light_at(self, noise_map: NoiseMap, x: int, y: int, center: float) -> float:
        if not self._light_enabled:
            return 1.0
        width, height = noise_map.size
        left, right = _neighbour_offsets(x, width, self._wrap_enabled)
        down, up = _neighbour_offsets(y, height, self._wrap_enabled)
        intensity = self._light.calc_light_intensity(
            center,
            noise_map.get_value(x + left, y),
            noise_map.get_value(x + right, y),
            noise_map.get_value(x, y + down),
            noise_map.get_value(x, y + up),
        )
        return intensity * self._light.brightness

    def _shade(self, red: float, green: float, blue: float, light_value: float) -> tuple[int, int, int]:
        channels = (red, green, blue)
        if self._light_enabled:
            channels = tuple(
                channel * light_value * light_channel / 255.0
                for channel, light_channel in zip(channels, self._light.color[:3])
            )
        return tuple(int(_unit_clamp(channel) * 255.0) for channel in channels)  # type: ignore[return-value]

    def _pixels(self, noise_map: NoiseMap):
        width, height = noise_map.size
        for y in range(height):
            for x in range(width):
                point = noise_map.get_value(x, y)
                yield x, y, self._gradient.get_color(point), self._light_at(noise_map, x, y, point)

    def render(self, noise_map: NoiseMap) -> NoiseImage:
        """Render ``noise_map`` into a new image of the same size."""
        width, height = noise_map.size
        image = NoiseImage(width, height)
        for x, y, source_color, light_value in self._pixels(noise_map):
            red, green, blue, _ = to_unit_channels(source_color)
            shaded = self._shade(red, green, blue, light_value)
            image.set_value(x, y, (*shaded, source_color[3]))
        return image

    def render_with_background(self, noise_map: NoiseMap, background: NoiseImage) -> NoiseImage:
        """Render ``noise_map`` blended with ``background`` by the gradient's alpha."""
        width, height = noise_map.size
        image = NoiseImage(width, height)
        for x, y, source_color, light_value in self._pixels(noise_map):
            background_color = background.get_value(x, y)
            source = to_unit_channels(source_color)
            back = to_unit_channels(background_color)
            alpha = source[3]
            blended = (_lerp(s, b, alpha) for s, b in zip(source[:3], back[:3]))
            shaded = self._shade(*blended, light_value)
            image.set_value(x, y, (*shaded, max(source_color[3], background_color[3])))
        return image