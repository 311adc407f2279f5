"""Builders that sample a 3-D noise source onto a 2-D noise map."""

from __future__ import annotations

import math
import warnings
from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from typing import Protocol

from noisekit.noise_map import NoiseMap

Point3 = tuple[float, float, float]
Bounds = tuple[float, float]

DEFAULT_SIZE = (100, 100)


class NoiseSource(Protocol):
    """Anything that returns a noise value for a point."""

    def get(self, point: Sequence[float]) -> float: ...


def _lerp(a: float, b: float, alpha: float) -> float:
    return a * (1.0 - alpha) + b * alpha


def _ordered_bounds(lower: float, upper: float) -> Bounds:
    if lower >= upper:
        warnings.warn(
            f"lower bound {lower!r} is larger than upper bound {upper!r}, switching order",
            stacklevel=3,
        )
        return (upper, lower)
    return (lower, upper)


def lat_lon_to_xyz(lat: float, lon: float) -> Point3:
    """Convert latitude and longitude in degrees to a point on the unit sphere."""
    lat_rad = math.radians(lat)
    lon_rad = math.radians(lon)
    r = math.cos(lat_rad)
    return (r * math.cos(lon_rad), math.sin(lat_rad), r * math.sin(lon_rad))


class NoiseMapBuilder(ABC):
    """Common state for builders: the source module and the output size."""

    def __init__(self, source_module: NoiseSource) -> None:
        self._source_module = source_module
        self._size: tuple[int, int] = DEFAULT_SIZE

    @property
    def size(self) -> tuple[int, int]:
        return self._size

    @property
    def source_module(self) -> NoiseSource:
        return self._source_module

    def set_size(self, width: int, height: int) -> NoiseMapBuilder:
        self._size = (width, height)
        return self

    def set_source_module(self, source_module: NoiseSource) -> NoiseMapBuilder:
        self._source_module = source_module
        return self

    @abstractmethod
    def build(self) -> NoiseMap:
        """Sample the source module into a new noise map."""

    def _fill(
        self,
        x_bounds: Bounds,
        y_bounds: Bounds,
        sample: Callable[[float, float], float],
    ) -> NoiseMap:
        """Evaluate ``sample`` over an evenly spaced grid spanning the bounds."""
        width, height = self._size
        result = NoiseMap(width, height)
        if width == 0 or height == 0:
            return result

        x_lower, x_upper = x_bounds
        y_lower, y_upper = y_bounds
        x_step = (x_upper - x_lower) / width
        y_step = (y_upper - y_lower) / height

        for y in range(height):
            current_y = y_lower + y_step * y
            for x in range(width):
                current_x = x_lower + x_step * x
                result.set_value(x, y, sample(current_x, current_y))
        return result


class CylinderMapBuilder(NoiseMapBuilder):
    """Maps noise around the surface of a unit-radius cylinder."""

    def __init__(self, source_module: NoiseSource) -> None:
        super().__init__(source_module)
        self._angle_bounds: Bounds = (-90.0, 90.0)
        self._height_bounds: Bounds = (-1.0, 1.0)

    @property
    def angle_bounds(self) -> Bounds:
        """Angle range in degrees."""
        return self._angle_bounds

    @property
    def height_bounds(self) -> Bounds:
        return self._height_bounds

    def set_angle_bounds(self, lower_bound: float, upper_bound: float) -> CylinderMapBuilder:
        """Set the angle range; reversed bounds are swapped with a warning."""
        self._angle_bounds = _ordered_bounds(lower_bound, upper_bound)
        return self

    def set_height_bounds(self, lower_bound: float, upper_bound: float) -> CylinderMapBuilder:
        """Set the height range; reversed bounds are swapped with a warning."""
        self._height_bounds = _ordered_bounds(lower_bound, upper_bound)
        return self

    def build(self) -> NoiseMap:
        source = self._source_module

        def sample(angle: float, height: float) -> float:
            radians = math.radians(angle)
            return source.get((math.cos(radians), height, math.sin(radians)))

        return self._fill(self._angle_bounds, self._height_bounds, sample)


class PlaneMapBuilder(NoiseMapBuilder):
    """Maps noise onto the z = 0 plane, optionally tiling seamlessly."""

    def __init__(self, source_module: NoiseSource) -> None:
        super().__init__(source_module)
        self._is_seamless = False
        self._x_bounds: Bounds = (-1.0, 1.0)
        self._y_bounds: Bounds = (-1.0, 1.0)

    @property
    def is_seamless(self) -> bool:
        return self._is_seamless

    @property
    def x_bounds(self) -> Bounds:
        return self._x_bounds

    @property
    def y_bounds(self) -> Bounds:
        return self._y_bounds

    def set_is_seamless(self, is_seamless: bool) -> PlaneMapBuilder:
        self._is_seamless = is_seamless
        return self

    def set_x_bounds(self, lower_x_bound: float, upper_x_bound: float) -> PlaneMapBuilder:
        self._x_bounds = (lower_x_bound, upper_x_bound)
        return self

    def set_y_bounds(self, lower_y_bound: float, upper_y_bound: float) -> PlaneMapBuilder:
        self._y_bounds = (lower_y_bound, upper_y_bound)
        return self

    def build(self) -> NoiseMap:
        source = self._source_module
        x_lower, x_upper = self._x_bounds
        y_lower, y_upper = self._y_bounds
        x_extent = x_upper - x_lower
        y_extent = y_upper - y_lower

        def flat(x: float, y: float) -> float:
            return source.get((x, y, 0.0))

        def seamless(x: float, y: float) -> float:
            sw_value = source.get((x, y, 0.0))
            se_value = source.get((x + x_extent, y, 0.0))
            nw_value = source.get((x, y + y_extent, 0.0))
            ne_value = source.get((x + x_extent, y + y_extent, 0.0))

            x_blend = 1.0 - (x - x_lower) / x_extent
            y_blend = 1.0 - (y - y_lower) / y_extent

            y0 = _lerp(sw_value, se_value, x_blend)
            y1 = _lerp(nw_value, ne_value, x_blend)
            return _lerp(y0, y1, y_blend)

        return self._fill(self._x_bounds, self._y_bounds, seamless if self._is_seamless else flat)


class SphereMapBuilder(NoiseMapBuilder):
    """Maps noise over a latitude/longitude region of the unit sphere."""

    def __init__(self, source_module: NoiseSource) -> None:
        super().__init__(source_module)
        self._latitude_bounds: Bounds = (-1.0, 1.0)
        self._longitude_bounds: Bounds = (-1.0, 1.0)

    @property
    def latitude_bounds(self) -> Bounds:
        return self._latitude_bounds

    @property
    def longitude_bounds(self) -> Bounds:
        return self._longitude_bounds

    def set_latitude_bounds(self, min_lat_bound: float, max_lat_bound: float) -> SphereMapBuilder:
        self._latitude_bounds = (min_lat_bound, max_lat_bound)
        return self

    def set_longitude_bounds(self, min_lon_bound: float, max_lon_bound: float) -> SphereMapBuilder:
        self._longitude_bounds = (min_lon_bound, max_lon_bound)
        return self

    def set_bounds(
        self,
        min_lat_bound: float,
        max_lat_bound: float,
        min_lon_bound: float,
        max_lon_bound: float,
    ) -> SphereMapBuilder:
        self._latitude_bounds = (min_lat_bound, max_lat_bound)
        self._longitude_bounds = (min_lon_bound, max_lon_bound)
        return self

    def build(self) -> NoiseMap:
        source = self._source_module

        def sample(lon: float, lat: float) -> float:
            return source.get(lat_lon_to_xyz(lat, lon))

        return self._fill(self._longitude_bounds, self._latitude_bounds, sample)