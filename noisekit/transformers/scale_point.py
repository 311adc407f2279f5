"""Scale the input point by per-axis factors before sampling the source."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any


@dataclass
class ScalePoint:
    """Multiplies each input coordinate by a factor; all default to 1.0."""

    source: Any
    x_scale: float = 1.0
    y_scale: float = 1.0
    z_scale: float = 1.0
    u_scale: float = 1.0

    def set_x_scale(self, x_scale: float) -> ScalePoint:
        self.x_scale = x_scale
        return self

    def set_y_scale(self, y_scale: float) -> ScalePoint:
        self.y_scale = y_scale
        return self

    def set_z_scale(self, z_scale: float) -> ScalePoint:
        self.z_scale = z_scale
        return self

    def set_u_scale(self, u_scale: float) -> ScalePoint:
        self.u_scale = u_scale
        return self

    def set_scale(self, scale: float) -> ScalePoint:
        """Apply the same scaling factor to every axis."""
        return self.set_all_scales(scale, scale, scale, scale)

    def set_all_scales(
        self, x_scale: float, y_scale: float, z_scale: float, u_scale: float
    ) -> ScalePoint:
        self.x_scale = x_scale
        self.y_scale = y_scale
        self.z_scale = z_scale
        self.u_scale = u_scale
        return self

    def get(self, point: Sequence[float]) -> float:
        coords = tuple(point)
        if len(coords) not in (2, 3, 4):
            raise ValueError(f"points must have 2, 3 or 4 coordinates, got {len(coords)}")
        factors = (self.x_scale, self.y_scale, self.z_scale, self.u_scale)
        return self.source.get(tuple(c * f for c, f in zip(coords, factors)))