"""Rotate the input point around the origin before sampling the source."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any


@dataclass
class RotatePoint:
    """Rotates the input point around the origin; angles are in degrees.

    The coordinate system is right-handed: x increases to the right, y
    upward and z inward. Two-dimensional points are rotated in the xy plane
    around the z axis. Four-dimensional rotation is not supported.
    """

    source: Any
    x_angle: float = 0.0
    y_angle: float = 0.0
    z_angle: float = 0.0
    u_angle: float = 0.0

    def set_x_angle(self, x_angle: float) -> RotatePoint:
        self.x_angle = x_angle
        return self

    def set_y_angle(self, y_angle: float) -> RotatePoint:
        self.y_angle = y_angle
        return self

    def set_z_angle(self, z_angle: float) -> RotatePoint:
        self.z_angle = z_angle
        return self

    def set_u_angle(self, u_angle: float) -> RotatePoint:
        self.u_angle = u_angle
        return self

    def set_angles(
        self, x_angle: float, y_angle: float, z_angle: float, u_angle: float
    ) -> RotatePoint:
        """Set the rotation angle around every axis at once."""
        self.x_angle = x_angle
        self.y_angle = y_angle
        self.z_angle = z_angle
        self.u_angle = u_angle
        return self

    def _rotate_2d(self, x: float, y: float) -> tuple[float, float]:
        theta = math.radians(self.z_angle)
        cos_t = math.cos(theta)
        sin_t = math.sin(theta)
        return (x * cos_t - y * sin_t, x * sin_t + y * cos_t)

    def _rotate_3d(self, x: float, y: float, z: float) -> tuple[float, float, float]:
        x_rad = math.radians(self.x_angle)
        y_rad = math.radians(self.y_angle)
        z_rad = math.radians(self.z_angle)
        x_cos, x_sin = math.cos(x_rad), math.sin(x_rad)
        y_cos, y_sin = math.cos(y_rad), math.sin(y_rad)
        z_cos, z_sin = math.cos(z_rad), math.sin(z_rad)

        x1 = x_sin * y_sin * z_sin + y_cos * z_cos
        y1 = x_cos * z_sin
        z1 = y_sin * z_cos - y_cos * x_sin * z_sin
        x2 = y_sin * x_sin * z_cos - y_cos * z_sin
        y2 = x_cos * z_cos
        z2 = -y_cos * x_sin * z_cos - y_sin * z_sin
        x3 = -y_sin * x_cos
        y3 = x_sin
        z3 = y_cos * x_cos

        return (
            x1 * x + y1 * y + z1 * z,
            x2 * x + y2 * y + z2 * z,
            x3 * x + y3 * y + z3 * z,
        )

    def get(self, point: Sequence[float]) -> float:
        coords = tuple(point)
        dimensions = len(coords)
        if dimensions == 2:
            return self.source.get(self._rotate_2d(*coords))
        if dimensions == 3:
            return self.source.get(self._rotate_3d(*coords))
        if dimensions == 4:
            raise ValueError("rotation of 4-dimensional points is not supported")
        raise ValueError(f"points must have 2, 3 or 4 coordinates, got {dimensions}")