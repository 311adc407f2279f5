"""Shift the input point by fixed amounts before sampling the source."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any


@dataclass
class TranslatePoint:
    """Adds a per-axis translation to the input point; all default to 0.0."""

    source: Any
    x_translation: float = 0.0
    y_translation: float = 0.0
    z_translation: float = 0.0
    u_translation: float = 0.0

    def set_x_translation(self, x_translation: float) -> TranslatePoint:
        self.x_translation = x_translation
        return self

    def set_y_translation(self, y_translation: float) -> TranslatePoint:
        self.y_translation = y_translation
        return self

    def set_z_translation(self, z_translation: float) -> TranslatePoint:
        self.z_translation = z_translation
        return self

    def set_u_translation(self, u_translation: float) -> TranslatePoint:
        self.u_translation = u_translation
        return self

    def set_translation(self, translation: float) -> TranslatePoint:
        """Apply the same translation to every axis."""
        return self.set_all_translations(translation, translation, translation, translation)

    def set_all_translations(
        self,
        x_translation: float,
        y_translation: float,
        z_translation: float,
        u_translation: float,
    ) -> TranslatePoint:
        self.x_translation = x_translation
        self.y_translation = y_translation
        self.z_translation = z_translation
        self.u_translation = u_translation
        return self

    def get(self, point: Sequence[float]) -> float:
        coords = tuple(point)
        if len(coords) not in (2, 3, 4):
            raise ValueError(f"points must have 2, 3 or 4 coordinates, got {len(coords)}")
        offsets = (self.x_translation, self.y_translation, self.z_translation, self.u_translation)
        return self.source.get(tuple(c + o for c, o in zip(coords, offsets)))