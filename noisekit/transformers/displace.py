"""Displace each coordinate of the input point by a separate noise source."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

_AXES = ("x", "y", "z", "u")


@dataclass
class Displace:
    """Offsets every input coordinate by its own displacement source.

    Each displacement source is evaluated at the original point; the results
    are added to the matching coordinates before the main source is sampled.
    The z and u sources are only needed for 3-D and 4-D points.
    """

    source: Any
    x_displace: Any
    y_displace: Any
    z_displace: Any = None
    u_displace: Any = None

    def get(self, point: Sequence[float]) -> float:
        coords = tuple(point)
        dimensions = len(coords)
        if dimensions not in (2, 3, 4):
            raise ValueError(f"points must have 2, 3 or 4 coordinates, got {dimensions}")

        displacers = (self.x_displace, self.y_displace, self.z_displace, self.u_displace)[
            :dimensions
        ]
        for axis, displacer in zip(_AXES, displacers):
            if displacer is None:
                raise ValueError(
                    f"{dimensions}-dimensional points need a {axis} displacement source"
                )

        displaced = tuple(
            coord + displacer.get(coords) for coord, displacer in zip(coords, displacers)
        )
        return self.source.get(displaced)