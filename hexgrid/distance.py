from __future__ import annotations

from .bounds import UNBOUNDED, CoordinateBounds
from .coords import Axial, Cube

__all__ = ["hex_distance_axial", "hex_distance_cube"]


def hex_distance_cube(a: Cube, b: Cube, *, bounds: CoordinateBounds = UNBOUNDED) -> int:
    return a.distance(b, bounds=bounds)


def hex_distance_axial(a: Axial, b: Axial, *, bounds: CoordinateBounds = UNBOUNDED) -> int:
    return a.distance(b, bounds=bounds)
