from __future__ import annotations

from .bounds import UNBOUNDED, CoordinateBounds
from .coords import Axial, Cube

__all__ = ["axial_to_cube", "cube_from_components", "cube_to_axial"]


def axial_to_cube(a: Axial, *, bounds: CoordinateBounds = UNBOUNDED) -> Cube:
    return a.to_cube(bounds=bounds)


def cube_to_axial(c: Cube) -> Axial:
    return Axial.from_cube(c)


def cube_from_components(x: int, y: int, z: int) -> Cube:
    """Parse a raw ``(x, y, z)`` triple, raising ``CubeInvariantError`` if it does not sum to zero."""

    return Cube.from_components(x, y, z)
