from __future__ import annotations

from typing import Iterable

from .bounds import UNBOUNDED, CoordinateBounds
from .coords import Axial, Cube
from .directions import Direction

__all__ = ["neighbor_axial", "neighbor_cube", "neighbors_axial", "neighbors_cube"]


def neighbor_axial(a: Axial, direction: Direction, *, bounds: CoordinateBounds = UNBOUNDED) -> Axial:
    return a.neighbor(direction, bounds=bounds)


def neighbor_cube(c: Cube, direction: Direction, *, bounds: CoordinateBounds = UNBOUNDED) -> Cube:
    return c.neighbor(direction, bounds=bounds)


def neighbors_axial(a: Axial, *, bounds: CoordinateBounds = UNBOUNDED) -> Iterable[Axial]:
    return a.neighbors(bounds=bounds)


def neighbors_cube(c: Cube, *, bounds: CoordinateBounds = UNBOUNDED) -> Iterable[Cube]:
    return c.neighbors(bounds=bounds)
