"""Immutable axial and cube coordinates for a flat-topped hex grid.

:class:`Axial` is the primary representation; :class:`Cube` carries the
redundant third axis that makes distance and rotation symmetric.  A cube is
only ever built from two free components, with ``z`` derived as ``-x - y``,
so ``x + y + z == 0`` holds for every instance.

Arithmetic methods take an optional ``bounds`` (see :mod:`hexgrid.bounds`)
to reject results outside a fixed integer width.
"""

from __future__ import annotations

import operator
from dataclasses import dataclass, field
from typing import Iterator, Tuple

from .bounds import UNBOUNDED, CoordinateBounds
from .directions import Direction, direction_from_cube_offset
from .errors import CubeInvariantError

__all__ = ["Axial", "Cube"]


@dataclass(frozen=True, slots=True)
class Cube:
    x: int
    y: int
    z: int = field(init=False)

    def __post_init__(self) -> None:
        x = operator.index(self.x)
        y = operator.index(self.y)
        object.__setattr__(self, "x", x)
        object.__setattr__(self, "y", y)
        object.__setattr__(self, "z", -x - y)

    @classmethod
    def origin(cls) -> Cube:
        return cls(0, 0)

    @classmethod
    def from_components(cls, x: int, y: int, z: int) -> Cube:
        """Build a cube from an untrusted triple, rejecting invariant violations."""

        x, y, z = operator.index(x), operator.index(y), operator.index(z)
        if x + y + z != 0:
            raise CubeInvariantError(x, y, z)
        return cls(x, y)

    def as_tuple(self) -> Tuple[int, int, int]:
        return self.x, self.y, self.z

    def to_axial(self) -> Axial:
        return Axial(self.x, self.z)

    def __add__(self, other: object) -> Cube:
        if not isinstance(other, Cube):
            return NotImplemented
        return Cube(self.x + other.x, self.y + other.y)

    def __sub__(self, other: object) -> Cube:
        if not isinstance(other, Cube):
            return NotImplemented
        return Cube(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Cube:
        return Cube(-self.x, -self.y)

    def distance(self, other: Cube, *, bounds: CoordinateBounds = UNBOUNDED) -> int:
        """Number of neighbor steps between ``self`` and ``other``.

        The three deltas sum to zero, so the largest absolute delta equals
        half their absolute sum.
        """

        dx = bounds.checked_sub(self.x, other.x)
        dy = bounds.checked_sub(self.y, other.y)
        dz = bounds.checked_sub(self.z, other.z)
        return max(bounds.checked_abs(dx), bounds.checked_abs(dy), bounds.checked_abs(dz))

    def neighbor(self, direction: Direction, *, bounds: CoordinateBounds = UNBOUNDED) -> Cube:
        dx, dy, dz = direction.cube_offset
        x = bounds.checked_add(self.x, dx)
        y = bounds.checked_add(self.y, dy)
        # z is derived, but it is still a stored component that must fit
        bounds.checked_add(self.z, dz)
        return Cube(x, y)

    def neighbors(self, *, bounds: CoordinateBounds = UNBOUNDED) -> Iterator[Cube]:
        for direction in Direction:
            yield self.neighbor(direction, bounds=bounds)

    def direction_to(self, other: Cube) -> Direction:
        """Direction from ``self`` to the adjacent ``other``.

        Raises:
            ValueError: ``other`` is not a neighbor of ``self``.
        """

        return direction_from_cube_offset((other - self).as_tuple())


@dataclass(frozen=True, slots=True)
class Axial:
    x: int
    z: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", operator.index(self.x))
        object.__setattr__(self, "z", operator.index(self.z))

    @classmethod
    def origin(cls) -> Axial:
        return cls(0, 0)

    @classmethod
    def from_cube(cls, cube: Cube) -> Axial:
        return cls(cube.x, cube.z)

    @property
    def y(self) -> int:
        """Implicit third cube axis."""

        return -self.x - self.z

    def as_tuple(self) -> Tuple[int, int]:
        return self.x, self.z

    def to_cube(self, *, bounds: CoordinateBounds = UNBOUNDED) -> Cube:
        y = bounds.check(-self.x - self.z, operation="sub")
        return Cube(self.x, y)

    def __add__(self, other: object) -> Axial:
        if not isinstance(other, Axial):
            return NotImplemented
        return Axial(self.x + other.x, self.z + other.z)

    def __sub__(self, other: object) -> Axial:
        if not isinstance(other, Axial):
            return NotImplemented
        return Axial(self.x - other.x, self.z - other.z)

    def __neg__(self) -> Axial:
        return Axial(-self.x, -self.z)

    def distance(self, other: Axial, *, bounds: CoordinateBounds = UNBOUNDED) -> int:
        return self.to_cube(bounds=bounds).distance(other.to_cube(bounds=bounds), bounds=bounds)

    def neighbor(self, direction: Direction, *, bounds: CoordinateBounds = UNBOUNDED) -> Axial:
        return Axial.from_cube(self.to_cube(bounds=bounds).neighbor(direction, bounds=bounds))

    def neighbors(self, *, bounds: CoordinateBounds = UNBOUNDED) -> Iterator[Axial]:
        """Yield the six neighbors in :class:`~hexgrid.directions.Direction` order."""

        for direction in Direction:
            yield self.neighbor(direction, bounds=bounds)

    def direction_to(self, other: Axial) -> Direction:
        return self.to_cube().direction_to(other.to_cube())
