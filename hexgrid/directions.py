"""The six neighbor directions of a flat-topped hex.

Directions run counter-clockwise starting at north-east, with the drawing's
vertical axis pointing up (right-handed), so north is ``+z`` in axial
``(x, z)`` terms::

    NORTH_EAST  (+1,  0)
    NORTH       ( 0, +1)
    NORTH_WEST  (-1, +1)
    SOUTH_WEST  (-1,  0)
    SOUTH       ( 0, -1)
    SOUTH_EAST  (+1, -1)
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Tuple

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .coords import Axial, Cube

__all__ = ["Direction", "direction_from_cube_offset"]


class Direction(Enum):
    """Closed set of unit offsets between a hex and its neighbors."""

    NORTH_EAST = "ne"
    NORTH = "n"
    NORTH_WEST = "nw"
    SOUTH_WEST = "sw"
    SOUTH = "s"
    SOUTH_EAST = "se"

    @property
    def index(self) -> int:
        """Position in the counter-clockwise ordering."""

        return _ORDER.index(self)

    @property
    def cube_offset(self) -> Tuple[int, int, int]:
        return _CUBE_OFFSETS[self]

    @property
    def axial_offset(self) -> Tuple[int, int]:
        dx, _, dz = _CUBE_OFFSETS[self]
        return dx, dz

    @property
    def opposite(self) -> Direction:
        return self.rotated(3)

    def rotated(self, steps: int) -> Direction:
        """Rotate by ``steps`` multiples of 60 degrees; positive is counter-clockwise."""

        return _ORDER[(self.index + steps) % 6]

    def to_cube(self) -> Cube:
        """Unit vector for this direction as a :class:`~hexgrid.coords.Cube`."""

        from .coords import Cube

        dx, dy, _ = _CUBE_OFFSETS[self]
        return Cube(dx, dy)

    def to_axial(self) -> Axial:
        """Unit vector for this direction as an :class:`~hexgrid.coords.Axial`."""

        from .coords import Axial

        return Axial(*self.axial_offset)


_ORDER: Tuple[Direction, ...] = tuple(Direction)

# Each entry is the previous one rotated 60 degrees: (x, y, z) -> (-z, -x, -y).
_CUBE_OFFSETS = {
    Direction.NORTH_EAST: (+1, -1, 0),
    Direction.NORTH: (0, -1, +1),
    Direction.NORTH_WEST: (-1, 0, +1),
    Direction.SOUTH_WEST: (-1, +1, 0),
    Direction.SOUTH: (0, +1, -1),
    Direction.SOUTH_EAST: (+1, 0, -1),
}

_BY_CUBE_OFFSET = {offset: direction for direction, offset in _CUBE_OFFSETS.items()}


def direction_from_cube_offset(offset: Tuple[int, int, int]) -> Direction:
    """Look up the direction for a unit cube offset; ``ValueError`` otherwise."""

    try:
        return _BY_CUBE_OFFSET[tuple(offset)]
    except KeyError:
        raise ValueError(f"{tuple(offset)} is not a unit hex offset") from None
