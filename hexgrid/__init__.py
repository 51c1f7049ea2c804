"""Axial and cube coordinates for flat-topped hex grids."""

from .bounds import INT8, INT16, INT32, INT64, UNBOUNDED, CoordinateBounds
from .conversions import axial_to_cube, cube_from_components, cube_to_axial
from .coords import Axial, Cube
from .directions import Direction
from .distance import hex_distance_axial, hex_distance_cube
from .errors import CoordinateOverflowError, CubeInvariantError
from .models import AxialPoint, CubePoint
from .neighbors import neighbor_axial, neighbor_cube, neighbors_axial, neighbors_cube

__version__ = "0.1.0"

__all__ = [
    "Axial",
    "AxialPoint",
    "axial_to_cube",
    "CoordinateBounds",
    "CoordinateOverflowError",
    "Cube",
    "cube_from_components",
    "cube_to_axial",
    "CubeInvariantError",
    "CubePoint",
    "Direction",
    "hex_distance_axial",
    "hex_distance_cube",
    "INT8",
    "INT16",
    "INT32",
    "INT64",
    "neighbor_axial",
    "neighbor_cube",
    "neighbors_axial",
    "neighbors_cube",
    "UNBOUNDED",
]
