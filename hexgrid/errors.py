"""Exceptions raised by hex coordinate arithmetic and parsing."""

from __future__ import annotations

__all__ = ["CoordinateOverflowError", "CubeInvariantError"]


class CoordinateOverflowError(OverflowError):
    """A coordinate component left the configured integer range."""

    def __init__(self, value: int, bits: int, operation: str) -> None:
        self.value = value
        self.bits = bits
        self.operation = operation
        super().__init__(f"{operation} overflowed {bits}-bit coordinate range: {value}")


class CubeInvariantError(ValueError):
    """A cube triple does not satisfy ``x + y + z == 0``."""

    def __init__(self, x: int, y: int, z: int) -> None:
        self.components = (x, y, z)
        super().__init__(f"For cube coords, x + y + z must be 0, got ({x}, {y}, {z})")
