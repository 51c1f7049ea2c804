"""Validated integer-width configuration for coordinate arithmetic.

Python integers never wrap, so by default every coordinate operation is
unbounded.  Callers that mirror coordinates into fixed-width storage (an
``int16`` column, a packed array) pass a :class:`CoordinateBounds` to the
arithmetic methods; any intermediate that would not fit the signed range
raises :class:`~hexgrid.errors.CoordinateOverflowError` instead of being
silently truncated later.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

from .errors import CoordinateOverflowError

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .coords import Axial, Cube

__all__ = ["CoordinateBounds", "INT8", "INT16", "INT32", "INT64", "UNBOUNDED"]

logger = logging.getLogger(__name__)


class CoordinateBounds(BaseModel):
    """Signed two's-complement range applied to every coordinate component."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    bits: int | None = Field(default=None, ge=2, le=128)

    @classmethod
    def signed(cls, bits: int) -> CoordinateBounds:
        return cls(bits=bits)

    @property
    def bounded(self) -> bool:
        return self.bits is not None

    @property
    def minimum(self) -> int | None:
        """Smallest representable component, or ``None`` when unbounded."""

        if self.bits is None:
            return None
        return -(1 << (self.bits - 1))

    @property
    def maximum(self) -> int | None:
        """Largest representable component, or ``None`` when unbounded."""

        if self.bits is None:
            return None
        return (1 << (self.bits - 1)) - 1

    def contains(self, value: int) -> bool:
        if self.bits is None:
            return True
        return self.minimum <= value <= self.maximum

    def check(self, value: int, *, operation: str) -> int:
        """Return ``value`` unchanged or raise if it does not fit."""

        if self.contains(value):
            return value
        logger.debug("coordinate overflow in %s: %d outside %d-bit range", operation, value, self.bits)
        raise CoordinateOverflowError(value, self.bits, operation)

    def checked_add(self, a: int, b: int) -> int:
        return self.check(a + b, operation="add")

    def checked_sub(self, a: int, b: int) -> int:
        return self.check(a - b, operation="sub")

    def checked_neg(self, a: int) -> int:
        return self.check(-a, operation="neg")

    def checked_abs(self, a: int) -> int:
        # abs(minimum) is one past maximum
        return self.check(abs(a), operation="abs")

    def validate_coord(self, coord: Axial | Cube) -> Axial | Cube:
        """Check every component of an existing coordinate, cube ``y`` included."""

        for name in ("x", "y", "z"):
            self.check(getattr(coord, name), operation=f"component {name}")
        return coord


UNBOUNDED = CoordinateBounds()
INT8 = CoordinateBounds(bits=8)
INT16 = CoordinateBounds(bits=16)
INT32 = CoordinateBounds(bits=32)
INT64 = CoordinateBounds(bits=64)
