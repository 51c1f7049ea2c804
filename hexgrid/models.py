"""Pydantic models for hex coordinates in serialized payloads."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from pydantic import BaseModel, ConfigDict, model_validator

from .coords import Axial, Cube

__all__ = ["AxialPoint", "CubePoint"]


def _coerce_sequence(value: object, names: tuple[str, ...]) -> Mapping[str, object] | object:
    if isinstance(value, Mapping):
        return value
    if isinstance(value, Sequence) and not isinstance(value, str | bytes | bytearray):
        sequence = list(value)
        if len(sequence) == len(names):
            return dict(zip(names, sequence))
    return value


class AxialPoint(BaseModel):
    """Serializable axial coordinate; accepts ``{"x": .., "z": ..}`` or ``[x, z]``."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    x: int
    z: int

    @model_validator(mode="before")
    @classmethod
    def _coerce_tuple(cls, value: object) -> Mapping[str, object] | object:
        return _coerce_sequence(value, ("x", "z"))

    @classmethod
    def from_coord(cls, coord: Axial) -> AxialPoint:
        return cls(x=coord.x, z=coord.z)

    def to_coord(self) -> Axial:
        return Axial(self.x, self.z)


class CubePoint(BaseModel):
    """Serializable cube coordinate; rejects triples that do not sum to zero."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    x: int
    y: int
    z: int

    @model_validator(mode="before")
    @classmethod
    def _coerce_tuple(cls, value: object) -> Mapping[str, object] | object:
        return _coerce_sequence(value, ("x", "y", "z"))

    @model_validator(mode="after")
    def _check_invariant(self) -> CubePoint:
        if self.x + self.y + self.z != 0:
            raise ValueError("For cube coords, x + y + z must be 0")
        return self

    @classmethod
    def from_coord(cls, coord: Cube) -> CubePoint:
        return cls(x=coord.x, y=coord.y, z=coord.z)

    def to_coord(self) -> Cube:
        return Cube(self.x, self.y)
