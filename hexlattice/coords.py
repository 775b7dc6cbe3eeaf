"""Cube coordinates for a hexagonal lattice and the algebra over them."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum


class HexDirection(str, Enum):
    """The twelve named lattice directions plus an explicit undefined value."""

    UNDEFINED = "undefined"

    SIDE_X_POS = "side_x_pos"
    SIDE_X_NEG = "side_x_neg"
    SIDE_Y_POS = "side_y_pos"
    SIDE_Y_NEG = "side_y_neg"
    SIDE_Z_POS = "side_z_pos"
    SIDE_Z_NEG = "side_z_neg"

    DIAG_X_POS = "diag_x_pos"
    DIAG_X_NEG = "diag_x_neg"
    DIAG_Y_POS = "diag_y_pos"
    DIAG_Y_NEG = "diag_y_neg"
    DIAG_Z_POS = "diag_z_pos"
    DIAG_Z_NEG = "diag_z_neg"


class RotationDirection(str, Enum):
    """Sense of a single 60 degree rotation step."""

    UNDEFINED = "undefined"
    CLOCKWISE = "clockwise"
    COUNTER_CLOCKWISE = "counter_clockwise"


def round_half_away(value: float) -> int:
    """Round ``value`` to the nearest integer, ties away from zero."""

    whole = math.trunc(value)
    if abs(value - whole) == 0.5:
        return whole + (1 if value > 0 else -1)
    return round(value)


@dataclass(frozen=True, slots=True)
class Hex:
    """Cube coordinate with ``x + y + z == 0``.

    Only ``x`` and ``y`` are stored by the caller; ``z`` is derived at
    construction and takes no part in equality or hashing.
    """

    x: int
    y: int
    z: int = field(init=False, compare=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "z", -self.x - self.y)

    @classmethod
    def zero(cls) -> Hex:
        return cls(0, 0)

    @classmethod
    def one(cls) -> Hex:
        return cls(1, 1)

    @classmethod
    def from_tuple(cls, pair: tuple[int, int]) -> Hex:
        x, y = pair
        return cls(int(x), int(y))

    def as_tuple(self) -> tuple[int, int]:
        return (self.x, self.y)

    @property
    def cube(self) -> tuple[int, int, int]:
        return (self.x, self.y, self.z)

    # --- Algebra --------------------------------------------------------------

    def add(self, other: Hex) -> Hex:
        return Hex(self.x + other.x, self.y + other.y)

    def sub(self, other: Hex) -> Hex:
        return Hex(self.x - other.x, self.y - other.y)

    def neg(self) -> Hex:
        return Hex(-self.x, -self.y)

    def scale(self, t: int | float) -> Hex:
        """Multiply by ``t``.

        Integer factors are exact. Real factors round ``x`` and ``y``
        independently (ties away from zero) and ``z`` follows from the
        rounded pair, so the cube invariant survives the rounding.
        """

        if isinstance(t, int):
            return Hex(self.x * t, self.y * t)
        return Hex(round_half_away(self.x * t), round_half_away(self.y * t))

    def lerp(self, other: Hex, t: float) -> Hex:
        return lerp(self, other, t)

    def distance_to(self, other: Hex) -> int:
        # dx + dy + dz == 0, so the sum of magnitudes is always even.
        return (
            abs(self.x - other.x) + abs(self.y - other.y) + abs(self.z - other.z)
        ) // 2

    # Operators delegate to the named methods above.

    def __add__(self, other: object) -> Hex:
        if not isinstance(other, Hex):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> Hex:
        if not isinstance(other, Hex):
            return NotImplemented
        return self.sub(other)

    def __neg__(self) -> Hex:
        return self.neg()

    def __mul__(self, t: object) -> Hex:
        if isinstance(t, bool) or not isinstance(t, (int, float)):
            return NotImplemented
        return self.scale(t)

    __rmul__ = __mul__

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


def add(a: Hex, b: Hex) -> Hex:
    return a.add(b)


def sub(a: Hex, b: Hex) -> Hex:
    return a.sub(b)


def neg(a: Hex) -> Hex:
    return a.neg()


def scale(coord: Hex, t: int | float) -> Hex:
    return coord.scale(t)


def lerp(a: Hex, b: Hex, t: float) -> Hex:
    """Linear interpolation from ``a`` (t=0) to ``b`` (t=1), rounded to a cell."""

    return a.add(b.sub(a).scale(t))


__all__ = [
    "Hex",
    "HexDirection",
    "RotationDirection",
    "add",
    "lerp",
    "neg",
    "round_half_away",
    "scale",
    "sub",
]
