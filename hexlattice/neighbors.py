from __future__ import annotations

from typing import Mapping

from .coords import Hex, HexDirection

SIDE_DIRECTIONS: tuple[HexDirection, ...] = (
    HexDirection.SIDE_X_POS,
    HexDirection.SIDE_X_NEG,
    HexDirection.SIDE_Y_POS,
    HexDirection.SIDE_Y_NEG,
    HexDirection.SIDE_Z_POS,
    HexDirection.SIDE_Z_NEG,
)

DIAGONAL_DIRECTIONS: tuple[HexDirection, ...] = (
    HexDirection.DIAG_X_POS,
    HexDirection.DIAG_X_NEG,
    HexDirection.DIAG_Y_POS,
    HexDirection.DIAG_Y_NEG,
    HexDirection.DIAG_Z_POS,
    HexDirection.DIAG_Z_NEG,
)

DIRECTION_VECTORS: Mapping[HexDirection, Hex] = {
    HexDirection.UNDEFINED: Hex(0, 0),
    HexDirection.SIDE_X_POS: Hex(+1, 0),
    HexDirection.SIDE_X_NEG: Hex(-1, 0),
    HexDirection.SIDE_Y_POS: Hex(0, +1),
    HexDirection.SIDE_Y_NEG: Hex(0, -1),
    HexDirection.SIDE_Z_POS: Hex(+1, -1),
    HexDirection.SIDE_Z_NEG: Hex(-1, +1),
    HexDirection.DIAG_X_POS: Hex(+1, +1),
    HexDirection.DIAG_X_NEG: Hex(-1, -1),
    HexDirection.DIAG_Y_POS: Hex(-1, +2),
    HexDirection.DIAG_Y_NEG: Hex(+1, -2),
    HexDirection.DIAG_Z_POS: Hex(+2, -1),
    HexDirection.DIAG_Z_NEG: Hex(-2, +1),
}

_SIDE_SET = frozenset(SIDE_DIRECTIONS)
_DIAGONAL_SET = frozenset(DIAGONAL_DIRECTIONS)


def vector_for(direction: object) -> Hex:
    """Displacement for ``direction``; zero for undefined or unknown values."""

    try:
        return DIRECTION_VECTORS.get(direction, Hex.zero())  # type: ignore[call-overload]
    except TypeError:
        # unhashable input
        return Hex.zero()


def is_side(direction: object) -> bool:
    try:
        return direction in _SIDE_SET
    except TypeError:
        return False


def is_diagonal(direction: object) -> bool:
    try:
        return direction in _DIAGONAL_SET
    except TypeError:
        return False


def neighbor(origin: Hex, direction: object) -> Hex:
    return origin.add(vector_for(direction))


def side_neighbor(origin: Hex, direction: object) -> Hex:
    """Side neighbour of ``origin``, or the zero coordinate for non-side input.

    Returns ``Hex.zero()`` rather than ``origin`` so callers can tell a
    rejected direction apart from a zero displacement.
    """

    if not is_side(direction):
        return Hex.zero()
    return origin.add(vector_for(direction))


def adjacent_cells(origin: Hex) -> list[Hex]:
    return [origin.add(DIRECTION_VECTORS[d]) for d in SIDE_DIRECTIONS]


def diagonal_cells(origin: Hex) -> list[Hex]:
    return [origin.add(DIRECTION_VECTORS[d]) for d in DIAGONAL_DIRECTIONS]


__all__ = [
    "DIAGONAL_DIRECTIONS",
    "DIRECTION_VECTORS",
    "SIDE_DIRECTIONS",
    "adjacent_cells",
    "diagonal_cells",
    "is_diagonal",
    "is_side",
    "neighbor",
    "side_neighbor",
    "vector_for",
]
