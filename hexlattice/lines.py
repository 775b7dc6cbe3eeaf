from __future__ import annotations

from .coords import Hex, lerp


def distance(a: Hex, b: Hex) -> int:
    """Number of side steps between ``a`` and ``b``."""

    return a.distance_to(b)


def line(a: Hex, b: Hex) -> list[Hex]:
    """Cells on the straight line from ``a`` to ``b``, both ends included.

    The result has ``distance(a, b) + 1`` entries. Interpolation is exact at
    both ends, so the first entry is ``a`` and the last is ``b``.
    """

    length = distance(a, b)
    steps = max(length, 1)
    return [lerp(a, b, i / steps) for i in range(length + 1)]


__all__ = ["distance", "line"]
