from __future__ import annotations

from math import sqrt
from typing import Iterable

import numpy as np
from numpy.typing import ArrayLike, NDArray

from .config import ProjectionSettings
from .coords import Hex, round_half_away

SQRT3_OVER_2 = sqrt(3.0) / 2.0


def to_tuple(h: Hex) -> tuple[int, int]:
    return h.as_tuple()


def from_tuple(pair: tuple[int, int]) -> Hex:
    return Hex.from_tuple(pair)


def to_cartesian(
    h: Hex, projection: ProjectionSettings | None = None
) -> tuple[float, float]:
    """Project ``h`` to the plane as ``(x + y/2, sqrt(3)/2 * y)``."""

    px = h.x + 0.5 * h.y
    py = SQRT3_OVER_2 * h.y
    if projection is None:
        return px, py
    return (
        px * projection.scale + projection.origin_x,
        py * projection.scale + projection.origin_y,
    )


def from_cartesian(
    px: float, py: float, projection: ProjectionSettings | None = None
) -> Hex:
    """Inverse of :func:`to_cartesian`.

    Solves for ``y`` first and rounds it, then solves for ``x`` using the
    rounded ``y``. Exact for points produced by :func:`to_cartesian`;
    approximate for arbitrary points.
    """

    if projection is not None:
        px = (px - projection.origin_x) / projection.scale
        py = (py - projection.origin_y) / projection.scale
    y = round_half_away(py / SQRT3_OVER_2)
    x = round_half_away(px - 0.5 * y)
    return Hex(x, y)


def _round_half_away_array(values: NDArray[np.float64]) -> NDArray[np.int64]:
    whole = np.trunc(values)
    ties = np.abs(values - whole) == 0.5
    return np.where(ties, whole + np.sign(values), np.round(values)).astype(np.int64)


def to_cartesian_array(
    cells: Iterable[Hex], projection: ProjectionSettings | None = None
) -> NDArray[np.float64]:
    """Project many cells at once; returns an ``(n, 2)`` float array."""

    axial = np.array([h.as_tuple() for h in cells], dtype=np.float64).reshape(-1, 2)
    points = np.empty_like(axial)
    points[:, 0] = axial[:, 0] + 0.5 * axial[:, 1]
    points[:, 1] = SQRT3_OVER_2 * axial[:, 1]
    if projection is not None:
        points *= projection.scale
        points += (projection.origin_x, projection.origin_y)
    return points


def from_cartesian_array(
    points: ArrayLike, projection: ProjectionSettings | None = None
) -> list[Hex]:
    """Inverse of :func:`to_cartesian_array` for an ``(n, 2)`` array of points."""

    plane = np.asarray(points, dtype=np.float64).reshape(-1, 2)
    if projection is not None:
        plane = (plane - (projection.origin_x, projection.origin_y)) / projection.scale
    ys = _round_half_away_array(plane[:, 1] / SQRT3_OVER_2)
    xs = _round_half_away_array(plane[:, 0] - 0.5 * ys)
    return [Hex(int(x), int(y)) for x, y in zip(xs, ys)]


__all__ = [
    "SQRT3_OVER_2",
    "from_cartesian",
    "from_cartesian_array",
    "from_tuple",
    "to_cartesian",
    "to_cartesian_array",
    "to_tuple",
]
