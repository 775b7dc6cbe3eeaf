"""Disk, ring and spiral enumeration around a center cell."""

from __future__ import annotations

from .config import EnumerationLimits
from .coords import Hex, HexDirection, RotationDirection
from .errors import InvalidArgumentError
from .neighbors import vector_for
from .rotation import rotate_origin

# Ring walks start on this side and turn clockwise.
RING_START_DIRECTION = HexDirection.SIDE_X_POS


def _validate_radius(radius: int, limits: EnumerationLimits | None) -> None:
    if radius < 0:
        raise InvalidArgumentError(f"radius must be non-negative, got {radius}")
    if limits is not None:
        limits.check_radius(radius)


def disk(
    center: Hex, radius: int, *, limits: EnumerationLimits | None = None
) -> list[Hex]:
    """Every cell within ``radius`` steps of ``center``, ``center`` included.

    Yields ``3 * radius**2 + 3 * radius + 1`` cells.
    """

    _validate_radius(radius, limits)
    cells: list[Hex] = []
    for dx in range(-radius, radius + 1):
        low = max(-radius, -dx - radius)
        high = min(radius, -dx + radius)
        for dy in range(low, high + 1):
            cells.append(Hex(center.x + dx, center.y + dy))
    return cells


def ring(
    center: Hex, radius: int, *, limits: EnumerationLimits | None = None
) -> list[Hex]:
    """Every cell exactly ``radius`` steps from ``center``, in walking order.

    Radius 0 gives ``[center]``; otherwise ``6 * radius`` cells, each once.
    """

    _validate_radius(radius, limits)
    if radius == 0:
        return [center]

    step = vector_for(RING_START_DIRECTION)
    position = center.add(step.scale(radius))
    step = rotate_origin(step, RotationDirection.CLOCKWISE)

    cells: list[Hex] = []
    for _ in range(6):
        step = rotate_origin(step, RotationDirection.CLOCKWISE)
        for _ in range(radius):
            cells.append(position)
            position = position.add(step)
    return cells


def spiral(
    center: Hex, radius: int, *, limits: EnumerationLimits | None = None
) -> list[Hex]:
    """Disk cells ordered ring by ring, starting from ``center``."""

    _validate_radius(radius, limits)
    cells: list[Hex] = []
    for k in range(radius + 1):
        cells.extend(ring(center, k))
    return cells


__all__ = ["RING_START_DIRECTION", "disk", "ring", "spiral"]
