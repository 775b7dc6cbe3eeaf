from __future__ import annotations

from typing import Callable, Mapping

from .coords import Hex, RotationDirection

_ROTATIONS: Mapping[RotationDirection, Callable[[Hex], Hex]] = {
    # (x, y, z) -> (-z, -x, -y)
    RotationDirection.CLOCKWISE: lambda h: Hex(-h.z, -h.x),
    # (x, y, z) -> (-y, -z, -x)
    RotationDirection.COUNTER_CLOCKWISE: lambda h: Hex(-h.y, -h.z),
}


def _identity(coord: Hex) -> Hex:
    return coord


def rotate_origin(coord: Hex, direction: object) -> Hex:
    """Rotate ``coord`` one 60 degree step about ``(0, 0)``.

    Clockwise maps ``(x, y, z)`` to ``(-z, -x, -y)``; counter-clockwise maps
    it to ``(-y, -z, -x)``. Anything else leaves ``coord`` unchanged.
    """

    try:
        rotation = _ROTATIONS.get(direction, _identity)  # type: ignore[call-overload]
    except TypeError:
        # unhashable input
        rotation = _identity
    return rotation(coord)


def rotate_about(coord: Hex, focal: Hex, direction: object) -> Hex:
    return rotate_origin(coord.sub(focal), direction).add(focal)


def rotate_steps(coord: Hex, focal: Hex, steps: int) -> Hex:
    """Rotate about ``focal`` by ``steps`` sixths of a turn.

    Positive steps turn clockwise, negative steps counter-clockwise.
    """

    if steps == 0:
        return coord
    direction = (
        RotationDirection.CLOCKWISE if steps > 0 else RotationDirection.COUNTER_CLOCKWISE
    )
    rotating = coord.sub(focal)
    for _ in range(abs(steps) % 6):
        rotating = rotate_origin(rotating, direction)
    return rotating.add(focal)


__all__ = ["rotate_about", "rotate_origin", "rotate_steps"]
