"""
Multi-source breadth-first flood fill over the unbounded lattice.

The fill grows one layer per step: layer ``i`` holds the cells first reached
after exactly ``i`` side steps from the nearest source. A cell is never
entered twice and obstacles are never entered at all.

Usage:
    distances = flood_fill([Hex(0, 0)], 3, obstacles={Hex(1, 0)})
    layers = flood_fill_layers([Hex(0, 0), Hex(5, 0)], 2)
"""

from __future__ import annotations

from typing import Iterable, Iterator

from .config import EnumerationLimits
from .coords import Hex
from .errors import InvalidArgumentError
from .logging import get_logger
from .neighbors import adjacent_cells

logger = get_logger(__name__)


def _iter_layers(
    sources: Iterable[Hex],
    max_distance: int,
    blocked: frozenset[Hex],
    limits: EnumerationLimits | None,
) -> Iterator[list[Hex]]:
    if max_distance < 0:
        raise InvalidArgumentError(
            f"max_distance must be non-negative, got {max_distance}"
        )
    if limits is not None:
        limits.check_flood_distance(max_distance)

    # dict.fromkeys keeps first-seen order while collapsing duplicates.
    seeds = list(dict.fromkeys(sources))
    if not seeds:
        raise InvalidArgumentError("flood fill needs at least one source")

    # Sources seed layer 0 even when they are also obstacles.
    visited: set[Hex] = set(seeds)
    frontier = seeds
    yield frontier

    for _ in range(max_distance):
        layer: list[Hex] = []
        for cell in frontier:
            for candidate in adjacent_cells(cell):
                if candidate in visited or candidate in blocked:
                    continue
                visited.add(candidate)
                layer.append(candidate)
        if not layer:
            return
        yield layer
        frontier = layer


def flood_fill_layers(
    sources: Iterable[Hex],
    max_distance: int,
    obstacles: Iterable[Hex] | None = None,
    *,
    limits: EnumerationLimits | None = None,
) -> list[list[Hex]]:
    """Return the fill as layers; ``layers[i]`` is everything first reached at ``i``.

    Trailing empty layers are omitted, so ``len(layers) - 1`` is the furthest
    distance actually reached.
    """

    blocked = frozenset(obstacles) if obstacles is not None else frozenset()
    layers = list(_iter_layers(sources, max_distance, blocked, limits))
    logger.debug(
        "flood_fill.complete",
        sources=len(layers[0]),
        max_distance=max_distance,
        obstacles=len(blocked),
        reached=sum(len(layer) for layer in layers),
        layers=len(layers),
    )
    return layers


def flood_fill(
    sources: Iterable[Hex],
    max_distance: int,
    obstacles: Iterable[Hex] | None = None,
    *,
    limits: EnumerationLimits | None = None,
) -> dict[Hex, int]:
    """Map every reachable cell to its step count from the nearest source."""

    layers = flood_fill_layers(sources, max_distance, obstacles, limits=limits)
    return {cell: depth for depth, layer in enumerate(layers) for cell in layer}


def flood_fill_from(
    origin: Hex,
    max_distance: int,
    obstacles: Iterable[Hex] | None = None,
    *,
    limits: EnumerationLimits | None = None,
) -> dict[Hex, int]:
    return flood_fill([origin], max_distance, obstacles, limits=limits)


__all__ = ["flood_fill", "flood_fill_from", "flood_fill_layers"]
