"""Enumerating common map shapes.

These are conveniences for callers building maps; nothing else in the
package depends on a particular enumeration order.
"""

from __future__ import annotations

import logging

from numpy.random import Generator

from .arithmetic import hex_add, hex_direction, hex_neighbor, hex_scale
from .coords import Hex
from .layout import Layout

logger = logging.getLogger(__name__)

ORIGIN = Hex(0, 0, 0)


def hexagon_region(radius: int, center: Hex = ORIGIN) -> list[Hex]:
    """Return every hex within ``radius`` steps of ``center``, q-major."""

    if radius < 0:
        raise ValueError("radius must be non-negative")
    cells: list[Hex] = []
    for q in range(-radius, radius + 1):
        r1 = max(-radius, -q - radius)
        r2 = min(radius, -q + radius)
        for r in range(r1, r2 + 1):
            cells.append(hex_add(center, Hex(q, r, -q - r)))
    logger.debug("Hexagon region of radius %d has %d cells", radius, len(cells))
    return cells


def parallelogram_region(q1: int, q2: int, r1: int, r2: int) -> list[Hex]:
    return [Hex(q, r, -q - r) for q in range(q1, q2 + 1) for r in range(r1, r2 + 1)]


def rectangle_region(layout: Layout, columns: int, rows: int) -> list[Hex]:
    """Return the offset rectangle ``0..columns`` x ``0..rows`` (inclusive).

    The rectangle follows ``layout``'s offset scheme, so it lines up on
    screen for both orientations and either parity.
    """

    return [
        layout.offset_to_hex(col, row)
        for col in range(columns + 1)
        for row in range(rows + 1)
    ]


def hex_ring(center: Hex, radius: int) -> list[Hex]:
    if radius < 0:
        raise ValueError("radius must be non-negative")
    if radius == 0:
        return [center]
    cells: list[Hex] = []
    h = hex_add(center, hex_scale(hex_direction(4), radius))
    for side in range(6):
        for _ in range(radius):
            cells.append(h)
            h = hex_neighbor(h, side)
    return cells


def hex_spiral(center: Hex, radius: int) -> list[Hex]:
    if radius < 0:
        raise ValueError("radius must be non-negative")
    cells = [center]
    for k in range(1, radius + 1):
        cells.extend(hex_ring(center, k))
    return cells


def sample_hexes(rng: Generator, count: int, radius: int, center: Hex = ORIGIN) -> list[Hex]:
    """Draw ``count`` hexes uniformly (with replacement) from a hexagon region."""

    if count < 0:
        raise ValueError("count must be non-negative")
    cells = hexagon_region(radius, center)
    picks = rng.integers(0, len(cells), size=count)
    return [cells[int(i)] for i in picks]


__all__ = [
    "ORIGIN",
    "hex_ring",
    "hex_spiral",
    "hexagon_region",
    "parallelogram_region",
    "rectangle_region",
    "sample_hexes",
]
