from __future__ import annotations

from typing import Iterable

from .coords import Hex

# Counter-clockwise starting from "southeast" on a flat-top grid
# (from "east" on a pointy-top grid).
HEX_DIRECTIONS = (
    Hex(+1, 0, -1),
    Hex(+1, -1, 0),
    Hex(0, -1, +1),
    Hex(-1, 0, +1),
    Hex(-1, +1, 0),
    Hex(0, +1, -1),
)

HEX_DIAGONALS = (
    Hex(+2, -1, -1),
    Hex(+1, -2, +1),
    Hex(-1, -1, +2),
    Hex(-2, +1, +1),
    Hex(-1, +2, -1),
    Hex(+1, +1, -2),
)


def hex_add(a: Hex, b: Hex) -> Hex:
    return Hex(a.q + b.q, a.r + b.r, a.s + b.s)


def hex_subtract(a: Hex, b: Hex) -> Hex:
    return Hex(a.q - b.q, a.r - b.r, a.s - b.s)


def hex_scale(a: Hex, k: int) -> Hex:
    return Hex(a.q * k, a.r * k, a.s * k)


def hex_length(h: Hex) -> int:
    return (abs(h.q) + abs(h.r) + abs(h.s)) // 2


def hex_distance(a: Hex, b: Hex) -> int:
    return hex_length(hex_subtract(a, b))


def hex_direction(direction: int) -> Hex:
    """Return the unit vector for ``direction``; any integer wraps modulo 6."""

    return HEX_DIRECTIONS[direction % 6]


def hex_neighbor(h: Hex, direction: int) -> Hex:
    return hex_add(h, hex_direction(direction))


def hex_neighbors(h: Hex) -> Iterable[Hex]:
    for d in HEX_DIRECTIONS:
        yield hex_add(h, d)


def hex_diagonal(direction: int) -> Hex:
    return HEX_DIAGONALS[direction % 6]


def hex_diagonal_neighbor(h: Hex, direction: int) -> Hex:
    """Return the hex two steps away across the corner at ``direction``."""

    return hex_add(h, hex_diagonal(direction))


def hex_rotate_left(h: Hex) -> Hex:
    return Hex(-h.s, -h.q, -h.r)


def hex_rotate_right(h: Hex) -> Hex:
    return Hex(-h.r, -h.s, -h.q)


def hex_reflect_q(h: Hex) -> Hex:
    return Hex(h.q, h.s, h.r)


def hex_reflect_r(h: Hex) -> Hex:
    return Hex(h.s, h.r, h.q)


def hex_reflect_s(h: Hex) -> Hex:
    return Hex(h.r, h.q, h.s)


__all__ = [
    "HEX_DIAGONALS",
    "HEX_DIRECTIONS",
    "hex_add",
    "hex_diagonal",
    "hex_diagonal_neighbor",
    "hex_direction",
    "hex_distance",
    "hex_length",
    "hex_neighbor",
    "hex_neighbors",
    "hex_reflect_q",
    "hex_reflect_r",
    "hex_reflect_s",
    "hex_rotate_left",
    "hex_rotate_right",
    "hex_scale",
    "hex_subtract",
]
