"""Vectorised layout math for renderers that handle many cells at once."""

from __future__ import annotations

from typing import Iterable

import numpy as np

from .coords import Hex
from .layout import Layout
from .points import Point


def _hex_array(hexes: Iterable[Hex]) -> np.ndarray:
    return np.array([(h.q, h.r, h.s) for h in hexes], dtype=np.int64).reshape(-1, 3)


def hex_to_pixel_array(layout: Layout, hexes: Iterable[Hex]) -> np.ndarray:
    """Return an ``(n, 2)`` float array of cell centers."""

    M = layout.orientation.matrix
    cube = _hex_array(hexes).astype(np.float64)
    q, r = cube[:, 0], cube[:, 1]
    x = (M.f0 * q + M.f1 * r) * layout.size.x + layout.origin.x
    y = (M.f2 * q + M.f3 * r) * layout.size.y + layout.origin.y
    return np.column_stack((x, y))


def polygon_corners_array(layout: Layout, hexes: Iterable[Hex]) -> np.ndarray:
    """Return an ``(n, 6, 2)`` float array of corners in corner order."""

    centers = hex_to_pixel_array(layout, hexes)
    offsets = np.array([(p.x, p.y) for p in map(layout.hex_corner_offset, range(6))])
    return centers[:, np.newaxis, :] + offsets[np.newaxis, :, :]


def round_cube_array(frac: np.ndarray) -> np.ndarray:
    """Apply :func:`hexcoords.rounding.hex_round` row-wise to an ``(n, 3)`` array."""

    rounded = np.copysign(np.floor(np.abs(frac) + 0.5), frac)
    diff = np.abs(rounded - frac)
    dq, dr, ds = diff[:, 0], diff[:, 1], diff[:, 2]
    fix_q = (dq > dr) & (dq > ds)
    fix_r = ~fix_q & (dr > ds)
    fix_s = ~fix_q & ~fix_r
    q, r, s = rounded[:, 0].copy(), rounded[:, 1].copy(), rounded[:, 2].copy()
    q[fix_q] = -r[fix_q] - s[fix_q]
    r[fix_r] = -q[fix_r] - s[fix_r]
    s[fix_s] = -q[fix_s] - r[fix_s]
    return np.column_stack((q, r, s)).astype(np.int64)


def pixel_to_hex_array(layout: Layout, points: Iterable[Point]) -> np.ndarray:
    """Return an ``(n, 3)`` int array of the cells under ``points``."""

    M = layout.orientation.matrix
    xy = np.array([(p.x, p.y) for p in points], dtype=np.float64).reshape(-1, 2)
    px = (xy[:, 0] - layout.origin.x) / layout.size.x
    py = (xy[:, 1] - layout.origin.y) / layout.size.y
    q = M.b0 * px + M.b1 * py
    r = M.b2 * px + M.b3 * py
    return round_cube_array(np.column_stack((q, r, -q - r)))


def hexes_from_array(cube: np.ndarray) -> list[Hex]:
    return [Hex(int(q), int(r), int(s)) for q, r, s in cube]


__all__ = [
    "hex_to_pixel_array",
    "hexes_from_array",
    "pixel_to_hex_array",
    "polygon_corners_array",
    "round_cube_array",
]
