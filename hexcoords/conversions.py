from __future__ import annotations

from typing import Iterable

from .arithmetic import HEX_DIRECTIONS, hex_add
from .coords import Hex, OffsetAxis, OffsetCoord, OffsetScheme, Parity

# In every formula below the numerator is even, so // is exact; floor
# division also keeps negative columns/rows on the right side of the shove.


def qoffset_from_cube(offset: Parity | int, h: Hex) -> OffsetCoord:
    offset = Parity.coerce(offset)
    col = h.q
    row = h.r + (h.q + offset * (h.q & 1)) // 2
    return OffsetCoord(col, row)


def qoffset_to_cube(offset: Parity | int, c: OffsetCoord) -> Hex:
    offset = Parity.coerce(offset)
    q = c.col
    r = c.row - (c.col + offset * (c.col & 1)) // 2
    return Hex(q, r, -q - r)


def roffset_from_cube(offset: Parity | int, h: Hex) -> OffsetCoord:
    offset = Parity.coerce(offset)
    col = h.q + (h.r + offset * (h.r & 1)) // 2
    row = h.r
    return OffsetCoord(col, row)


def roffset_to_cube(offset: Parity | int, c: OffsetCoord) -> Hex:
    offset = Parity.coerce(offset)
    q = c.col - (c.row + offset * (c.row & 1)) // 2
    r = c.row
    return Hex(q, r, -q - r)


def hex_to_offset(h: Hex, scheme: OffsetScheme) -> OffsetCoord:
    if scheme.axis is OffsetAxis.Q:
        return qoffset_from_cube(scheme.parity, h)
    if scheme.axis is OffsetAxis.R:
        return roffset_from_cube(scheme.parity, h)
    raise ValueError("Unknown offset scheme")


def offset_to_hex(c: OffsetCoord, scheme: OffsetScheme) -> Hex:
    if scheme.axis is OffsetAxis.Q:
        return qoffset_to_cube(scheme.parity, c)
    if scheme.axis is OffsetAxis.R:
        return roffset_to_cube(scheme.parity, c)
    raise ValueError("Unknown offset scheme")


def offset_neighbors(c: OffsetCoord, scheme: OffsetScheme) -> Iterable[OffsetCoord]:
    """Yield the six neighbors of ``c`` in cube direction order."""

    h = offset_to_hex(c, scheme)
    for d in HEX_DIRECTIONS:
        yield hex_to_offset(hex_add(h, d), scheme)


__all__ = [
    "hex_to_offset",
    "offset_neighbors",
    "offset_to_hex",
    "qoffset_from_cube",
    "qoffset_to_cube",
    "roffset_from_cube",
    "roffset_to_cube",
]
