"""Hexagonal grid coordinates: cube, offset and pixel conversions."""

import logging

from .arithmetic import (
    HEX_DIAGONALS,
    HEX_DIRECTIONS,
    hex_add,
    hex_diagonal,
    hex_diagonal_neighbor,
    hex_direction,
    hex_distance,
    hex_length,
    hex_neighbor,
    hex_neighbors,
    hex_reflect_q,
    hex_reflect_r,
    hex_reflect_s,
    hex_rotate_left,
    hex_rotate_right,
    hex_scale,
    hex_subtract,
)
from .conversions import (
    hex_to_offset,
    offset_neighbors,
    offset_to_hex,
    qoffset_from_cube,
    qoffset_to_cube,
    roffset_from_cube,
    roffset_to_cube,
)
from .coords import (
    FractionalHex,
    Hex,
    HexInvariantError,
    InvalidParityError,
    OffsetAxis,
    OffsetCoord,
    OffsetScheme,
    Parity,
)
from .layout import LAYOUT_FLAT, LAYOUT_POINTY, Layout, Orientation, OrientationKind
from .lines import hex_linedraw, hex_linedraw_nudged
from .points import Point, Vector2
from .regions import (
    hex_ring,
    hex_spiral,
    hexagon_region,
    parallelogram_region,
    rectangle_region,
    sample_hexes,
)
from .rounding import hex_lerp, hex_round, lerp
from .settings import LayoutSettings

__version__ = "0.0.1"

EVEN = Parity.EVEN
ODD = Parity.ODD

logging.getLogger(__name__).addHandler(logging.NullHandler())


def version() -> str:
    return __version__


__all__ = [
    "EVEN",
    "FractionalHex",
    "HEX_DIAGONALS",
    "HEX_DIRECTIONS",
    "Hex",
    "HexInvariantError",
    "InvalidParityError",
    "LAYOUT_FLAT",
    "LAYOUT_POINTY",
    "Layout",
    "LayoutSettings",
    "ODD",
    "OffsetAxis",
    "OffsetCoord",
    "OffsetScheme",
    "Orientation",
    "OrientationKind",
    "Parity",
    "Point",
    "Vector2",
    "hex_add",
    "hex_diagonal",
    "hex_diagonal_neighbor",
    "hex_direction",
    "hex_distance",
    "hex_length",
    "hex_lerp",
    "hex_linedraw",
    "hex_linedraw_nudged",
    "hex_neighbor",
    "hex_neighbors",
    "hex_reflect_q",
    "hex_reflect_r",
    "hex_reflect_s",
    "hex_ring",
    "hex_rotate_left",
    "hex_rotate_right",
    "hex_round",
    "hex_scale",
    "hex_spiral",
    "hex_subtract",
    "hex_to_offset",
    "hexagon_region",
    "lerp",
    "offset_neighbors",
    "offset_to_hex",
    "parallelogram_region",
    "qoffset_from_cube",
    "qoffset_to_cube",
    "rectangle_region",
    "roffset_from_cube",
    "roffset_to_cube",
    "sample_hexes",
    "version",
]
