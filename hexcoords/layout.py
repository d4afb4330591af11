"""Mapping between cube coordinates and pixel space.

The orientation matrices follow the usual Red Blob Games formulation: the
forward matrix ``f`` maps axial ``(q, r)`` to a unit-size pixel offset and the
backward matrix ``b`` is its inverse.  ``start_angle`` is measured in
multiples of 60 degrees and places corner 0.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from math import cos, pi, sin, sqrt

from .conversions import hex_to_offset, offset_to_hex
from .coords import FractionalHex, Hex, OffsetAxis, OffsetCoord, OffsetScheme, Parity
from .points import Point


@dataclass(frozen=True, slots=True)
class Orientation:
    f0: float; f1: float; f2: float; f3: float  # axial(q,r) -> pixel
    b0: float; b1: float; b2: float; b3: float  # pixel -> axial
    start_angle: float                           # multiples of 60°


# Float division throughout; 3 / 2 must stay 1.5.
LAYOUT_FLAT = Orientation(
    f0=3.0 / 2.0, f1=0.0,
    f2=sqrt(3.0) / 2.0, f3=sqrt(3.0),
    b0=2.0 / 3.0, b1=0.0,
    b2=-1.0 / 3.0, b3=sqrt(3.0) / 3.0,
    start_angle=0.0,
)
LAYOUT_POINTY = Orientation(
    f0=sqrt(3.0), f1=sqrt(3.0) / 2.0,
    f2=0.0, f3=3.0 / 2.0,
    b0=sqrt(3.0) / 3.0, b1=-1.0 / 3.0,
    b2=0.0, b3=2.0 / 3.0,
    start_angle=0.5,
)


class OrientationKind(str, Enum):
    FLAT = "flat"
    POINTY = "pointy"

    @property
    def matrix(self) -> Orientation:
        if self is OrientationKind.FLAT:
            return LAYOUT_FLAT
        return LAYOUT_POINTY

    @property
    def offset_axis(self) -> OffsetAxis:
        """Flat-top grids shove columns, pointy-top grids shove rows."""

        if self is OrientationKind.FLAT:
            return OffsetAxis.Q
        return OffsetAxis.R


@dataclass(frozen=True, slots=True)
class Layout:
    """Binds an orientation, a per-axis pixel size and an origin.

    ``size`` is the distance from a hex center to its corners along each
    axis, so ``Point(50, 30)`` gives squashed hexes.  ``parity`` selects which
    alternate columns (flat) or rows (pointy) are shoved when using offset
    coordinates.
    """

    orientation: OrientationKind
    size: Point
    origin: Point
    parity: Parity = Parity.EVEN

    def __post_init__(self) -> None:
        object.__setattr__(self, "orientation", OrientationKind(self.orientation))
        object.__setattr__(self, "parity", Parity.coerce(self.parity))
        if self.size.x == 0 or self.size.y == 0:
            raise ValueError(f"layout size must be non-zero on both axes, got {self.size}")

    @classmethod
    def flat(cls, size: Point, origin: Point, parity: Parity | int = Parity.EVEN) -> Layout:
        return cls(OrientationKind.FLAT, size, origin, Parity.coerce(parity))

    @classmethod
    def pointy(cls, size: Point, origin: Point, parity: Parity | int = Parity.EVEN) -> Layout:
        return cls(OrientationKind.POINTY, size, origin, Parity.coerce(parity))

    # --- hex <-> pixel --------------------------------------------------------

    def hex_to_pixel(self, h: Hex) -> Point:
        M = self.orientation.matrix
        x = (M.f0 * h.q + M.f1 * h.r) * self.size.x
        y = (M.f2 * h.q + M.f3 * h.r) * self.size.y
        return Point(x + self.origin.x, y + self.origin.y)

    def pixel_to_hex(self, p: Point) -> FractionalHex:
        """Return the fractional cube coordinate under ``p``.

        Pass the result through :func:`hexcoords.rounding.hex_round` to get
        the cell.
        """

        M = self.orientation.matrix
        px = (p.x - self.origin.x) / self.size.x
        py = (p.y - self.origin.y) / self.size.y
        q = M.b0 * px + M.b1 * py
        r = M.b2 * px + M.b3 * py
        return FractionalHex(q, r, -q - r)

    # --- corners --------------------------------------------------------------

    def hex_corner_offset(self, corner: int) -> Point:
        angle = 2.0 * pi * (self.orientation.matrix.start_angle + corner) / 6
        return Point(self.size.x * cos(angle), self.size.y * sin(angle))

    def polygon_corners(self, h: Hex) -> tuple[Point, ...]:
        return self.points(h)[1]

    def points(self, h: Hex) -> tuple[Point, tuple[Point, ...]]:
        """Return the center of ``h`` and its six corners in corner order."""

        center = self.hex_to_pixel(h)
        corners = []
        for i in range(6):
            offset = self.hex_corner_offset(i)
            corners.append(Point(center.x + offset.x, center.y + offset.y))
        return center, tuple(corners)

    # --- offset coordinates ---------------------------------------------------

    @property
    def offset_scheme(self) -> OffsetScheme:
        return OffsetScheme.select(self.orientation.offset_axis, self.parity)

    def offset_to_hex(self, col: int, row: int) -> Hex:
        return offset_to_hex(OffsetCoord(col, row), self.offset_scheme)

    def hex_to_offset(self, h: Hex) -> OffsetCoord:
        return hex_to_offset(h, self.offset_scheme)


__all__ = ["LAYOUT_FLAT", "LAYOUT_POINTY", "Layout", "Orientation", "OrientationKind"]
