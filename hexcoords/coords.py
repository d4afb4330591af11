"""Coordinate value types for hexagonal grids.

Cube coordinates (``Hex``) are the canonical representation; every other
addressing scheme converts through them.  ``FractionalHex`` only exists as an
intermediate for interpolation and pixel hit-testing and is rounded back to a
``Hex`` before being handed to callers.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class HexInvariantError(ValueError):
    """Raised when cube coordinates do not satisfy ``q + r + s == 0``."""


class InvalidParityError(ValueError):
    """Raised when an offset conversion receives a parity other than EVEN/ODD."""


@dataclass(frozen=True, slots=True)
class Hex:
    q: int
    r: int
    s: int

    def __post_init__(self) -> None:
        if self.q + self.r + self.s != 0:
            raise HexInvariantError(
                f"For cube coords, q + r + s must be 0 (got {self.q}, {self.r}, {self.s})"
            )

    @classmethod
    def from_axial(cls, q: int, r: int) -> Hex:
        return cls(q, r, -q - r)

    def __add__(self, other: object) -> Hex:
        if not isinstance(other, Hex):
            return NotImplemented
        from .arithmetic import hex_add

        return hex_add(self, other)

    def __sub__(self, other: object) -> Hex:
        if not isinstance(other, Hex):
            return NotImplemented
        from .arithmetic import hex_subtract

        return hex_subtract(self, other)

    def __mul__(self, k: object) -> Hex:
        if not isinstance(k, int) or isinstance(k, bool):
            return NotImplemented
        from .arithmetic import hex_scale

        return hex_scale(self, k)

    __rmul__ = __mul__


@dataclass(frozen=True, slots=True)
class FractionalHex:
    # q + r + s is only approximately zero here, so it is not checked.
    q: float
    r: float
    s: float


class Parity(int, Enum):
    """Which alternate columns (or rows) are shoved when using offset coords."""

    EVEN = +1
    ODD = -1

    @classmethod
    def coerce(cls, value: Parity | int | str) -> Parity:
        """Return the matching parity or raise :class:`InvalidParityError`."""

        if isinstance(value, Parity):
            return value
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                raise InvalidParityError(f"offset must be EVEN or ODD, got {value!r}") from None
        if isinstance(value, bool) or value not in (cls.EVEN.value, cls.ODD.value):
            raise InvalidParityError(f"offset must be EVEN (+1) or ODD (-1), got {value!r}")
        return cls(value)


class OffsetAxis(str, Enum):
    Q = "q"  # columns shoved, used with flat-top hexes
    R = "r"  # rows shoved, used with pointy-top hexes


class OffsetScheme(Enum):
    EVEN_Q = (OffsetAxis.Q, Parity.EVEN)
    ODD_Q = (OffsetAxis.Q, Parity.ODD)
    EVEN_R = (OffsetAxis.R, Parity.EVEN)
    ODD_R = (OffsetAxis.R, Parity.ODD)

    @property
    def axis(self) -> OffsetAxis:
        return self.value[0]

    @property
    def parity(self) -> Parity:
        return self.value[1]

    @classmethod
    def select(cls, axis: OffsetAxis, parity: Parity | int) -> OffsetScheme:
        """Return the scheme for ``axis`` shoved on ``parity`` lines."""

        return cls((axis, Parity.coerce(parity)))


@dataclass(frozen=True, slots=True)
class OffsetCoord:
    col: int
    row: int


__all__ = [
    "FractionalHex",
    "Hex",
    "HexInvariantError",
    "InvalidParityError",
    "OffsetAxis",
    "OffsetCoord",
    "OffsetScheme",
    "Parity",
]
