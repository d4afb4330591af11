"""Interpolation and rounding of fractional cube coordinates."""

from __future__ import annotations

from math import copysign, floor

from .coords import FractionalHex, Hex


def round_half_away(x: float) -> float:
    """Round to the nearest integer, sending exact halves away from zero.

    Python's :func:`round` sends halves to the nearest even integer, which
    would change which axis wins the tie-break in :func:`hex_round`.
    """

    return copysign(floor(abs(x) + 0.5), x)


def hex_round(h: FractionalHex) -> Hex:
    """Snap ``h`` to the containing cell.

    Each axis is rounded independently and the axis with the largest rounding
    error is recomputed from the other two.  Ties go to ``q`` only when its
    error is strictly largest, then to ``r`` over ``s``, otherwise ``s``.
    """

    q, r, s = round_half_away(h.q), round_half_away(h.r), round_half_away(h.s)
    q_diff, r_diff, s_diff = abs(q - h.q), abs(r - h.r), abs(s - h.s)
    if q_diff > r_diff and q_diff > s_diff:
        q = -r - s
    elif r_diff > s_diff:
        r = -q - s
    else:
        s = -q - r
    return Hex(int(q), int(r), int(s))


def lerp(a: float, b: float, t: float) -> float:
    # a * (1 - t) + b * t lands exactly on b at t == 1
    return a * (1 - t) + b * t


def hex_lerp(a: Hex | FractionalHex, b: Hex | FractionalHex, t: float) -> FractionalHex:
    return FractionalHex(
        lerp(float(a.q), float(b.q), t),
        lerp(float(a.r), float(b.r), t),
        lerp(float(a.s), float(b.s), t),
    )


__all__ = ["hex_lerp", "hex_round", "lerp", "round_half_away"]
