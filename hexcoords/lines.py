"""Hex line drawing by sampling and rounding a straight segment."""

from __future__ import annotations

import logging

from .arithmetic import hex_distance
from .coords import FractionalHex, Hex
from .rounding import hex_lerp, hex_round

logger = logging.getLogger(__name__)

# Keeps q + r + s == 0 while pushing sample points off shared edges.
NUDGE = (1e-6, 1e-6, -2e-6)


def _nudge(h: Hex) -> FractionalHex:
    dq, dr, ds = NUDGE
    return FractionalHex(h.q + dq, h.r + dr, h.s + ds)


def _sample(a: Hex | FractionalHex, b: Hex | FractionalHex, n: int) -> list[Hex]:
    step = 1.0 / max(n, 1)
    return [hex_round(hex_lerp(a, b, i * step)) for i in range(n + 1)]


def hex_linedraw(a: Hex, b: Hex) -> list[Hex]:
    """Return the ``distance(a, b) + 1`` cells from ``a`` to ``b`` inclusive.

    Samples falling exactly on a cell edge are settled by the rounding
    tie-break; use :func:`hex_linedraw_nudged` when that matters.
    """

    n = hex_distance(a, b)
    logger.debug("Drawing line %s -> %s over %d steps", a, b, n)
    return _sample(a, b, n)


def hex_linedraw_nudged(a: Hex, b: Hex) -> list[Hex]:
    """Like :func:`hex_linedraw` but biases both endpoints off edges and corners."""

    n = hex_distance(a, b)
    logger.debug("Drawing nudged line %s -> %s over %d steps", a, b, n)
    return _sample(_nudge(a), _nudge(b), n)


__all__ = ["NUDGE", "hex_linedraw", "hex_linedraw_nudged"]
