import pytest
from numpy.random import default_rng

from hexcoords import (
    Hex,
    hex_direction,
    hex_distance,
    hex_linedraw,
    hex_linedraw_nudged,
    hex_scale,
    sample_hexes,
)


@pytest.mark.parametrize("draw", [hex_linedraw, hex_linedraw_nudged])
def test_line_length_and_endpoints(draw):
    hexes = sample_hexes(default_rng(42), 80, radius=15)
    for a, b in zip(hexes[::2], hexes[1::2]):
        line = draw(a, b)
        assert len(line) == hex_distance(a, b) + 1
        assert line[0] == a
        assert line[-1] == b


@pytest.mark.parametrize("draw", [hex_linedraw, hex_linedraw_nudged])
def test_degenerate_line_is_single_cell(draw):
    h = Hex(2, -5, 3)
    assert draw(h, h) == [h]


@pytest.mark.parametrize("draw", [hex_linedraw, hex_linedraw_nudged])
def test_straight_line_along_a_direction(draw):
    for i in range(6):
        b = hex_scale(hex_direction(i), 4)
        assert draw(Hex(0, 0, 0), b) == [hex_scale(hex_direction(i), k) for k in range(5)]


def test_line_along_edge_without_nudge():
    # The midpoint sits on the edge shared by (1, -1, 0) and (1, 0, -1);
    # the rounding tie-break settles it.
    assert hex_linedraw(Hex(0, 0, 0), Hex(2, -1, -1)) == [
        Hex(0, 0, 0),
        Hex(1, -1, 0),
        Hex(2, -1, -1),
    ]


def test_line_along_edge_with_nudge():
    assert hex_linedraw_nudged(Hex(0, 0, 0), Hex(2, -1, -1)) == [
        Hex(0, 0, 0),
        Hex(1, 0, -1),
        Hex(2, -1, -1),
    ]


def test_lines_are_repeatable():
    a, b = Hex(-4, 7, -3), Hex(6, -2, -4)
    assert hex_linedraw_nudged(a, b) == hex_linedraw_nudged(a, b)
    assert hex_linedraw(a, b) == hex_linedraw(a, b)


def test_line_is_a_fresh_list():
    a, b = Hex(0, 0, 0), Hex(3, -3, 0)
    first = hex_linedraw(a, b)
    first.append(Hex(9, -9, 0))
    assert len(hex_linedraw(a, b)) == 4
