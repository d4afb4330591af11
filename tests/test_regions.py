import pytest
from numpy.random import default_rng

from hexcoords import (
    Hex,
    Layout,
    OffsetCoord,
    Parity,
    Point,
    hex_distance,
    hex_ring,
    hex_spiral,
    hexagon_region,
    parallelogram_region,
    rectangle_region,
    sample_hexes,
)


@pytest.mark.parametrize("radius", [0, 1, 2, 5])
def test_hexagon_region_size(radius: int):
    cells = hexagon_region(radius)
    assert len(cells) == 3 * radius * (radius + 1) + 1
    assert len(set(cells)) == len(cells)
    assert all(hex_distance(Hex(0, 0, 0), h) <= radius for h in cells)


def test_hexagon_region_around_center():
    center = Hex(10, -4, -6)
    cells = hexagon_region(2, center)
    assert center in cells
    assert all(hex_distance(center, h) <= 2 for h in cells)


def test_hexagon_region_rejects_negative_radius():
    with pytest.raises(ValueError):
        hexagon_region(-1)


def test_parallelogram_region():
    cells = parallelogram_region(-1, 2, 0, 3)
    assert len(cells) == 16
    assert Hex(-1, 0, 1) in cells
    assert Hex(2, 3, -5) in cells


@pytest.mark.parametrize(
    "layout",
    [
        Layout.flat(Point(50, 50), Point(100, 100)),
        Layout.flat(Point(50, 50), Point(100, 100), Parity.ODD),
        Layout.pointy(Point(50, 50), Point(100, 100)),
        Layout.pointy(Point(50, 50), Point(100, 100), Parity.ODD),
    ],
)
def test_rectangle_region_covers_offset_rectangle(layout: Layout):
    cells = rectangle_region(layout, 5, 5)
    assert len(cells) == 36
    offsets = {layout.hex_to_offset(h) for h in cells}
    assert offsets == {OffsetCoord(c, r) for c in range(6) for r in range(6)}


@pytest.mark.parametrize("radius", [1, 2, 4])
def test_ring(radius: int):
    center = Hex(1, -3, 2)
    ring = hex_ring(center, radius)
    assert len(ring) == 6 * radius
    assert len(set(ring)) == len(ring)
    assert all(hex_distance(center, h) == radius for h in ring)
    # Consecutive ring cells are adjacent.
    for a, b in zip(ring, ring[1:] + ring[:1]):
        assert hex_distance(a, b) == 1


def test_ring_of_radius_zero():
    assert hex_ring(Hex(0, 0, 0), 0) == [Hex(0, 0, 0)]


def test_spiral_matches_hexagon_region():
    center = Hex(-2, 2, 0)
    spiral = hex_spiral(center, 3)
    assert spiral[0] == center
    assert set(spiral) == set(hexagon_region(3, center))
    assert len(spiral) == 37


def test_sample_hexes_is_seeded():
    a = sample_hexes(default_rng(5), 25, radius=4)
    b = sample_hexes(default_rng(5), 25, radius=4)
    assert a == b
    assert len(a) == 25
    assert all(hex_distance(Hex(0, 0, 0), h) <= 4 for h in a)


def test_sample_hexes_rejects_negative_count():
    with pytest.raises(ValueError):
        sample_hexes(default_rng(0), -1, radius=2)


def test_spiral_rejects_negative_radius():
    with pytest.raises(ValueError):
        hex_spiral(Hex(0, 0, 0), -1)
