import math

import numpy as np
import pytest

from hexlattice import (
    Hex,
    ProjectionSettings,
    disk,
    from_cartesian,
    from_cartesian_array,
    from_tuple,
    to_cartesian,
    to_cartesian_array,
    to_tuple,
)


def test_tuple_conversion():
    assert to_tuple(Hex(4, -9)) == (4, -9)
    assert from_tuple((4, -9)) == Hex(4, -9)


def test_projection_formula():
    px, py = to_cartesian(Hex(1, 2))
    assert math.isclose(px, 2.0)
    assert math.isclose(py, math.sqrt(3.0))


@pytest.mark.parametrize("h", disk(Hex(0, 0), 3) + [Hex(-40, 17)])
def test_projection_inverse_exact_on_lattice(h: Hex):
    assert from_cartesian(*to_cartesian(h)) == h


def test_inverse_snaps_nearby_points():
    px, py = to_cartesian(Hex(2, -1))
    assert from_cartesian(px + 0.1, py - 0.1) == Hex(2, -1)


def test_projection_settings_scale_and_origin():
    settings = ProjectionSettings(scale=10.0, origin_x=5.0, origin_y=-3.0)
    px, py = to_cartesian(Hex(1, 0), settings)
    assert math.isclose(px, 15.0)
    assert math.isclose(py, -3.0)
    assert from_cartesian(px, py, settings) == Hex(1, 0)


def test_bulk_projection_matches_scalar():
    cells = disk(Hex(1, -1), 2)
    points = to_cartesian_array(cells)
    assert points.shape == (len(cells), 2)
    for cell, (px, py) in zip(cells, points):
        sx, sy = to_cartesian(cell)
        assert math.isclose(px, sx, abs_tol=1e-12)
        assert math.isclose(py, sy, abs_tol=1e-12)
    assert from_cartesian_array(points) == cells


def test_bulk_projection_with_settings():
    settings = ProjectionSettings(scale=2.5, origin_x=1.0, origin_y=1.0)
    cells = [Hex(0, 0), Hex(-3, 2), Hex(5, -5)]
    points = to_cartesian_array(cells, settings)
    assert from_cartesian_array(points, settings) == cells


def test_bulk_projection_empty():
    assert to_cartesian_array([]).shape == (0, 2)
    assert from_cartesian_array(np.empty((0, 2))) == []


def test_bulk_rounding_matches_scalar():
    from hexlattice.conversions import _round_half_away_array
    from hexlattice.coords import round_half_away

    values = np.array([0.5, -0.5, 2.5, -2.5, 0.49999999999999994, -1.6, 3.2])
    rounded = _round_half_away_array(values)
    assert rounded.tolist() == [round_half_away(v) for v in values.tolist()]
    assert rounded.tolist() == [1, -1, 3, -3, 0, -2, 3]
