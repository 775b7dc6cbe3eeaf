import numpy as np
import pytest

from hexlattice import Hex, RotationDirection, rotate_about, rotate_origin, rotate_steps

CW = RotationDirection.CLOCKWISE
CCW = RotationDirection.COUNTER_CLOCKWISE

SAMPLE = [Hex(1, 0), Hex(2, -1), Hex(-3, 5), Hex(0, 0), Hex(4, 4)]


def test_clockwise_formula():
    h = Hex(1, 2)  # z = -3
    assert rotate_origin(h, CW) == Hex(3, -1)


def test_counter_clockwise_formula():
    h = Hex(1, 2)
    assert rotate_origin(h, CCW) == Hex(-2, 3)


@pytest.mark.parametrize("h", SAMPLE)
@pytest.mark.parametrize("direction", [CW, CCW])
def test_six_steps_is_identity(h: Hex, direction: RotationDirection):
    rotated = h
    for _ in range(6):
        rotated = rotate_origin(rotated, direction)
    assert rotated == h


@pytest.mark.parametrize("h", SAMPLE)
def test_directions_are_inverse(h: Hex):
    assert rotate_origin(rotate_origin(h, CW), CCW) == h
    assert rotate_origin(rotate_origin(h, CCW), CW) == h


@pytest.mark.parametrize("direction", [RotationDirection.UNDEFINED, None, "sideways"])
def test_undefined_rotation_is_identity(direction: object):
    assert rotate_origin(Hex(3, -1), direction) == Hex(3, -1)
    assert rotate_about(Hex(3, -1), Hex(1, 1), direction) == Hex(3, -1)


def test_rotate_about_keeps_distance_to_focal():
    focal = Hex(2, 3)
    h = Hex(5, 1)
    rotated = rotate_about(h, focal, CW)
    assert rotated != h
    assert rotated.distance_to(focal) == h.distance_to(focal)
    assert rotate_about(focal, focal, CW) == focal


def test_rotate_steps():
    focal = Hex(-1, 2)
    h = Hex(3, 0)
    assert rotate_steps(h, focal, 0) == h
    assert rotate_steps(h, focal, 6) == h
    assert rotate_steps(h, focal, -12) == h
    assert rotate_steps(h, focal, 1) == rotate_about(h, focal, CW)
    assert rotate_steps(h, focal, -1) == rotate_about(h, focal, CCW)
    assert rotate_steps(h, focal, 7) == rotate_steps(h, focal, 1)
    assert rotate_steps(h, focal, 2) == rotate_steps(h, focal, -4)


@pytest.mark.parametrize("direction", [np.array([1, 2]), [RotationDirection.CLOCKWISE], {"cw": 1}])
def test_unhashable_rotation_is_identity(direction: object):
    assert rotate_origin(Hex(1, 0), direction) == Hex(1, 0)
    assert rotate_about(Hex(3, -1), Hex(1, 1), direction) == Hex(3, -1)
