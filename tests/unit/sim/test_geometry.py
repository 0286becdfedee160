import math

import numpy as np
import pytest

from evobirds.sim.geometry import TAU, bearing, forward, wrap_rotation, wrap_signed, wrap_unit


@pytest.mark.parametrize(
    "angle, expected",
    [
        (0.0, 0.0),
        (1.0, 1.0),
        (TAU + 1.0, 1.0),
        (-1.0, TAU - 1.0),
        (5 * TAU + 0.5, 0.5),
    ],
)
def test_wrap_rotation(angle, expected):
    assert wrap_rotation(angle) == pytest.approx(expected)


@pytest.mark.parametrize("angle", [-1e-18, TAU, -TAU, 3 * TAU])
def test_wrap_rotation_stays_below_tau(angle):
    wrapped = wrap_rotation(angle)
    assert 0.0 <= wrapped < TAU


@pytest.mark.parametrize(
    "angle, expected",
    [
        (0.0, 0.0),
        (math.pi, math.pi),
        (-math.pi, math.pi),
        (1.5 * math.pi, -0.5 * math.pi),
        (-1.5 * math.pi, 0.5 * math.pi),
        (TAU + 0.25, 0.25),
    ],
)
def test_wrap_signed(angle, expected):
    assert wrap_signed(angle) == pytest.approx(expected)


def test_wrap_unit():
    wrapped = wrap_unit(np.array([1.25, -0.25]))
    assert np.allclose(wrapped, [0.25, 0.75])
    edge = wrap_unit(np.array([-1e-18, 1.0]))
    assert np.all((edge >= 0.0) & (edge < 1.0))


def test_forward_and_bearing_agree():
    assert np.allclose(forward(0.0), [0.0, 1.0])
    assert np.allclose(forward(math.pi / 2), [-1.0, 0.0])
    for rotation in np.linspace(-3.0, 3.0, 13):
        assert bearing(forward(rotation)) == pytest.approx(rotation)
