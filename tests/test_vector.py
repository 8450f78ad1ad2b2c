import math

import numpy as np
import pytest
from pytest import approx

from flocking.vector import limit3, limit_vec, steer3, wrap_coordinate, wraparound


def test_limit_vec_leaves_short_vectors_untouched():
    v = np.array([0.1, 0.2, 0.2])
    assert np.array_equal(limit_vec(v, 0.5), v)
    # Exactly at the cap is not "over" it
    assert np.array_equal(limit_vec(v, 0.3 + 1e-15), v)


def test_limit_vec_caps_magnitude_and_keeps_direction():
    v = np.array([3.0, 4.0, 0.0])
    limited = limit_vec(v, 1.0)
    assert np.linalg.norm(limited) == approx(1.0)
    assert limited == pytest.approx(v / 5.0)


def test_limit_with_infinite_max_is_identity():
    assert limit3(1e6, -2e6, 3.0, math.inf) == (1e6, -2e6, 3.0)


def test_steer_of_zero_direction_is_zero():
    assert steer3(0.0, 0.0, 0.0, 0.1, 0.2, 0.3, 0.5, 0.1) == (0.0, 0.0, 0.0)


def test_steer_is_desired_minus_current_then_capped():
    # Desired velocity (0.3, 0, 0) minus current (0, 0.1, 0)
    x, y, z = steer3(2.0, 0.0, 0.0, 0.0, 0.1, 0.0, 0.3, math.inf)
    assert (x, y, z) == approx((0.3, -0.1, 0.0))

    x, y, z = steer3(2.0, 0.0, 0.0, 0.0, 0.1, 0.0, 0.3, 0.05)
    assert math.sqrt(x * x + y * y + z * z) == approx(0.05)


@pytest.mark.parametrize("v", np.linspace(-10.0, 10.0, 41))
def test_wrap_is_identity_inside_domain(v):
    assert wrap_coordinate(float(v), -10.0, 10.0) == float(v)


def test_wrap_handles_overshoot_of_several_domain_widths():
    v = 10.0 + 3 * 20.0 + 0.1
    assert wrap_coordinate(v, -10.0, 10.0) == approx(-9.9)


def test_wrap_below_minimum():
    assert wrap_coordinate(-10.5, -10.0, 10.0) == approx(9.5)
    assert wrap_coordinate(-55.0, -10.0, 10.0) == approx(5.0)


def test_wrap_lands_inside_domain_for_arbitrary_values():
    rng = np.random.default_rng(3)
    for v in rng.uniform(-1e6, 1e6, size=500):
        wrapped = wrap_coordinate(float(v), -7.5, 7.5)
        assert -7.5 <= wrapped <= 7.5


def test_wraparound_wraps_each_axis_independently():
    wrapped = wraparound(np.array([7.6, 0.0, -8.0]), -7.5, 7.5)
    assert wrapped == pytest.approx([-7.4, 0.0, 7.0])
