import math

import pytest

from config import flocking as config
from flocking import FlockParams


def test_from_config_builds_symmetric_domain():
    params = FlockParams.from_config(config.FLOCK)
    assert params.space_min == -config.FLOCK["dimensions"]
    assert params.space_max == config.FLOCK["dimensions"]
    assert params.width == 2 * config.FLOCK["dimensions"]
    assert params.perception_radius == config.FLOCK["perception_radius"]


@pytest.mark.parametrize("name", [
    "separation_weight", "alignment_weight", "cohesion_weight",
    "perception_radius", "max_speed", "max_force",
])
def test_negative_parameters_are_rejected(name):
    with pytest.raises(ValueError):
        FlockParams(**{name: -0.1})


@pytest.mark.parametrize("space_min,space_max", [(0.0, 0.0), (5.0, -5.0)])
def test_empty_or_inverted_domain_is_rejected(space_min, space_max):
    with pytest.raises(ValueError):
        FlockParams(space_min=space_min, space_max=space_max)


def test_unbounded_force_and_zero_radius_are_allowed():
    params = FlockParams(max_force=math.inf, perception_radius=0.0)
    assert params.max_force == math.inf


def test_unbounded_perception_radius_is_allowed():
    assert FlockParams(perception_radius=math.inf).perception_radius == math.inf


@pytest.mark.parametrize("name", [
    "separation_weight", "alignment_weight", "cohesion_weight", "max_speed",
])
def test_infinite_weights_and_speed_are_rejected(name):
    with pytest.raises(ValueError, match="finite"):
        FlockParams(**{name: math.inf})


@pytest.mark.parametrize("name", ["max_speed", "max_force", "perception_radius"])
def test_nan_parameters_are_rejected(name):
    with pytest.raises(ValueError):
        FlockParams(**{name: math.nan})


def test_params_are_immutable():
    params = FlockParams()
    with pytest.raises(AttributeError):
        params.max_speed = 1.0
