import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from flocking import BirdStore, FlockParams  # noqa: E402


@pytest.fixture
def params() -> FlockParams:
    return FlockParams(
        separation_weight=1.5,
        alignment_weight=2.0,
        cohesion_weight=1.5,
        perception_radius=1.9,
        max_speed=0.125,
        max_force=0.03,
        space_min=-7.5,
        space_max=7.5,
    )


@pytest.fixture
def store() -> BirdStore:
    return BirdStore.random(300, seed=1234)
