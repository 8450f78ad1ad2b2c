"""Bird state storage: the live flock and its per-step read-only snapshots."""

from dataclasses import dataclass, field
from typing import Optional

import numpy as np


@dataclass
class Bird:
    """
    A value copy of one bird's state.

    Attributes:
        position: 3D position vector
        velocity: 3D velocity vector
        acceleration: 3D acceleration from the last step (not accumulated)
    """
    position: np.ndarray = field(default_factory=lambda: np.zeros(3))
    velocity: np.ndarray = field(default_factory=lambda: np.zeros(3))
    acceleration: np.ndarray = field(default_factory=lambda: np.zeros(3))


def _readonly(array: np.ndarray) -> np.ndarray:
    array.setflags(write=False)
    return array


def _as_state_array(values) -> np.ndarray:
    array = np.array(values, dtype=np.float64, order="C", ndmin=2)
    # An empty input is an empty population, not a (1, 0) array
    if array.size == 0:
        return np.zeros((0, 3), dtype=np.float64)
    return array


@dataclass(frozen=True)
class FlockSnapshot:
    """Independent, non-writeable copy of every bird's position and velocity."""
    positions: np.ndarray
    velocities: np.ndarray

    def __len__(self) -> int:
        return self.positions.shape[0]


class BirdStore:
    """
    The authoritative, index-stable flock.

    State is kept as (n, 3) float64 arrays. A bird's index is its identity;
    the population never grows, shrinks or reorders.
    """

    def __init__(self, positions: np.ndarray, velocities: np.ndarray, accelerations: np.ndarray):
        self._positions = positions
        self._velocities = velocities
        self._accelerations = accelerations

    @classmethod
    def random(cls, count: int, seed: Optional[int] = None) -> "BirdStore":
        """Positions uniform in [-5, 5)^3, velocities uniform in [-1, 1)^3, zero acceleration."""
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        rng = np.random.default_rng(seed)
        positions = rng.uniform(-5.0, 5.0, size=(count, 3))
        velocities = rng.uniform(-1.0, 1.0, size=(count, 3))
        return cls(positions, velocities, np.zeros((count, 3), dtype=np.float64))

    @classmethod
    def from_arrays(cls, positions, velocities, accelerations=None) -> "BirdStore":
        """Build a store from array-likes, copying them into owned float64 arrays."""
        positions = _as_state_array(positions)
        velocities = _as_state_array(velocities)
        if accelerations is None:
            accelerations = np.zeros_like(positions)
        else:
            accelerations = _as_state_array(accelerations)

        if positions.ndim != 2 or positions.shape[1] != 3:
            raise ValueError(f"positions must have shape (n, 3), got {positions.shape}")
        if velocities.shape != positions.shape:
            raise ValueError(
                f"velocities shape {velocities.shape} does not match positions {positions.shape}"
            )
        if accelerations.shape != positions.shape:
            raise ValueError(
                f"accelerations shape {accelerations.shape} does not match positions {positions.shape}"
            )
        return cls(positions, velocities, accelerations)

    def __len__(self) -> int:
        return self._positions.shape[0]

    def __getitem__(self, index: int) -> Bird:
        return Bird(
            position=self._positions[index].copy(),
            velocity=self._velocities[index].copy(),
            acceleration=self._accelerations[index].copy(),
        )

    @property
    def positions(self) -> np.ndarray:
        return self._positions

    @property
    def velocities(self) -> np.ndarray:
        return self._velocities

    @property
    def accelerations(self) -> np.ndarray:
        return self._accelerations

    def snapshot(self) -> FlockSnapshot:
        """Deep-copy positions and velocities for one step's neighbor scan."""
        return FlockSnapshot(
            positions=_readonly(self._positions.copy()),
            velocities=_readonly(self._velocities.copy()),
        )

    def view(self) -> FlockSnapshot:
        """Read-only views of the live arrays (no copy), for renderers."""
        return FlockSnapshot(
            positions=_readonly(self._positions.view()),
            velocities=_readonly(self._velocities.view()),
        )

    def commit(self, positions: np.ndarray, velocities: np.ndarray, accelerations: np.ndarray):
        """Copy a completed step's results into the live arrays."""
        np.copyto(self._positions, positions)
        np.copyto(self._velocities, velocities)
        np.copyto(self._accelerations, accelerations)
