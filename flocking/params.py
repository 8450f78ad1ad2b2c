"""Tunable flocking parameters, fixed for the lifetime of a run."""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class FlockParams:
    """
    Flocking rule weights and limits plus the periodic simulation domain.

    Attributes:
        separation_weight: Weight of the steer-away-from-neighbors force
        alignment_weight: Weight of the match-neighbor-heading force
        cohesion_weight: Weight of the steer-toward-centroid force
        perception_radius: Neighbors are birds strictly closer than this (may be inf)
        max_speed: Velocity magnitude cap, also the desired steering speed
        max_force: Magnitude cap on each steering force (may be inf)
        space_min: Lower bound of the domain on every axis
        space_max: Upper bound of the domain on every axis
    """
    separation_weight: float = 1.5
    alignment_weight: float = 2.0
    cohesion_weight: float = 1.5
    perception_radius: float = 1.9
    max_speed: float = 0.125
    max_force: float = 0.03
    space_min: float = -7.5
    space_max: float = 7.5

    def __post_init__(self):
        for name in ("separation_weight", "alignment_weight", "cohesion_weight",
                     "perception_radius", "max_speed", "max_force"):
            value = getattr(self, name)
            if math.isnan(value) or value < 0:
                raise ValueError(f"{name} must be non-negative, got {value}")
        # Only max_force and perception_radius may be inf
        for name in ("separation_weight", "alignment_weight", "cohesion_weight", "max_speed"):
            if math.isinf(getattr(self, name)):
                raise ValueError(f"{name} must be finite, got {getattr(self, name)}")
        if not (math.isfinite(self.space_min) and math.isfinite(self.space_max)):
            raise ValueError("Domain bounds must be finite")
        if self.space_max <= self.space_min:
            raise ValueError(
                f"space_max ({self.space_max}) must be greater than space_min ({self.space_min})"
            )

    @property
    def width(self) -> float:
        """Edge length of the domain cube."""
        return self.space_max - self.space_min

    @classmethod
    def from_config(cls, flock: dict) -> "FlockParams":
        """Build parameters from a FLOCK config dict (see config/flocking.py)."""
        dimensions = float(flock["dimensions"])
        return cls(
            separation_weight=float(flock["separation_weight"]),
            alignment_weight=float(flock["alignment_weight"]),
            cohesion_weight=float(flock["cohesion_weight"]),
            perception_radius=float(flock["perception_radius"]),
            max_speed=float(flock["max_speed"]),
            max_force=float(flock["max_force"]),
            space_min=-dimensions,
            space_max=dimensions,
        )
