"""Bird flocking simulation engine."""

from .params import FlockParams
from .store import Bird, BirdStore, FlockSnapshot
from .engine import (
    FlockingStepEngine, Partitioning, Scheduler, StepError, StepReport, StepStatus
)
from .stats import PerfStats

__all__ = [
    "FlockParams",
    "Bird",
    "BirdStore",
    "FlockSnapshot",
    "FlockingStepEngine",
    "Partitioning",
    "Scheduler",
    "StepError",
    "StepReport",
    "StepStatus",
    "PerfStats",
]
