"""
Per-step flocking engine.

Each step snapshots the flock, fans the per-bird update out over a worker
pool (every worker owns a disjoint set of bird indices), joins with a
bounded wait and only then commits the results into the live store.
"""

import logging
import os
import time
from concurrent.futures import ThreadPoolExecutor, wait
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

import numpy as np

from .kernels import update_all_parallel, update_range
from .params import FlockParams
from .store import BirdStore, FlockSnapshot

logger = logging.getLogger(__name__)


class Scheduler(Enum):
    THREADS = "threads"   # ThreadPoolExecutor over GIL-free kernels, bounded join
    NUMBA = "numba"       # Single prange kernel on Numba's thread pool
    SERIAL = "serial"     # One in-thread call


class Partitioning(Enum):
    CONTIGUOUS = "contiguous"
    INTERLEAVED = "interleaved"


class StepStatus(Enum):
    OK = "ok"
    STALLED = "stalled"
    FAILED = "failed"


@dataclass
class StepReport:
    """Outcome of one attempted step."""
    step: int
    status: StepStatus
    calc_time: float
    pending: int = 0
    errors: List[BaseException] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.status is StepStatus.OK


class StepError(RuntimeError):
    """Raised in strict mode when a step stalls or a worker fails."""

    def __init__(self, report: StepReport):
        super().__init__(f"Step {report.step} {report.status.value}")
        self.report = report


def partition(count: int, parts: int, mode: Partitioning) -> List[Tuple[int, int, int]]:
    """
    Split bird indices [0, count) into at most `parts` disjoint (start, stop, stride) ranges.

    Every index lands in exactly one range.
    """
    parts = max(1, min(parts, count))
    if count == 0:
        return []
    if mode is Partitioning.INTERLEAVED:
        return [(k, count, parts) for k in range(parts)]

    base, extra = divmod(count, parts)
    ranges = []
    start = 0
    for k in range(parts):
        stop = start + base + (1 if k < extra else 0)
        ranges.append((start, stop, 1))
        start = stop
    return ranges


class FlockingStepEngine:
    """
    Advances a BirdStore one step at a time.

    Args:
        params: Flocking weights, limits and domain
        scheduler: How the per-bird work is executed
        partitioning: How bird indices are split across workers (THREADS only)
        workers: Worker count, defaults to os.cpu_count()
        step_timeout: Seconds to wait for all workers before reporting a stall
        strict: Raise StepError instead of returning a degraded report
    """

    def __init__(
        self,
        params: FlockParams,
        scheduler: Scheduler = Scheduler.THREADS,
        partitioning: Partitioning = Partitioning.CONTIGUOUS,
        workers: Optional[int] = None,
        step_timeout: float = 5.0,
        strict: bool = False
    ):
        self.params = params
        self.scheduler = Scheduler(scheduler)
        self.partitioning = Partitioning(partitioning)
        self.workers = workers if workers is not None else (os.cpu_count() or 1)
        if self.workers < 1:
            raise ValueError(f"workers must be at least 1, got {self.workers}")
        if step_timeout <= 0:
            raise ValueError(f"step_timeout must be positive, got {step_timeout}")
        self.step_timeout = float(step_timeout)
        self.strict = strict
        self.step_count = 0

        self._kernel_args = (
            float(params.separation_weight),
            float(params.alignment_weight),
            float(params.cohesion_weight),
            float(params.perception_radius),
            float(params.max_speed),
            float(params.max_force),
            float(params.space_min),
            float(params.space_max),
        )

        self._executor = None
        if self.scheduler is Scheduler.THREADS:
            self._executor = ThreadPoolExecutor(
                max_workers=self.workers, thread_name_prefix="flock-worker"
            )
            logger.info("Started %d flock workers (%s partitioning)",
                        self.workers, self.partitioning.value)

        # JIT compilation happens here, never inside a timed step
        self.warmup()

    @classmethod
    def from_config(cls, params: FlockParams, engine: dict, **overrides) -> "FlockingStepEngine":
        """Build an engine from an ENGINE config dict (see config/flocking.py)."""
        options = {
            "scheduler": Scheduler(engine.get("scheduler", "threads")),
            "partitioning": Partitioning(engine.get("partitioning", "contiguous")),
            "workers": engine.get("workers"),
            "step_timeout": engine.get("step_timeout", 5.0),
        }
        options.update({k: v for k, v in overrides.items() if v is not None})
        return cls(params, **options)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def close(self):
        """Shut down the worker pool. Stalled workers are not waited for."""
        if self._executor is not None:
            self._executor.shutdown(wait=False, cancel_futures=True)
            self._executor = None
            logger.info("Flock workers stopped")

    def warmup(self):
        """Pre-compile the kernels on a tiny flock."""
        start = time.perf_counter()
        store = BirdStore.random(16, seed=0)
        snapshot = store.snapshot()
        out = self._allocate(len(store))
        update_range(snapshot.positions, snapshot.velocities, *out,
                     0, len(store), 1, *self._kernel_args)
        if self.scheduler is Scheduler.NUMBA:
            update_all_parallel(snapshot.positions, snapshot.velocities, *out,
                                *self._kernel_args)
        logger.debug("Kernel warmup took %.3f s", time.perf_counter() - start)

    @staticmethod
    def _allocate(count: int):
        return (
            np.empty((count, 3), dtype=np.float64),
            np.empty((count, 3), dtype=np.float64),
            np.empty((count, 3), dtype=np.float64),
        )

    def _run_chunk(self, snapshot: FlockSnapshot, out, start: int, stop: int, stride: int):
        """Update one partition of birds into the step's output buffers."""
        update_range(snapshot.positions, snapshot.velocities, *out,
                     start, stop, stride, *self._kernel_args)

    def _compute_threads(self, snapshot: FlockSnapshot, out, report: StepReport):
        if self._executor is None:
            raise RuntimeError("Engine is closed")

        ranges = partition(len(snapshot), self.workers, self.partitioning)
        futures = [
            self._executor.submit(self._run_chunk, snapshot, out, start, stop, stride)
            for start, stop, stride in ranges
        ]
        done, not_done = wait(futures, timeout=self.step_timeout)

        for future in done:
            error = future.exception()
            if error is not None:
                report.errors.append(error)

        if not_done:
            report.status = StepStatus.STALLED
            report.pending = len(not_done)
            for future in not_done:
                future.cancel()
        elif report.errors:
            report.status = StepStatus.FAILED

    def step(self, store: BirdStore) -> StepReport:
        """
        Advance every bird in the store by one step.

        The store is only modified if every worker finished successfully;
        a stalled or failed step leaves it exactly as it was.
        """
        snapshot = store.snapshot()
        out = self._allocate(len(store))
        report = StepReport(step=self.step_count, status=StepStatus.OK, calc_time=0.0)

        calc_start = time.perf_counter()
        if self.scheduler is Scheduler.THREADS:
            self._compute_threads(snapshot, out, report)
        else:
            try:
                if self.scheduler is Scheduler.NUMBA:
                    update_all_parallel(snapshot.positions, snapshot.velocities, *out,
                                        *self._kernel_args)
                else:
                    self._run_chunk(snapshot, out, 0, len(snapshot), 1)
            except Exception as error:
                report.errors.append(error)
                report.status = StepStatus.FAILED
        report.calc_time = time.perf_counter() - calc_start

        if report.status is StepStatus.OK:
            store.commit(*out)
            self.step_count += 1
        else:
            if report.status is StepStatus.STALLED:
                logger.warning(
                    "Step %d stalled: %d worker(s) still running after %.2f s; "
                    "keeping previous flock state",
                    report.step, report.pending, self.step_timeout
                )
            for error in report.errors:
                logger.error("Step %d worker failed; keeping previous flock state",
                             report.step, exc_info=error)

        if self.strict and not report.ok:
            raise StepError(report)
        return report
