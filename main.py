"""
3D Bird Flocking Simulation
===========================

Brute-force separation / alignment / cohesion flocking in a periodic cube,
updated in parallel once per frame.

Usage:
    python main.py                          # Window with default settings
    python main.py --headless --steps 1000  # No window, just the timing summary
    python main.py --birds 2000 --scheduler numba

Controls:
    - W/S: Rotate camera up/down
    - A/D: Rotate camera left/right
    - Q/E: Zoom in/out
    - Mouse drag: Rotate camera
    - Mouse wheel: Zoom
    - SPACE: Pause/Resume
    - ESC: Quit
"""

import argparse
import logging
import time

from config import flocking as config
from flocking import (
    BirdStore, FlockParams, FlockingStepEngine, Partitioning, PerfStats, Scheduler
)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="3D bird flocking simulation")
    parser.add_argument("--birds", type=int, default=config.FLOCK["count"],
                        help="Number of birds")
    parser.add_argument("--seed", type=int, default=config.FLOCK["seed"],
                        help="Seed for the initial flock")
    parser.add_argument("--scheduler", choices=[s.value for s in Scheduler],
                        default=config.ENGINE["scheduler"])
    parser.add_argument("--partitioning", choices=[p.value for p in Partitioning],
                        default=config.ENGINE["partitioning"])
    parser.add_argument("--workers", type=int, default=config.ENGINE["workers"],
                        help="Worker threads (default: CPU count)")
    parser.add_argument("--headless", action="store_true",
                        help="Run without a window")
    parser.add_argument("--steps", type=int, default=None,
                        help="Headless step count (default: one summary period)")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def run_headless(store: BirdStore, engine: FlockingStepEngine, stats: PerfStats, steps: int):
    """Frame clock without a renderer: step, time, report."""
    for _ in range(steps):
        frame_start = time.perf_counter()
        stats.begin_step()
        report = engine.step(store)
        if not report.ok:
            continue

        if config.STATS["show_positions"]:
            for i in range(len(store)):
                bird = store[i]
                print(f"Bird {i}: pos={bird.position} vel={bird.velocity} acc={bird.acceleration}")

        overhead = time.perf_counter() - frame_start - report.calc_time
        if config.STATS["show_times"]:
            stats.record(report.calc_time, overhead)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    params = FlockParams.from_config(config.FLOCK)
    store = BirdStore.random(args.birds, seed=args.seed)
    stats = PerfStats(
        report_every=config.STATS["report_every"],
        summary_every=config.STATS["summary_every"],
        print_every=config.STATS["print_every"],
    )

    print(f"\n\n[App] Starting simulation with {args.birds} birds ({args.scheduler} scheduler)")
    print("[App] Compiling kernels...")
    with FlockingStepEngine.from_config(
        params, config.ENGINE,
        scheduler=Scheduler(args.scheduler),
        partitioning=Partitioning(args.partitioning),
        workers=args.workers,
    ) as engine:
        if args.headless:
            print("[App] Visuals disabled.\n")
            run_headless(store, engine, stats, args.steps or config.STATS["summary_every"])
        else:
            print("[App] Visuals enabled.\n")
            from core import Application
            Application(store, engine, stats).run()


if __name__ == "__main__":
    main()
