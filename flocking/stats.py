"""Console timing statistics for the frame loop."""

import time


class PerfStats:
    """
    Tracks calculation vs. overhead time per step and prints periodic reports.

    Calculation is the engine step; overhead is everything else in the frame
    (rendering, event handling).
    """

    def __init__(
        self,
        report_every: int = 100,
        summary_every: int = 1000,
        print_every: bool = False,
        clock=time.perf_counter
    ):
        if report_every < 1 or summary_every < 1:
            raise ValueError("report_every and summary_every must be at least 1")
        self.report_every = report_every
        self.summary_every = summary_every
        self.print_every = print_every
        self._clock = clock

        self.total_steps = 0
        self._batch_steps = 0
        self._batch_calc = 0.0
        self._batch_overhead = 0.0
        self._summary_calc = 0.0
        self._summary_overhead = 0.0
        self._batch_start = None
        self._summary_start = None

    def begin_step(self):
        """Mark the start of a frame (starts the batch/summary clocks on first use)."""
        now = self._clock()
        if self._batch_start is None:
            self._batch_start = now
        if self._summary_start is None:
            self._summary_start = now

    def record(self, calc_time: float, overhead_time: float) -> bool:
        """
        Record one finished step.

        Returns True when a summary was just printed.
        """
        self.total_steps += 1
        self._batch_steps += 1
        self._batch_calc += calc_time
        self._batch_overhead += overhead_time
        self._summary_calc += calc_time
        self._summary_overhead += overhead_time

        if self._batch_steps == self.report_every:
            if self.print_every:
                print(self.batch_report())
            self._batch_steps = 0
            self._batch_calc = 0.0
            self._batch_overhead = 0.0
            self._batch_start = None

        if self.total_steps % self.summary_every == 0:
            print(self.summary_report())
            self._summary_calc = 0.0
            self._summary_overhead = 0.0
            self._summary_start = None
            return True
        return False

    def batch_report(self) -> str:
        now = self._clock()
        elapsed = now - (self._batch_start if self._batch_start is not None else now)
        steps = max(self._batch_steps, 1)
        avg_step = elapsed / steps
        fps = 1.0 / avg_step if avg_step > 0 else float("inf")
        avg_calc = self._batch_calc / steps
        avg_overhead = self._batch_overhead / steps
        return (
            f"[Stats] Simulated steps {self.total_steps - self._batch_steps}-{self.total_steps} "
            f"in {elapsed:.3f} seconds ({avg_step * 1000:.3f} ms/step, {fps:.2f} FPS)\n"
            f"[Stats] Calculation: {avg_calc * 1000:.3f} ms | Overhead: {avg_overhead * 1000:.3f} ms | "
            f"Total: {(avg_calc + avg_overhead) * 1000:.3f} ms"
        )

    def summary_report(self) -> str:
        now = self._clock()
        elapsed = now - (self._summary_start if self._summary_start is not None else now)
        avg_fps = self.summary_every / elapsed if elapsed > 0 else float("inf")
        avg_calc = self._summary_calc / self.summary_every * 1000
        avg_overhead = self._summary_overhead / self.summary_every * 1000
        return (
            f"\n[Summary] Simulated {self.summary_every} steps in {elapsed:.3f} seconds "
            f"at {avg_fps:.0f} FPS\n"
            f"[Summary] Average Calculation: {avg_calc:.3f} ms | "
            f"Average Overhead: {avg_overhead:.3f} ms"
        )
