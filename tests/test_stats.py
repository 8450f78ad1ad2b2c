import pytest

from flocking import PerfStats


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def run(stats: PerfStats, clock: FakeClock, steps: int, calc: float = 0.004, overhead: float = 0.006):
    summaries = []
    for _ in range(steps):
        stats.begin_step()
        clock.now += calc + overhead
        summaries.append(stats.record(calc, overhead))
    return summaries


def test_summary_is_reported_every_summary_period(capsys):
    clock = FakeClock()
    stats = PerfStats(report_every=5, summary_every=10, clock=clock)

    summaries = run(stats, clock, 20)

    assert [i for i, s in enumerate(summaries) if s] == [9, 19]
    out = capsys.readouterr().out
    assert out.count("[Summary] Simulated 10 steps in 0.100 seconds at 100 FPS") == 2
    assert "Average Calculation: 4.000 ms | Average Overhead: 6.000 ms" in out
    # Batch lines are off unless print_every is set
    assert "[Stats]" not in out


def test_batch_lines_when_print_every_is_enabled(capsys):
    clock = FakeClock()
    stats = PerfStats(report_every=5, summary_every=100, print_every=True, clock=clock)

    run(stats, clock, 10)

    out = capsys.readouterr().out
    assert "[Stats] Simulated steps 0-5 in 0.050 seconds (10.000 ms/step, 100.00 FPS)" in out
    assert "[Stats] Simulated steps 5-10" in out
    assert "Calculation: 4.000 ms | Overhead: 6.000 ms | Total: 10.000 ms" in out
    assert stats.total_steps == 10


def test_invalid_periods_are_rejected():
    with pytest.raises(ValueError):
        PerfStats(report_every=0)
