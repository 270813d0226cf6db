"""Unit tests for run logging and iteration counters."""

from __future__ import annotations

import io

from iterprogress.ratelimit import RateLimiter
from iterprogress.telemetry import RunLogger, RunStats
from tests.fakes import FakeClock


def test_run_logger_emits_sorted_sanitized_context() -> None:
    """Phase lines should carry sorted, shell-safe context tokens."""

    sink = io.StringIO()
    run_logger = RunLogger(sink=sink)

    run_logger.log_stage_start("count", items=3, label="two words")
    run_logger.log_stage_failure("count", "ProgressStageError")

    lines = sink.getvalue().splitlines()
    assert lines == [
        "[phase] level=INFO stage=count event=start items=3 label=two_words",
        "[phase] level=ERROR stage=count event=failure error_type=ProgressStageError",
    ]


def test_run_stats_collects_limiter_counters(fake_clock: FakeClock) -> None:
    """Stats should combine yielded values with render and throttle counters."""

    render_limiter = RateLimiter(0.5, clock=fake_clock, sleeper=fake_clock.sleep)
    for _ in range(3):
        render_limiter.act(lambda: None)
    throttle_limiter = RateLimiter(0.5, clock=fake_clock, sleeper=fake_clock.sleep)
    for _ in range(3):
        throttle_limiter.sleep_act(lambda: None)

    stats = RunStats()
    for _ in range(4):
        stats.record_value()
    stats.add_render_limiter(render_limiter)
    stats.add_throttle_limiter(throttle_limiter)

    assert stats.summary() == {
        "yielded": 4,
        "renders": 1,
        "skipped_renders": 2,
        "slept_seconds": 1.0,
    }
