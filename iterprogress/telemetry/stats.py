"""Run counters for rate-limited and progress-reporting iteration.

Responsibilities:
- Count values drained from a decorated iterator.
- Collect render and sleep counters from the limiters involved.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..ratelimit import RateLimiter


@dataclass(slots=True)
class RunStats:
    """Collect and summarize run-level iteration counters."""

    yielded: int = 0
    renders: int = 0
    skipped_renders: int = 0
    slept_seconds: float = 0.0

    def record_value(self) -> None:
        """Count one value produced by the decorated iterator."""

        self.yielded += 1

    def add_render_limiter(self, limiter: RateLimiter) -> None:
        """Add render counters from a progress bar's limiter."""

        self.renders += limiter.performed
        self.skipped_renders += limiter.skipped

    def add_throttle_limiter(self, limiter: RateLimiter) -> None:
        """Add sleep time spent by a throttling limiter."""

        self.slept_seconds += max(0.0, limiter.slept_seconds)

    def summary(self) -> dict[str, int | float]:
        """Return counters in reporting order, keyed by field name."""

        return {
            "yielded": self.yielded,
            "renders": self.renders,
            "skipped_renders": self.skipped_renders,
            "slept_seconds": self.slept_seconds,
        }
