"""Never-faster-than-the-interval rate limiting.

Responsibilities:
- Decide whether an action may run now, or how long to wait before it may.
- Space out the values produced by an arbitrary iterator.

Key types:
- `RateLimiter`: the timing primitive shared by every wrapper in the package.
- `RateLimitIterator`: iterator wrapper that sleeps between yielded values.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta
import math
import operator
from time import monotonic, sleep
from typing import Callable, Generic, Iterable, Iterator, TypeVar

from .bounded import as_iterator

T = TypeVar("T")


def interval_seconds(interval: float | timedelta) -> float:
    """Convert an interval given as seconds or `timedelta` to float seconds.

    Raises:
        ValueError: If the interval is negative, infinite or NaN.
    """

    if isinstance(interval, timedelta):
        seconds = interval.total_seconds()
    else:
        seconds = float(interval)
    if not math.isfinite(seconds):
        raise ValueError(f"Rate limit interval must be finite, got {seconds}s.")
    if seconds < 0.0:
        raise ValueError(f"Rate limit interval must not be negative, got {seconds}s.")
    return seconds


@dataclass(slots=True)
class RateLimiter:
    """Simple never-faster-than-the-interval limiter.

    The last action time starts one full interval in the past, so the very
    first action is always allowed.

    Skipping an action when it happens too often::

        limiter = RateLimiter(5.0)
        seen = []
        for i in range(3, 10):
            limiter.act(lambda: seen.append(i))
        # seen == [3]

    Sleeping until the limiter allows the next action::

        limiter = RateLimiter(0.01)
        for _ in range(10):
            limiter.sleep_act(lambda: None)
    """

    interval: float | timedelta
    clock: Callable[[], float] = monotonic
    sleeper: Callable[[float], None] = sleep
    performed: int = field(default=0, init=False)
    skipped: int = field(default=0, init=False)
    slept_seconds: float = field(default=0.0, init=False)
    _last: float = field(init=False)

    def __post_init__(self) -> None:
        """Normalize the interval and backdate the last action by one interval."""

        self.interval = interval_seconds(self.interval)
        self._last = self.clock() - self.interval

    def try_act(self, action: Callable[[], T]) -> T | None:
        """Run `action` if the interval has elapsed, otherwise skip it.

        Returns:
            The action's result, or `None` when the action was skipped.
        """

        if self.clock() - self._last >= self.interval:
            self._last = self.clock()
            self.performed += 1
            return action()
        self.skipped += 1
        return None

    def act(self, action: Callable[[], object]) -> None:
        """Run `action` unless the limiter is still cooling down."""

        self.try_act(action)

    def sleep_act(self, action: Callable[[], T]) -> T:
        """Run `action`, sleeping first until the interval has elapsed.

        The last action time advances by exactly one interval rather than
        snapping to the current time, so a consumer slower than the limit
        keeps a steady cadence instead of accumulating drift.
        """

        elapsed = self.clock() - self._last
        if elapsed < self.interval:
            wait_seconds = self.interval - elapsed
            self.sleeper(wait_seconds)
            self.slept_seconds += wait_seconds
        self._last += self.interval
        self.performed += 1
        return action()


class RateLimitIterator(Generic[T]):
    """Wrap an iterator and sleep whenever it is pulled faster than the interval.

    Only produced values are rate limited. Exhaustion is reported at once.
    Typically created with `iterprogress.rate_limit()`.
    """

    def __init__(
        self,
        iterable: Iterable[T],
        interval: float | timedelta,
        *,
        clock: Callable[[], float] = monotonic,
        sleeper: Callable[[float], None] = sleep,
    ) -> None:
        """Wrap `iterable` with a limiter allowing one value per `interval`."""

        self._iterator: Iterator[T] = as_iterator(iterable)
        self.limiter = RateLimiter(interval, clock=clock, sleeper=sleeper)

    def __iter__(self) -> RateLimitIterator[T]:
        """Return the iterator itself."""

        return self

    def __next__(self) -> T:
        """Pull the next value, sleeping before handing it out if pulled too soon."""

        value = next(self._iterator)
        return self.limiter.sleep_act(lambda: value)

    def __len__(self) -> int:
        """Return the wrapped iterator's exact remaining count, when it has one."""

        return len(self._iterator)  # type: ignore[arg-type]

    def __length_hint__(self) -> int:
        """Return the wrapped iterator's length estimate."""

        return operator.length_hint(self._iterator)

    def __bool__(self) -> bool:
        """Stay truthy even when the wrapped iterator has no length."""

        return True
