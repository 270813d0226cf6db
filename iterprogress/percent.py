"""Percent-complete progress bar for bounded iterators.

Responsibilities:
- Compute percent complete from a fixed total and the remaining count.
- Render a fixed-width bar, overwriting the current terminal line.
- Always report completion exactly once, regardless of rate limiting.
"""

from __future__ import annotations

import sys
from time import monotonic
from typing import Callable, Generic, Iterable, TextIO, TypeVar

from .bounded import as_bounded, remaining_length
from .errors import ProgressStageError
from .ratelimit import RateLimiter

T = TypeVar("T")

RENDER_INTERVAL_SECONDS = 0.1
BAR_WIDTH = 50


def percent_complete(total: int, remaining: int) -> float:
    """Return how much of `total` has been consumed, in percent.

    An empty iterator is treated as already complete.
    """

    if total == 0:
        return 100.0
    return 100.0 * (total - remaining) / total


def render_bar(percent: float) -> str:
    """Render `|###   |  57.3%` with one `#` per two percent."""

    filled = min(BAR_WIDTH, max(0, int(percent / 2.0)))
    return f"|{'#' * filled}{' ' * (BAR_WIDTH - filled)}| {percent:5.1f}%"


COMPLETE_LINE = render_bar(100.0)


class PercentIterator(Generic[T]):
    """Wrap a bounded iterator and print how much of it has been consumed.

    The total is captured once at construction. Intermediate renders are
    limited to one per `RENDER_INTERVAL_SECONDS`; the final 100% line is
    always printed, followed by a newline.

    Typically created with `iterprogress.show_percent()`.
    """

    def __init__(
        self,
        iterable: Iterable[T],
        *,
        stream: TextIO | None = None,
        clock: Callable[[], float] = monotonic,
    ) -> None:
        self._iterator = as_bounded(iterable)
        self._total = remaining_length(self._iterator)
        self._stream = stream
        self._completed = False
        self.limiter = RateLimiter(RENDER_INTERVAL_SECONDS, clock=clock)

    @property
    def total(self) -> int:
        """Number of values the wrapped iterator had at construction."""

        return self._total

    def __iter__(self) -> PercentIterator[T]:
        """Return the iterator itself."""

        return self

    def __next__(self) -> T:
        """Render progress for the pull, then return the wrapped iterator's value."""

        remaining = len(self._iterator)
        if remaining != 0:
            self.limiter.act(lambda: self._render(remaining))
        else:
            self._complete()
        try:
            return next(self._iterator)
        except StopIteration:
            # Source ran out before its declared count.
            self._complete()
            raise

    def __len__(self) -> int:
        """Return the wrapped iterator's remaining count."""

        return len(self._iterator)

    def __bool__(self) -> bool:
        """Stay truthy once drained, like any other iterator."""

        return True

    def _complete(self) -> None:
        """Print the 100% line unless it was already printed."""

        if self._completed:
            return
        self._completed = True
        self._write(f"\r{COMPLETE_LINE}\n")

    def _render(self, remaining: int) -> None:
        """Overwrite the current line with the bar for `remaining` values left."""

        percent = percent_complete(self._total, remaining)
        self._write(f"\r{render_bar(percent)}")

    def _write(self, text: str) -> None:
        """Write and flush immediately, since bar lines do not end with a newline."""

        stream = self._stream if self._stream is not None else sys.stdout
        try:
            stream.write(text)
            stream.flush()
        except (OSError, ValueError) as exc:
            raise ProgressStageError(
                stage="render",
                detail=f"Failed to write progress bar: {exc}",
                hint="Check that the output stream is open and writable.",
            ) from exc
