"""Composition helpers that give any iterable rate limiting and progress output.

Key public functions:
- `rate_limit`: wrap any iterable in a `RateLimitIterator`.
- `show_percent`: wrap a bounded iterable in a `PercentIterator`.
- `extend`: start a method chain, e.g.
  `extend(range(27)).rate_limit(0.01).show_percent()`.
"""

from __future__ import annotations

from datetime import timedelta
import operator
from typing import Generic, Iterable, Iterator, TypeVar

from .bounded import as_iterator
from .percent import PercentIterator
from .ratelimit import RateLimitIterator

T = TypeVar("T")


def rate_limit(iterable: Iterable[T], interval: float | timedelta) -> RateLimitIterator[T]:
    """Yield values from `iterable` no faster than once per `interval`."""

    return RateLimitIterator(iterable, interval)


def show_percent(iterable: Iterable[T]) -> PercentIterator[T]:
    """Print a progress bar while `iterable` is consumed.

    Raises:
        TypeError: If `iterable` does not report its remaining length.
    """

    return PercentIterator(iterable)


class ExtendedIterator(Generic[T]):
    """Transparent iterator offering `rate_limit()` and `show_percent()` as methods."""

    def __init__(self, iterable: Iterable[T]) -> None:
        """Wrap `iterable` without changing its values or timing."""

        self._iterator: Iterator[T] = as_iterator(iterable)

    def __iter__(self) -> ExtendedIterator[T]:
        """Return the iterator itself."""

        return self

    def __next__(self) -> T:
        """Return the wrapped iterator's next value."""

        return next(self._iterator)

    def __len__(self) -> int:
        """Return the wrapped iterator's exact remaining count, when it has one."""

        return len(self._iterator)  # type: ignore[arg-type]

    def __length_hint__(self) -> int:
        """Return the wrapped iterator's length estimate."""

        return operator.length_hint(self._iterator)

    def __bool__(self) -> bool:
        """Stay truthy even when the wrapped iterator has no length."""

        return True

    def rate_limit(self, interval: float | timedelta) -> ExtendedIterator[T]:
        """Chain a `RateLimitIterator` spacing values `interval` apart."""

        return ExtendedIterator(rate_limit(self._iterator, interval))

    def show_percent(self) -> ExtendedIterator[T]:
        """Chain a `PercentIterator`; the wrapped iterator must be bounded."""

        return ExtendedIterator(show_percent(self._iterator))


def extend(iterable: Iterable[T]) -> ExtendedIterator[T]:
    """Wrap `iterable` so decorators can be chained as methods."""

    return ExtendedIterator(iterable)
