"""Bounded-iterator capability.

An iterator is *bounded* when `len()` reports exactly how many values it
still has to produce. Built-in iterators such as `iter([1, 2])` only offer a
length hint, so sized iterables are wrapped in `CountedIterator` instead.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sized
from typing import Generic, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class SizedIterator(Protocol[T_co]):
    """Iterator that also reports its exact remaining length."""

    def __iter__(self) -> SizedIterator[T_co]: ...

    def __next__(self) -> T_co: ...

    def __len__(self) -> int: ...


class CountedIterator(Generic[T]):
    """Attach a declared remaining count to any iterable.

    At most `length` values are produced. If the source runs out early the
    remaining count drops to zero.
    """

    def __init__(self, iterable: Iterable[T], length: int) -> None:
        """Produce at most `length` values from `iterable`."""

        if length < 0:
            raise ValueError(f"Iterator length must not be negative, got {length}.")
        self._iterator = iter(iterable)
        self._remaining = length

    def __iter__(self) -> CountedIterator[T]:
        """Return the iterator itself."""

        return self

    def __next__(self) -> T:
        """Return the next value and decrement the remaining count."""

        if self._remaining == 0:
            raise StopIteration
        try:
            value = next(self._iterator)
        except StopIteration:
            self._remaining = 0
            raise
        self._remaining -= 1
        return value

    def __len__(self) -> int:
        """Return how many values are still to come."""

        return self._remaining

    def __bool__(self) -> bool:
        """Stay truthy once drained, like any other iterator."""

        return True


def as_iterator(iterable: Iterable[T]) -> Iterator[T]:
    """Return an iterator over `iterable`, keeping its length when it has one.

    Iterators are returned unchanged. Sized containers (lists, ranges, ...)
    become a `CountedIterator` so wrappers can still answer `len()`.
    """

    if isinstance(iterable, Iterator):
        return iterable
    if isinstance(iterable, Sized):
        return CountedIterator(iterable, len(iterable))
    return iter(iterable)


def remaining_length(iterator: object) -> int:
    """Return the exact remaining length of a bounded iterator.

    Raises:
        TypeError: If the iterator does not report its remaining length.
    """

    try:
        return len(iterator)  # type: ignore[arg-type]
    except TypeError as exc:
        raise TypeError(
            f"{type(iterator).__name__} does not report its remaining length; "
            "wrap it with CountedIterator(iterable, length)."
        ) from exc


def as_bounded(iterable: Iterable[T]) -> SizedIterator[T]:
    """Return a bounded iterator over `iterable`.

    Raises:
        TypeError: If no exact remaining length is available.
    """

    iterator = as_iterator(iterable)
    remaining_length(iterator)
    return iterator  # type: ignore[return-value]
