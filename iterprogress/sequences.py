"""Demo producers used by the CLI commands."""

from __future__ import annotations

import math
from typing import Iterator

from .bounded import CountedIterator


def fibonacci() -> Iterator[int]:
    """Yield the Fibonacci sequence starting at 0, 1, 1, 2, ..."""

    a, b = 0, 1
    while True:
        yield a
        a, b = b, a + b


def fibonacci_terms(length: int) -> CountedIterator[int]:
    """Return the first `length` Fibonacci numbers as a bounded iterator."""

    return CountedIterator(fibonacci(), length)


def digit_count(value: int) -> int:
    """Count decimal digits of a non-negative integer.

    Avoids `str()`, which refuses very large integers on recent interpreters.
    """

    if value < 0:
        raise ValueError(f"Digit count requires a non-negative integer, got {value}.")
    if value < 10:
        return 1
    digits = int(math.log10(value)) + 1
    # log10 is approximate for huge values; correct by one either way.
    if value >= 10**digits:
        digits += 1
    elif value < 10 ** (digits - 1):
        digits -= 1
    return digits
