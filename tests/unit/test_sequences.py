"""Unit tests for demo sequence producers."""

from __future__ import annotations

import pytest

from iterprogress.sequences import digit_count, fibonacci_terms


def test_fibonacci_terms_are_bounded() -> None:
    """The bounded Fibonacci iterator should report and honor its length."""

    terms = fibonacci_terms(10)

    assert len(terms) == 10
    assert list(terms) == [0, 1, 1, 2, 3, 5, 8, 13, 21, 34]


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (0, 1),
        (9, 1),
        (10, 2),
        (99, 2),
        (10**5000 - 1, 5000),
        (10**5000, 5001),
    ],
)
def test_digit_count_is_exact(value: int, expected: int) -> None:
    """Digit counts should be exact even for integers too large for `str()`."""

    assert digit_count(value) == expected


def test_digit_count_rejects_negative_values() -> None:
    """Negative integers are outside the supported domain."""

    with pytest.raises(ValueError):
        digit_count(-1)
