"""Unit tests for shared configuration parsing helpers."""

import pytest

from iterprogress.parsing import normalize_optional_string, parse_non_negative_int


def test_normalize_optional_string_handles_blank_values() -> None:
    """Normalization should return `None` for `None` and blank textual values."""

    assert normalize_optional_string(None) is None
    assert normalize_optional_string("") is None
    assert normalize_optional_string("   ") is None


def test_normalize_optional_string_strips_non_blank_values() -> None:
    """Normalization should return stripped content for non-empty values."""

    assert normalize_optional_string("  value  ") == "value"
    assert normalize_optional_string(42) == "42"


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (0, 0),
        (113, 113),
        (" 7 ", 7),
        ("100", 100),
    ],
)
def test_parse_non_negative_int_accepts_valid_values(value: object, expected: int) -> None:
    """Integers and integer strings should parse to `int`."""

    assert parse_non_negative_int(value, "count") == expected


@pytest.mark.parametrize("value", [-1, "-5", "", "1.5", "abc", False])
def test_parse_non_negative_int_rejects_invalid_values(value: object) -> None:
    """Negative, blank, non-numeric and boolean values should be rejected."""

    with pytest.raises(ValueError, match="`count`"):
        parse_non_negative_int(value, "count")
