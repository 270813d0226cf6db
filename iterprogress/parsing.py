"""Shared parsing helpers for configuration value normalization."""

from __future__ import annotations


def normalize_optional_string(value: object) -> str | None:
    """Normalize an optional value to a stripped non-empty string.

    Args:
        value: Arbitrary input value.

    Returns:
        Stripped string value, or `None` when the value is empty after trimming.
    """

    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return None
    return text


def parse_non_negative_int(value: object, field_name: str) -> int:
    """Parse an integer that must be zero or greater.

    Booleans are rejected even though they are `int` subclasses.

    Raises:
        ValueError: If the value is blank, not an integer, or negative.
    """

    if isinstance(value, bool):
        raise ValueError(f"`{field_name}` must be an integer, got a boolean.")
    if isinstance(value, int):
        parsed = value
    else:
        normalized = normalize_optional_string(value)
        if normalized is None:
            raise ValueError(f"`{field_name}` must not be empty.")
        try:
            parsed = int(normalized)
        except ValueError as exc:
            raise ValueError(f"`{field_name}` must be an integer, got `{normalized}`.") from exc
    if parsed < 0:
        raise ValueError(f"`{field_name}` must be zero or greater, got {parsed}.")
    return parsed
