"""Shared pytest fixtures for the full iterprogress test suite."""

from __future__ import annotations

import pytest

from tests.fakes import FakeClock


@pytest.fixture
def fake_clock() -> FakeClock:
    """Provide a manually advanced monotonic clock with a recording sleeper."""

    return FakeClock()


def pytest_make_parametrize_id(config, val, argname):
    """Give oversized integers a test id without calling `str()` on them."""

    if isinstance(val, int) and not isinstance(val, bool) and val.bit_length() > 10000:
        return f"{argname}-int{val.bit_length()}bits"
    return None
