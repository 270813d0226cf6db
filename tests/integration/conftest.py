"""Integration-test fixtures for deterministic CLI environments."""

from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def _clear_iterprogress_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host `ITERPROGRESS_*` variables from leaking into CLI runs."""

    for key in ("ITERPROGRESS_COUNT", "ITERPROGRESS_INTERVAL_MS", "ITERPROGRESS_FIB_LENGTH"):
        monkeypatch.delenv(key, raising=False)
