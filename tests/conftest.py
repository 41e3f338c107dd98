"""
**File:** ``conftest.py``
**Region:** ``tests/conftest``

Pytest shared fixtures.

Covers:
- Deterministic control of the default time source (time.perf_counter / time.sleep).
- An injectable ManualClock for TokenBucket unit tests.
"""

from __future__ import annotations

import time
from typing import Protocol

import pytest

from ds_token_bucket_py_lib.utils.clock import ManualClock


class Clock(Protocol):
    """
    Minimal callable clock used in TokenBucket tests.
    """

    def __call__(self, value: float) -> None: ...

    @property
    def slept(self) -> list[float]: ...


@pytest.fixture
def fake_clock(monkeypatch: pytest.MonkeyPatch) -> Clock:
    """
    Patch time.perf_counter and time.sleep for deterministic TokenBucket tests.
    """

    state = {"now": 0.0, "slept": []}

    def _set_now(value: float) -> None:
        state["now"] = float(value)

    def _perf_counter() -> float:
        return float(state["now"])

    def _sleep(seconds: float) -> None:
        state["slept"].append(float(seconds))
        state["now"] = float(state["now"]) + float(seconds)

    monkeypatch.setattr(time, "perf_counter", _perf_counter)
    monkeypatch.setattr(time, "sleep", _sleep)

    _set_now(0.0)

    class _Clock:
        def __call__(self, value: float) -> None:
            _set_now(value)

        @property
        def slept(self) -> list[float]:
            return state["slept"]

    return _Clock()


@pytest.fixture
def manual_clock() -> ManualClock:
    """
    Provide a ManualClock starting at zero.
    """

    return ManualClock(start=0.0)
