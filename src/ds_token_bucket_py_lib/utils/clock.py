"""
**File:** ``clock.py``
**Region:** ``ds_token_bucket_py_lib/utils/clock``

Time sources for the token bucket.

A clock is any zero-argument callable returning seconds as a float. Readings
are compared against each other only, so the epoch does not matter.

Example:
    >>> clock = ManualClock(start=0.0)
    >>> bucket = TokenBucket(capacity=10, fill_rate=1.0, clock=clock, sleep=clock.sleep)
    >>> clock.advance(3.0)
"""

import threading
from typing import Protocol


class Clock(Protocol):
    """
    Zero-argument callable returning the current time in seconds.
    """

    def __call__(self) -> float: ...


class ManualClock:
    """
    Deterministic clock that only moves when told to.

    :param start: Initial reading in seconds.
    """

    def __init__(self, start: float = 0.0) -> None:
        self._now = float(start)
        self._slept: list[float] = []
        self._lock = threading.Lock()

    def __call__(self) -> float:
        with self._lock:
            return self._now

    @property
    def slept(self) -> list[float]:
        """
        Durations passed to sleep(), in call order.
        """
        with self._lock:
            return list(self._slept)

    def advance(self, seconds: float) -> None:
        """
        Move the clock forward.
        :param seconds: Non-negative number of seconds to add.
        :return: None
        """
        if seconds < 0:
            raise ValueError(f"Cannot advance a clock by a negative amount: {seconds}")
        with self._lock:
            self._now += float(seconds)

    def set(self, value: float) -> None:
        """
        Jump to an absolute reading. May move backward.
        :param value: New reading in seconds.
        :return: None
        """
        with self._lock:
            self._now = float(value)

    def sleep(self, seconds: float) -> None:
        """
        Record the sleep and advance the clock by the same amount.
        :param seconds: Duration to sleep.
        :return: None
        """
        with self._lock:
            self._slept.append(float(seconds))
            self._now += max(0.0, float(seconds))
