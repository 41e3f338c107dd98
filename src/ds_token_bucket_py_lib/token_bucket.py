"""
Token Bucket Rate Limiter

This module implements the token bucket algorithm as an in-process admission control primitive.
A token bucket maintains a reservoir of tokens that are consumed when requests are admitted.
Tokens are replenished at a constant rate (tokens per second), which allows burst traffic up
to the bucket capacity while holding the long-run rate at the fill rate.

Key features:
- Thread-safe using threading.Lock; refill and deduction form a single critical section
- Non-blocking admission via allow(), cooperative waiting via acquire()
- Fixed-point token accounting so high-frequency sub-token refills do not drift
- Injectable clock and sleep for deterministic tests
"""

import math
import threading
import time
from collections.abc import Callable

from ds_common_logger_py_lib import Logger

from .config import TokenBucketConfig
from .errors import InvalidConfigurationError, InvalidRequestError
from .utils.clock import Clock

logger = Logger.get_logger(__name__)

# Fixed-point units per token.
TOKEN_SCALE = 1_000_000_000


def _is_finite(value: float) -> bool:
    try:
        return math.isfinite(value)
    except OverflowError:
        # Integers too large for a float.
        return False


class TokenBucket:
    """
    Token Bucket Rate Limiter

    Each admitted request consumes ``cost`` tokens. The bucket starts full and refills
    continuously at ``fill_rate`` tokens per second, never beyond ``capacity``. Replenishment
    that would overflow the bucket is discarded.

    :param capacity: Maximum number of tokens the bucket can hold. Must be a positive integer.
    :param fill_rate: Tokens added per second of elapsed time. Must be finite and non-negative.
    :param clock: Monotonic time source returning seconds. Defaults to time.perf_counter.
    :param sleep: Function used by acquire() to wait. Defaults to time.sleep.
    :return: None

    Example:
        # Allow bursts of 10 requests, refilling at 1 request per second
        limiter = TokenBucket(capacity=10, fill_rate=1.0)

        if limiter.allow():
            ...  # handle the request
        else:
            ...  # reject the request
    """

    def __init__(
        self,
        capacity: int,
        fill_rate: float,
        clock: Clock | None = None,
        sleep: Callable[[float], None] | None = None,
    ) -> None:
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0:
            raise InvalidConfigurationError(
                message=f"Capacity must be a positive integer, got {capacity!r}",
                details={"capacity": capacity, "fill_rate": fill_rate},
            )
        if (
            isinstance(fill_rate, bool)
            or not isinstance(fill_rate, int | float)
            or not _is_finite(fill_rate)
            or fill_rate < 0
        ):
            raise InvalidConfigurationError(
                message=f"Fill rate must be a finite non-negative number, got {fill_rate!r}",
                details={"capacity": capacity, "fill_rate": fill_rate},
            )

        self._capacity = capacity
        self._fill_rate = float(fill_rate)
        self._clock: Clock = clock or time.perf_counter
        self._sleep = sleep or time.sleep
        self._lock = threading.Lock()
        self._units = capacity * TOKEN_SCALE
        # Fraction of a unit earned but not yet credited, in [-0.5, 0.5].
        self._residual = 0.0
        self._last = self._clock()

        logger.debug("Created token bucket capacity=%s fill_rate=%s", self._capacity, self._fill_rate)

    @classmethod
    def from_config(
        cls,
        config: TokenBucketConfig,
        clock: Clock | None = None,
        sleep: Callable[[float], None] | None = None,
    ) -> "TokenBucket":
        """
        Build a bucket from a TokenBucketConfig.
        :param config: Capacity and fill rate.
        :param clock: Optional time source.
        :param sleep: Optional sleep function.
        :return: TokenBucket
        """
        return cls(capacity=config.capacity, fill_rate=config.fill_rate, clock=clock, sleep=sleep)

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def fill_rate(self) -> float:
        return self._fill_rate

    @property
    def tokens(self) -> float:
        """
        Tokens held as of the last refill. Does not refill.
        """
        with self._lock:
            return self._units / TOKEN_SCALE

    @property
    def last_refill(self) -> float:
        with self._lock:
            return self._last

    def __repr__(self) -> str:
        return f"TokenBucket(capacity={self._capacity}, fill_rate={self._fill_rate}, tokens={self.tokens})"

    def _projected(self, now: float) -> tuple[int, float]:
        # A clock reading behind the baseline adds nothing.
        elapsed = max(0.0, now - self._last)
        earned = elapsed * self._fill_rate
        if earned >= self._capacity:
            return self._capacity * TOKEN_SCALE, 0.0
        exact = earned * TOKEN_SCALE + self._residual
        added = round(exact)
        units = self._units + added
        if units >= self._capacity * TOKEN_SCALE:
            return self._capacity * TOKEN_SCALE, 0.0
        return units, exact - added

    def _refill(self, now: float) -> None:
        """
        Bring the token count up to date. Caller must hold the lock.
        :param now: Current clock reading.
        :return: None
        """
        self._units, self._residual = self._projected(now)
        self._last = max(self._last, now)

    def _check_cost(self, cost: int) -> None:
        if isinstance(cost, bool) or not isinstance(cost, int) or cost <= 0:
            raise InvalidRequestError(
                message=f"Cost must be a positive integer, got {cost!r}",
                details={"cost": cost},
            )

    def allow(self, cost: int = 1) -> bool:
        """
        Admit or reject a request costing ``cost`` tokens.

        The refill, the availability check and the deduction happen under one lock, so
        concurrent callers can never overdraw the bucket.

        :param cost: Positive number of tokens the request consumes.
        :return: True if the request is admitted and the tokens were deducted, False otherwise.
        """
        self._check_cost(cost)
        needed = cost * TOKEN_SCALE
        with self._lock:
            self._refill(self._clock())
            admitted = self._units >= needed
            if admitted:
                self._units -= needed
            available = self._units / TOKEN_SCALE
        if not admitted:
            logger.debug("Rejected request cost=%s available=%.6f", cost, available)
        return admitted

    def acquire(self, cost: int = 1, timeout: float | None = None) -> bool:
        """
        Take ``cost`` tokens, sleeping until they are replenished if necessary.
        :param cost: Positive number of tokens to take, at most the bucket capacity.
        :param timeout: Maximum seconds to wait. None waits as long as needed.
        :return: True once the tokens are taken, False if the timeout elapsed first.
        """
        self._check_cost(cost)
        if cost > self._capacity:
            raise InvalidRequestError(
                message=f"Cost {cost} exceeds bucket capacity {self._capacity}",
                details={"cost": cost, "capacity": self._capacity},
            )
        if timeout is not None and timeout < 0:
            raise InvalidRequestError(
                message=f"Timeout must be non-negative, got {timeout!r}",
                details={"cost": cost, "timeout": timeout},
            )

        needed = cost * TOKEN_SCALE
        deadline = None if timeout is None else self._clock() + timeout
        while True:
            with self._lock:
                now = self._clock()
                self._refill(now)
                if self._units >= needed:
                    self._units -= needed
                    return True
                if self._fill_rate == 0:
                    raise InvalidRequestError(
                        message="Bucket has no fill rate and cannot satisfy the request",
                        details={"cost": cost, "fill_rate": self._fill_rate},
                    )
                wait = (needed - self._units) / TOKEN_SCALE / self._fill_rate

            if deadline is not None:
                remaining = deadline - now
                if remaining <= 0:
                    logger.info("Timed out acquiring tokens cost=%s timeout=%s", cost, timeout)
                    return False
                wait = min(wait, remaining)

            logger.debug("Waiting %.6fs for tokens cost=%s", wait, cost)
            self._sleep(wait)

    def available(self) -> float:
        """
        Tokens a refill would yield right now. Does not change the bucket.
        :return: float
        """
        with self._lock:
            units, _ = self._projected(self._clock())
            return units / TOKEN_SCALE
