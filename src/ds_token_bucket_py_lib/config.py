"""
**File:** ``config.py``
**Region:** ``ds_token_bucket_py_lib/config``

Token bucket configuration.

Example:
    >>> config = TokenBucketConfig(capacity=10, fill_rate=1.0)
    >>> bucket = TokenBucket.from_config(config)
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, kw_only=True)
class TokenBucketConfig:
    """
    Immutable capacity and fill rate for a TokenBucket.

    Values are validated when the bucket is built, not here.

    :param capacity: Maximum number of tokens the bucket can hold.
    :param fill_rate: Tokens added per second of elapsed time.
    """

    capacity: int = 20
    fill_rate: float = 10.0
