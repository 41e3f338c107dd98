"""
**File:** ``enums.py``
**Region:** ``ds_token_bucket_py_lib/enums``

Constants for the token bucket rate limiter.

Example:
    >>> ErrorCode.INVALID_CONFIGURATION
    'DS.TOKEN_BUCKET.INVALID_CONFIGURATION'
    >>> ErrorCode.INVALID_REQUEST
    'DS.TOKEN_BUCKET.INVALID_REQUEST'
"""

from enum import StrEnum


class ErrorCode(StrEnum):
    """
    Constants for token bucket error codes.
    """

    INVALID_CONFIGURATION = "DS.TOKEN_BUCKET.INVALID_CONFIGURATION"
    INVALID_REQUEST = "DS.TOKEN_BUCKET.INVALID_REQUEST"
