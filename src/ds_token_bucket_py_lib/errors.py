"""
**File:** ``errors.py``
**Region:** ``ds_token_bucket_py_lib/errors``

Token bucket exceptions.

Both errors are raised synchronously to the caller and never mutate bucket state.

Example:
    >>> try:
    ...     TokenBucket(capacity=0, fill_rate=1.0)
    ... except InvalidConfigurationError as exc:
    ...     exc.details["capacity"]
    0
"""

from typing import Any

from ds_resource_plugin_py_lib.common.resource.errors import ResourceException

from .enums import ErrorCode


class TokenBucketException(ResourceException):
    """
    Base class for all token bucket errors.
    """

    def __init__(
        self,
        message: str,
        code: str,
        status_code: int = 400,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=code,
            status_code=status_code,
            details=dict(details or {}),
        )


class InvalidConfigurationError(TokenBucketException):
    """
    Raised when a bucket is constructed with an unusable capacity or fill rate.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(
            message=message,
            code=ErrorCode.INVALID_CONFIGURATION,
            details=details,
        )


class InvalidRequestError(TokenBucketException):
    """
    Raised when a caller asks for a malformed or unsatisfiable token cost.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(
            message=message,
            code=ErrorCode.INVALID_REQUEST,
            details=details,
        )
