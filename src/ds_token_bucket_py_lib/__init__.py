"""
A Python package from the ds-protocol library collection.

**File:** ``__init__.py``
**Region:** ``ds-token-bucket-py-lib``

Example:

.. code-block:: python

    from ds_token_bucket_py_lib import TokenBucket

    limiter = TokenBucket(capacity=10, fill_rate=1.0)
    limiter.allow()
"""

from pathlib import Path

PACKAGE_NAME = "ds-token-bucket-py-lib"
_VERSION_FILE = Path(__file__).parent.parent.parent / "VERSION.txt"
__version__ = _VERSION_FILE.read_text().strip() if _VERSION_FILE.exists() else "0.0.0"

from .config import TokenBucketConfig  # noqa: E402
from .enums import ErrorCode  # noqa: E402
from .errors import InvalidConfigurationError, InvalidRequestError, TokenBucketException  # noqa: E402
from .token_bucket import TokenBucket  # noqa: E402
from .utils.clock import Clock, ManualClock  # noqa: E402

__all__ = [
    "Clock",
    "ErrorCode",
    "InvalidConfigurationError",
    "InvalidRequestError",
    "ManualClock",
    "TokenBucket",
    "TokenBucketConfig",
    "TokenBucketException",
]
