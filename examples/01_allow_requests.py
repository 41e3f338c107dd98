"""
**File:** ``01_allow_requests.py``
**Region:** ``examples/01_allow_requests``

Example 01: Guard a handler with a TokenBucket using ds-token-bucket-py-lib.
"""

from __future__ import annotations

import time

from ds_common_logger_py_lib import Logger

from ds_token_bucket_py_lib import InvalidRequestError, TokenBucket, TokenBucketConfig

Logger()
logger = Logger.get_logger(__name__)


def main() -> None:
    try:
        bucket = TokenBucket.from_config(TokenBucketConfig(capacity=5, fill_rate=2.0))
        logger.info("Built %r", bucket)

        for request_id in range(10):
            if bucket.allow():
                logger.info("request=%s admitted", request_id)
            else:
                logger.info("request=%s rejected", request_id)

        time.sleep(1.0)
        logger.info("available after 1s=%.2f", bucket.available())

        bucket.acquire(3, timeout=5.0)
        logger.info("acquired 3 tokens, remaining=%.2f", bucket.tokens)
    except InvalidRequestError as exc:
        logger.exception("Rate limiting failed: %s", exc.__dict__)


if __name__ == "__main__":
    main()
