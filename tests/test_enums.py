"""
**File:** ``test_enums.py``
**Region:** ``tests/test_enums``

Enum contract tests.

Covers:
- Stability of ErrorCode string values.
- String-like behavior for serialization and logging.
"""

from __future__ import annotations

from ds_token_bucket_py_lib.enums import ErrorCode


def test_error_code_values_are_stable() -> None:
    """
    It defines stable string values for error codes.
    """

    assert ErrorCode.INVALID_CONFIGURATION == "DS.TOKEN_BUCKET.INVALID_CONFIGURATION"
    assert ErrorCode.INVALID_REQUEST == "DS.TOKEN_BUCKET.INVALID_REQUEST"


def test_error_code_is_string_like() -> None:
    """
    It behaves like a string for serialization purposes.
    """

    assert str(ErrorCode.INVALID_REQUEST) == "DS.TOKEN_BUCKET.INVALID_REQUEST"
