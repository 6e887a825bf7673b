"""
Constant-Time Comparison
========================
Timing-safe equality check for digests.
"""

import hmac
from typing import Union


def _as_bytes(value: Union[str, bytes]):
    if isinstance(value, str):
        return value.encode("utf-8")
    # compare_digest rejects anything that is not bytes-like
    return value


def safe_eq(a: Union[str, bytes], b: Union[str, bytes]) -> bool:
    """
    Compare two digests without leaking the position of a mismatch.

    Strings are compared by their UTF-8 bytes. A length mismatch may
    return early since length is not secret.

    Args:
        a: Freshly computed digest
        b: Stored digest

    Returns:
        True if both values hold the same bytes

    Raises:
        TypeError: If either value is neither str nor bytes-like
    """
    return hmac.compare_digest(_as_bytes(a), _as_bytes(b))
