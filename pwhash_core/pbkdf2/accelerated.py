"""
PBKDF2 Accelerated Backend
==========================
PBKDF2-HMAC computed natively by OpenSSL through hashlib.
"""

import hashlib


def pbkdf2_hmac(
    hash_name: str,
    password: bytes,
    salt: bytes,
    iterations: int,
    dklen: int,
) -> bytes:
    """Derive a key with hashlib.pbkdf2_hmac (same contract as the reference backend)."""
    # hashlib rejects counts below 1; the reference backend treats them as 1
    return hashlib.pbkdf2_hmac(hash_name, password, salt, max(iterations, 1), dklen)
