"""
SHA-256 Prehash
===============
Normalizes passwords to a fixed 64-character hex string before bcrypt,
which only reads the first 72 bytes of its input.
"""

import hashlib


def hash_sha256(password: str) -> str:
    """SHA256(password) as 64 lowercase hex characters."""
    return hashlib.sha256(password.encode("utf-8")).hexdigest()
