"""
PBKDF2 Key Derivation
=====================
PBKDF2-HMAC-SHA256/SHA1 with interchangeable reference and accelerated backends.
"""

from .engine import (
    SHA1_KEY_LENGTH,
    SHA256_KEY_LENGTH,
    derive_key,
    hash_pbkdf2_sha1,
    hash_pbkdf2_sha256,
    resolve_backend,
)

__all__ = [
    "SHA1_KEY_LENGTH",
    "SHA256_KEY_LENGTH",
    "derive_key",
    "hash_pbkdf2_sha1",
    "hash_pbkdf2_sha256",
    "resolve_backend",
]
