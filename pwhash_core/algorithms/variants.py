"""
Algorithm Variants
==================
HashAlgorithm implementations over the hashing engines.
"""

from typing import Optional

from .. import argon2i, legacy, prehash
from ..config import AlgorithmFamily, Pbkdf2Backend
from ..pbkdf2 import hash_pbkdf2_sha1, hash_pbkdf2_sha256
from .base import HashAlgorithm
from .models import AlgorithmName, Argon2Params, Pbkdf2Params


class _Pbkdf2Algorithm(HashAlgorithm):
    family = AlgorithmFamily.PBKDF2
    params_type = Pbkdf2Params

    def __init__(self, backend: Optional[Pbkdf2Backend] = None):
        self.backend = backend


class Pbkdf2Sha256(_Pbkdf2Algorithm):
    """PBKDF2-HMAC-SHA256, padded standard base64."""
    name = AlgorithmName.PBKDF2_SHA256

    def _hash(self, password, salt, params):
        return hash_pbkdf2_sha256(password, salt, params.iterations, self.backend)


class Pbkdf2Sha1(_Pbkdf2Algorithm):
    """PBKDF2-HMAC-SHA1, padded standard base64."""
    name = AlgorithmName.PBKDF2_SHA1

    def _hash(self, password, salt, params):
        return hash_pbkdf2_sha1(password, salt, params.iterations, self.backend)


class Argon2i(HashAlgorithm):
    """Argon2i with a base64 salt, unpadded URL-safe base64 output."""
    name = AlgorithmName.ARGON2I
    family = AlgorithmFamily.ARGON2
    params_type = Argon2Params

    def _hash(self, password, salt, params):
        return argon2i.hash_argon2(
            password,
            salt,
            params.time_cost,
            params.memory_cost,
            params.parallelism,
            params.version,
            params.hash_length,
        )


class LegacySha1(HashAlgorithm):
    name = AlgorithmName.LEGACY_SHA1
    family = AlgorithmFamily.LEGACY

    def _hash(self, password, salt, params):
        return legacy.hash_sha1(password, salt)


class LegacyMd5(HashAlgorithm):
    name = AlgorithmName.LEGACY_MD5
    family = AlgorithmFamily.LEGACY

    def _hash(self, password, salt, params):
        return legacy.hash_md5(password, salt)


class UnixCrypt(HashAlgorithm):
    """crypt(3) DES. Failures raise NativeFailure instead of returning ''."""
    name = AlgorithmName.UNIX_CRYPT
    family = AlgorithmFamily.LEGACY

    def _hash(self, password, salt, params):
        return legacy.unix_crypt(password, salt)


class Sha256Prehash(HashAlgorithm):
    """Unsalted SHA-256 hex digest fed to bcrypt. Any salt is ignored."""
    name = AlgorithmName.SHA256_PREHASH
    family = AlgorithmFamily.BCRYPT_PREHASH
    uses_salt = False

    def _hash(self, password, salt, params):
        return prehash.hash_sha256(password)
