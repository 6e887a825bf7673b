"""
Algorithm Models
================
Algorithm names and their cost parameters.
"""

from dataclasses import dataclass
from enum import Enum

from ..argon2i import DEFAULT_HASH_LENGTH, DEFAULT_VERSION


class AlgorithmName(str, Enum):
    """Selectable hashing algorithms."""
    PBKDF2_SHA256 = "pbkdf2_sha256"
    PBKDF2_SHA1 = "pbkdf2_sha1"
    ARGON2I = "argon2i"
    LEGACY_SHA1 = "sha1"
    LEGACY_MD5 = "md5"
    UNIX_CRYPT = "unix_crypt"
    SHA256_PREHASH = "sha256_prehash"


@dataclass(frozen=True)
class Pbkdf2Params:
    """PBKDF2 cost. Not range checked."""
    iterations: int


@dataclass(frozen=True)
class Argon2Params:
    """Argon2 cost. Not validated; the native library has the final say."""
    time_cost: int
    memory_cost: int          # KiB
    parallelism: int
    version: int = DEFAULT_VERSION
    hash_length: int = DEFAULT_HASH_LENGTH
