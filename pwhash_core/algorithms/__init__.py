"""
Hash Algorithms
===============
Selectable password hashing algorithms behind one interface.
"""

from .models import AlgorithmName, Pbkdf2Params, Argon2Params
from .base import HashAlgorithm
from .variants import (
    Pbkdf2Sha256,
    Pbkdf2Sha1,
    Argon2i,
    LegacySha1,
    LegacyMd5,
    UnixCrypt,
    Sha256Prehash,
)
from .registry import ALGORITHMS, get_algorithm, available_algorithms

__all__ = [
    # Models
    "AlgorithmName",
    "Pbkdf2Params",
    "Argon2Params",
    # Interface
    "HashAlgorithm",
    # Variants
    "Pbkdf2Sha256",
    "Pbkdf2Sha1",
    "Argon2i",
    "LegacySha1",
    "LegacyMd5",
    "UnixCrypt",
    "Sha256Prehash",
    # Registry
    "ALGORITHMS",
    "get_algorithm",
    "available_algorithms",
]
