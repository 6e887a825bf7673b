"""
pwhash-core
===========
Password hashing primitives: PBKDF2, Argon2i, legacy digests, the bcrypt
SHA-256 prehash and constant-time comparison.
"""

__version__ = "0.2.0"

# Errors
from pwhash_core.errors import (
    HashError,
    ConfigurationError,
    AlgorithmUnavailableError,
    NativeFailure,
)

# Comparison
from pwhash_core.compare import safe_eq

# Configuration
from pwhash_core.config import (
    AlgorithmFamily,
    Pbkdf2Backend,
    HashingConfig,
    get_config,
    reset_config,
)

# Engines
from pwhash_core.pbkdf2 import hash_pbkdf2_sha256, hash_pbkdf2_sha1
from pwhash_core.argon2i import hash_argon2
from pwhash_core.legacy import hash_sha1, hash_md5, unix_crypt, hash_unix_crypt
from pwhash_core.prehash import hash_sha256

# Algorithms
from pwhash_core.algorithms import (
    AlgorithmName,
    Pbkdf2Params,
    Argon2Params,
    HashAlgorithm,
    get_algorithm,
    available_algorithms,
)

# Async Operations
from pwhash_core.async_ops import hash_async, verify_async

__all__ = [
    # Errors
    "HashError",
    "ConfigurationError",
    "AlgorithmUnavailableError",
    "NativeFailure",
    # Comparison
    "safe_eq",
    # Configuration
    "AlgorithmFamily",
    "Pbkdf2Backend",
    "HashingConfig",
    "get_config",
    "reset_config",
    # Engines
    "hash_pbkdf2_sha256",
    "hash_pbkdf2_sha1",
    "hash_argon2",
    "hash_sha1",
    "hash_md5",
    "unix_crypt",
    "hash_unix_crypt",
    "hash_sha256",
    # Algorithms
    "AlgorithmName",
    "Pbkdf2Params",
    "Argon2Params",
    "HashAlgorithm",
    "get_algorithm",
    "available_algorithms",
    # Async Operations
    "hash_async",
    "verify_async",
]
