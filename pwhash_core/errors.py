"""
Hashing Errors
==============
Exception classes raised by the hashing engines.
"""

from typing import Optional


class HashError(Exception):
    """Base exception for all hashing failures."""

    def __init__(self, message: str, algorithm: Optional[str] = None):
        self.message = message
        self.algorithm = algorithm
        if algorithm:
            super().__init__(f"[{algorithm}] {message}")
        else:
            super().__init__(message)


class ConfigurationError(HashError):
    """Raised when the caller violates an input or configuration contract."""
    pass


class AlgorithmUnavailableError(ConfigurationError):
    """Raised when an algorithm is unknown or its family is disabled."""
    pass


class NativeFailure(HashError):
    """Raised when the underlying hashing library reports a failure."""
    pass
