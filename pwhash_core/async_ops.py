"""
Async Hashing Operations
========================
Event-loop-safe wrappers that run derivations in the default executor.

PBKDF2 and Argon2 are CPU-bound for as long as their cost parameters
dictate; calling them directly from a coroutine would stall the loop.
"""

import asyncio
from functools import partial
from typing import Any, Optional, Union

from .algorithms import AlgorithmName, HashAlgorithm, get_algorithm
from .config import HashingConfig


def _resolve(
    algorithm: Union[HashAlgorithm, AlgorithmName, str],
    config: Optional[HashingConfig],
) -> HashAlgorithm:
    if isinstance(algorithm, HashAlgorithm):
        return algorithm
    return get_algorithm(algorithm, config)


async def hash_async(
    algorithm: Union[HashAlgorithm, AlgorithmName, str],
    password: str,
    salt: Optional[str] = None,
    params: Any = None,
    config: Optional[HashingConfig] = None,
) -> str:
    """
    Hash a password without blocking the event loop.

    Args:
        algorithm: Algorithm instance or name
        password: Plain text password
        salt: Salt in the algorithm's encoding
        params: Cost parameters for the algorithm
        config: Configuration used to resolve a name

    Returns:
        Encoded digest
    """
    hasher = _resolve(algorithm, config)
    loop = asyncio.get_running_loop()

    return await loop.run_in_executor(
        None, partial(hasher.hash, password, salt, params)
    )


async def verify_async(
    algorithm: Union[HashAlgorithm, AlgorithmName, str],
    password: str,
    salt: Optional[str],
    params: Any,
    expected: str,
    config: Optional[HashingConfig] = None,
) -> bool:
    """
    Verify a password against a stored digest without blocking the event loop.

    Returns:
        True if the recomputed digest matches ``expected``
    """
    hasher = _resolve(algorithm, config)
    loop = asyncio.get_running_loop()

    return await loop.run_in_executor(
        None, partial(hasher.verify, password, salt, params, expected)
    )
