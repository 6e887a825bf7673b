"""
Algorithm Registry
==================
Runtime selection of a HashAlgorithm by name, filtered by configuration.
"""

from typing import Dict, List, Optional, Type, Union

import structlog

from ..config import HashingConfig, get_config
from ..errors import AlgorithmUnavailableError
from .base import HashAlgorithm
from .models import AlgorithmName
from .variants import (
    Argon2i,
    LegacyMd5,
    LegacySha1,
    Pbkdf2Sha1,
    Pbkdf2Sha256,
    Sha256Prehash,
    UnixCrypt,
)

logger = structlog.get_logger(__name__)

ALGORITHMS: Dict[AlgorithmName, Type[HashAlgorithm]] = {
    cls.name: cls
    for cls in (
        Pbkdf2Sha256,
        Pbkdf2Sha1,
        Argon2i,
        LegacySha1,
        LegacyMd5,
        UnixCrypt,
        Sha256Prehash,
    )
}


def _parse_name(name: Union[AlgorithmName, str]) -> AlgorithmName:
    if isinstance(name, AlgorithmName):
        return name
    try:
        return AlgorithmName(name)
    except ValueError:
        raise AlgorithmUnavailableError(f"Unknown algorithm: {name!r}") from None


def get_algorithm(
    name: Union[AlgorithmName, str],
    config: Optional[HashingConfig] = None,
) -> HashAlgorithm:
    """
    Get an algorithm instance by name.

    Args:
        name: Algorithm name (e.g. "pbkdf2_sha256")
        config: Configuration to check against; defaults to get_config()

    Returns:
        HashAlgorithm instance

    Raises:
        AlgorithmUnavailableError: If the name is unknown or its family is disabled
    """
    config = config or get_config()
    algorithm_name = _parse_name(name)
    cls = ALGORITHMS[algorithm_name]

    if not config.is_enabled(cls.family):
        logger.info(
            "algorithm_disabled",
            algorithm=algorithm_name.value,
            family=cls.family.value,
        )
        raise AlgorithmUnavailableError(
            f"Algorithm family '{cls.family.value}' is disabled",
            algorithm=algorithm_name.value,
        )

    if cls in (Pbkdf2Sha256, Pbkdf2Sha1):
        return cls(backend=config.pbkdf2_backend)
    return cls()


def available_algorithms(config: Optional[HashingConfig] = None) -> List[AlgorithmName]:
    """List the algorithms enabled by the configuration."""
    config = config or get_config()
    return [
        name for name, cls in ALGORITHMS.items()
        if config.is_enabled(cls.family)
    ]
