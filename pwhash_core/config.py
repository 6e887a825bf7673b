"""
Hashing Configuration
=====================
Runtime selection of algorithm families and the PBKDF2 backend.

Environment variables:
- PWHASH_ENABLED_FAMILIES: comma-separated subset of
  pbkdf2, argon2, legacy, bcrypt-prehash (default: all)
- PWHASH_PBKDF2_BACKEND: reference or accelerated (default: accelerated)
"""

import os
from dataclasses import dataclass, field
from enum import Enum
from functools import lru_cache
from typing import FrozenSet, Iterable, Optional

from .errors import ConfigurationError


class AlgorithmFamily(str, Enum):
    """Groups of algorithms that are enabled together."""
    PBKDF2 = "pbkdf2"
    ARGON2 = "argon2"
    LEGACY = "legacy"
    BCRYPT_PREHASH = "bcrypt-prehash"


class Pbkdf2Backend(str, Enum):
    """PBKDF2 implementations. Both produce identical output."""
    REFERENCE = "reference"        # Pure Python
    ACCELERATED = "accelerated"    # OpenSSL through hashlib


ALL_FAMILIES: FrozenSet[AlgorithmFamily] = frozenset(AlgorithmFamily)


def parse_families(names: Iterable[str]) -> FrozenSet[AlgorithmFamily]:
    """
    Parse family names into a set of AlgorithmFamily values.

    Raises:
        ConfigurationError: If a name is not a known family
    """
    families = set()
    for name in names:
        name = name.strip().lower()
        if not name:
            continue
        try:
            families.add(AlgorithmFamily(name))
        except ValueError:
            raise ConfigurationError(f"Unknown algorithm family: {name!r}") from None
    return frozenset(families)


def parse_backend(name: str) -> Pbkdf2Backend:
    """Parse a PBKDF2 backend name."""
    try:
        return Pbkdf2Backend(name.strip().lower())
    except ValueError:
        raise ConfigurationError(f"Unknown PBKDF2 backend: {name!r}") from None


@dataclass(frozen=True)
class HashingConfig:
    """Which algorithm families are available and how PBKDF2 is computed."""
    enabled_families: FrozenSet[AlgorithmFamily] = field(default=ALL_FAMILIES)
    pbkdf2_backend: Pbkdf2Backend = Pbkdf2Backend.ACCELERATED

    def is_enabled(self, family: AlgorithmFamily) -> bool:
        return family in self.enabled_families

    @classmethod
    def from_env(cls, environ: Optional[dict] = None) -> "HashingConfig":
        """
        Build a configuration from environment variables.

        Args:
            environ: Mapping to read instead of os.environ

        Returns:
            HashingConfig instance
        """
        env = os.environ if environ is None else environ

        families = ALL_FAMILIES
        raw_families = env.get("PWHASH_ENABLED_FAMILIES")
        if raw_families is not None:
            families = parse_families(raw_families.split(","))

        backend = parse_backend(
            env.get("PWHASH_PBKDF2_BACKEND", Pbkdf2Backend.ACCELERATED.value)
        )
        return cls(enabled_families=families, pbkdf2_backend=backend)


@lru_cache(maxsize=1)
def get_config() -> HashingConfig:
    """Get the cached process-wide configuration."""
    return HashingConfig.from_env()


def reset_config() -> None:
    """Drop the cached configuration so the environment is read again."""
    get_config.cache_clear()
