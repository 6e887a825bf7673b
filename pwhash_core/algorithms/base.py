"""
Hash Algorithm Interface
========================
Common interface implemented by every selectable algorithm.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional, Type

from ..compare import safe_eq
from ..config import AlgorithmFamily
from ..errors import ConfigurationError
from .models import AlgorithmName


class HashAlgorithm(ABC):
    """
    A stateless password hashing algorithm.

    Subclasses set ``name``, ``family`` and ``params_type`` and implement
    ``_hash``. Instances hold no per-call state and are safe to share
    between threads.
    """

    name: AlgorithmName
    family: AlgorithmFamily
    params_type: Optional[Type] = None
    uses_salt: bool = True

    def hash(self, password: str, salt: Optional[str] = None, params: Any = None) -> str:
        """
        Compute the encoded digest.

        Args:
            password: Plain text password
            salt: Salt in the encoding this algorithm expects
            params: Cost parameters of ``params_type`` (None if the
                algorithm has none)

        Returns:
            Encoded digest

        Raises:
            ConfigurationError: If params or salt do not fit the algorithm
            NativeFailure: If the underlying library fails
        """
        self._check_params(params)
        if self.uses_salt and salt is None:
            raise ConfigurationError("Salt is required", algorithm=self.name.value)
        return self._hash(password, salt, params)

    def verify(
        self,
        password: str,
        salt: Optional[str],
        params: Any,
        expected: str,
    ) -> bool:
        """Recompute the digest and compare it to ``expected`` in constant time."""
        return safe_eq(self.hash(password, salt, params), expected)

    def _check_params(self, params: Any) -> None:
        if self.params_type is None:
            if params is not None:
                raise ConfigurationError(
                    "Algorithm takes no parameters", algorithm=self.name.value
                )
        elif not isinstance(params, self.params_type):
            raise ConfigurationError(
                f"Expected {self.params_type.__name__}, got {type(params).__name__}",
                algorithm=self.name.value,
            )

    @abstractmethod
    def _hash(self, password: str, salt: Optional[str], params: Any) -> str:
        ...

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name.value}>"
