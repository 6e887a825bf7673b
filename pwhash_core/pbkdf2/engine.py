"""
PBKDF2 Engine
=============
PBKDF2-HMAC-SHA256 and PBKDF2-HMAC-SHA1 digests, base64 encoded.

The iteration count is passed through without bounds checking. Very large
values are a long CPU loop, not an error; callers exposing this to
untrusted input must enforce their own limits.
"""

import base64
from typing import Callable, Dict, Optional, Union

from ..config import Pbkdf2Backend, get_config, parse_backend
from . import accelerated, reference

SHA256_KEY_LENGTH = 32
SHA1_KEY_LENGTH = 20

_BACKENDS: Dict[Pbkdf2Backend, Callable[..., bytes]] = {
    Pbkdf2Backend.REFERENCE: reference.pbkdf2_hmac,
    Pbkdf2Backend.ACCELERATED: accelerated.pbkdf2_hmac,
}


def resolve_backend(backend: Union[Pbkdf2Backend, str, None] = None) -> Pbkdf2Backend:
    """Resolve an explicit backend, falling back to the configured one."""
    if backend is None:
        return get_config().pbkdf2_backend
    if isinstance(backend, Pbkdf2Backend):
        return backend
    return parse_backend(backend)


def derive_key(
    hash_name: str,
    password: str,
    salt: str,
    iterations: int,
    dklen: int,
    backend: Union[Pbkdf2Backend, str, None] = None,
) -> bytes:
    """
    Run PBKDF2 and return the raw key.

    Args:
        hash_name: HMAC digest ("sha256" or "sha1")
        password: Plain text password
        salt: Salt text, used as its UTF-8 bytes
        iterations: Round count
        dklen: Key length in bytes
        backend: Backend override; None uses the configured backend

    Returns:
        Derived key bytes
    """
    return _BACKENDS[resolve_backend(backend)](
        hash_name,
        password.encode("utf-8"),
        salt.encode("utf-8"),
        iterations,
        dklen,
    )


def hash_pbkdf2_sha256(
    password: str,
    salt: str,
    iterations: int,
    backend: Optional[Union[Pbkdf2Backend, str]] = None,
) -> str:
    """
    PBKDF2-HMAC-SHA256 digest.

    Returns:
        32-byte key as padded standard base64 (44 characters)
    """
    key = derive_key("sha256", password, salt, iterations, SHA256_KEY_LENGTH, backend)
    return base64.b64encode(key).decode("ascii")


def hash_pbkdf2_sha1(
    password: str,
    salt: str,
    iterations: int,
    backend: Optional[Union[Pbkdf2Backend, str]] = None,
) -> str:
    """
    PBKDF2-HMAC-SHA1 digest.

    Returns:
        20-byte key as padded standard base64 (28 characters)
    """
    key = derive_key("sha1", password, salt, iterations, SHA1_KEY_LENGTH, backend)
    return base64.b64encode(key).decode("ascii")
