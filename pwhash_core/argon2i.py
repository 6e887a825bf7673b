"""
Argon2i Engine
==============
Argon2i key derivation through the raw argon2_context of the native library.

Every native buffer holding password, salt or derived bytes is zeroed
when the derivation finishes, whether it succeeded or not. The library
wipes its own working memory before returning.

Cost parameters are not validated here. The native library rejects values
it cannot handle (reported as NativeFailure); anything it accepts is run,
however expensive.
"""

import base64
import binascii
from contextlib import contextmanager
from typing import Iterator, Optional

import structlog
from argon2.low_level import ARGON2_VERSION, Type, core, error_to_str, ffi

from .errors import ConfigurationError, NativeFailure

logger = structlog.get_logger(__name__)

ALGORITHM = "argon2i"

# From argon2.h
ARGON2_OK = 0
ARGON2_FLAG_CLEAR_PASSWORD = 1 << 0
ARGON2_FLAG_CLEAR_SECRET = 1 << 1

DEFAULT_VERSION = ARGON2_VERSION
DEFAULT_HASH_LENGTH = 32


def decode_salt(salt: str) -> bytes:
    """
    Decode a standard-alphabet base64 salt. Missing "=" padding is
    restored first; characters outside the alphabet are still rejected.

    Raises:
        ConfigurationError: If the salt is not valid base64
    """
    try:
        return base64.b64decode(salt + "=" * (-len(salt) % 4), validate=True)
    except (binascii.Error, ValueError) as exc:  # ValueError: non-ASCII str
        logger.warning("argon2_salt_rejected", salt_length=len(salt))
        raise ConfigurationError("Salt is not valid base64", algorithm=ALGORITHM) from exc


def _wipe(buffer, size: int) -> None:
    if size:
        ffi.memmove(buffer, b"\x00" * size, size)


@contextmanager
def secure_buffer(data: Optional[bytes] = None, size: int = 0) -> Iterator:
    """
    Allocate a native uint8_t buffer that is zeroed on exit.

    Args:
        data: Bytes to copy in; its length wins over size
        size: Length of an empty buffer when no data is given

    Yields:
        cffi uint8_t[] buffer
    """
    if data is not None:
        size = len(data)
    buffer = ffi.new("uint8_t[]", size)
    try:
        if data:
            ffi.memmove(buffer, data, size)
        yield buffer
    finally:
        _wipe(buffer, size)


def derive_argon2i_raw(
    password: bytes,
    salt: bytes,
    time_cost: int,
    memory_cost: int,
    parallelism: int,
    version: int = DEFAULT_VERSION,
    hash_length: int = DEFAULT_HASH_LENGTH,
) -> bytes:
    """
    Run Argon2i over raw bytes.

    Args:
        password: Password bytes
        salt: Salt bytes (the library requires at least 8)
        time_cost: Number of passes
        memory_cost: Memory in KiB
        parallelism: Lanes and threads
        version: Argon2 version number (0x10 or 0x13)
        hash_length: Output length in bytes

    Returns:
        hash_length derived bytes

    Raises:
        NativeFailure: If the library returns an error code
    """
    with secure_buffer(password) as c_password, \
            secure_buffer(salt) as c_salt, \
            secure_buffer(size=hash_length) as c_out:
        context = ffi.new(
            "argon2_context *",
            {
                "version": version,
                "t_cost": time_cost,
                "m_cost": memory_cost,
                "lanes": parallelism,
                "threads": parallelism,
                "out": c_out,
                "outlen": hash_length,
                "pwd": c_password,
                "pwdlen": len(password),
                "salt": c_salt,
                "saltlen": len(salt),
                "secret": ffi.NULL,
                "secretlen": 0,
                "ad": ffi.NULL,
                "adlen": 0,
                "allocate_cbk": ffi.NULL,
                "free_cbk": ffi.NULL,
                "flags": ARGON2_FLAG_CLEAR_PASSWORD | ARGON2_FLAG_CLEAR_SECRET,
            },
        )
        result = core(context, Type.I.value)
        if result != ARGON2_OK:
            message = error_to_str(result)
            logger.warning("argon2_native_error", code=result, error=message)
            raise NativeFailure(message, algorithm=ALGORITHM)

        return bytes(ffi.buffer(c_out, hash_length))


def hash_argon2(
    password: str,
    salt: str,
    time_cost: int,
    memory_cost: int,
    parallelism: int,
    version: int = DEFAULT_VERSION,
    hash_length: int = DEFAULT_HASH_LENGTH,
) -> str:
    """
    Argon2i digest of a password with a base64 salt.

    The salt is decoded before anything native is touched.

    Returns:
        Digest as URL-safe base64 without padding

    Raises:
        ConfigurationError: If the salt is not valid base64
        NativeFailure: If the native derivation fails
    """
    salt_bytes = decode_salt(salt)
    digest = derive_argon2i_raw(
        password.encode("utf-8"),
        salt_bytes,
        time_cost,
        memory_cost,
        parallelism,
        version,
        hash_length,
    )
    return base64.urlsafe_b64encode(digest).rstrip(b"=").decode("ascii")
