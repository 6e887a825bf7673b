"""
Legacy Digests
==============
SHA-1, MD5 and Unix crypt(3) digests kept for pre-existing credential stores.

SHA-1 and MD5 hash the salt first, then the password. The order is part
of the stored format and must not change.
"""

import hashlib

import structlog
from passlib.hash import des_crypt

from .errors import NativeFailure

logger = structlog.get_logger(__name__)


def hash_sha1(password: str, salt: str) -> str:
    """SHA1(salt + password) as 40 lowercase hex characters."""
    digest = hashlib.sha1()
    digest.update(salt.encode("utf-8"))
    digest.update(password.encode("utf-8"))
    return digest.hexdigest()


def hash_md5(password: str, salt: str) -> str:
    """MD5(salt + password) as 32 lowercase hex characters."""
    digest = hashlib.md5()
    digest.update(salt.encode("utf-8"))
    digest.update(password.encode("utf-8"))
    return digest.hexdigest()


def unix_crypt(password: str, salt: str) -> str:
    """
    Traditional DES-based crypt(3).

    Like crypt(3), only the first two salt characters are used, so a
    stored crypt string can be passed as the salt. The crypt
    implementation rejects shorter salts and characters outside
    ``./0-9A-Za-z``.

    Args:
        password: Plain text password (only the first 8 characters count)
        salt: crypt(3) salt or a full crypt string

    Returns:
        13-character crypt string, salt first

    Raises:
        NativeFailure: If the crypt implementation rejects the input
    """
    try:
        return des_crypt.using(salt=salt[:2]).hash(password)
    except (ValueError, TypeError) as exc:
        raise NativeFailure(str(exc), algorithm="unix_crypt") from exc


def hash_unix_crypt(password: str, salt: str) -> str:
    """
    Unix crypt with the historical failure contract.

    Returns an empty string when crypt fails. Callers must treat an empty
    result as "never matches". Prefer unix_crypt(), which raises instead.
    """
    try:
        return unix_crypt(password, salt)
    except NativeFailure as exc:
        logger.warning("unix_crypt_failed", error=exc.message)
        return ""
