"""
PBKDF2 Reference Backend
========================
Pure-Python PKCS#5 v2.0 (RFC 8018) key derivation over the stdlib HMAC.

Slow, but dependency-free and easy to audit. Output is bit-identical to
the accelerated backend.
"""

import hmac
from struct import pack


def _block(prf, salt: bytes, rounds: int, index: int) -> bytes:
    """Compute F(P, S, c, i) = U1 ^ U2 ^ ... ^ Uc for one output block."""
    mac = prf.copy()
    mac.update(salt + pack(">I", index))
    u = mac.digest()
    accumulator = int.from_bytes(u, "big")

    for _ in range(rounds - 1):
        mac = prf.copy()
        mac.update(u)
        u = mac.digest()
        accumulator ^= int.from_bytes(u, "big")

    return accumulator.to_bytes(len(u), "big")


def pbkdf2_hmac(
    hash_name: str,
    password: bytes,
    salt: bytes,
    iterations: int,
    dklen: int,
) -> bytes:
    """
    Derive a key with PBKDF2-HMAC.

    Args:
        hash_name: hashlib digest name ("sha256", "sha1")
        password: Password bytes (HMAC key)
        salt: Salt bytes
        iterations: Round count; U1 is always computed, so values
            below 1 behave like 1
        dklen: Derived key length in bytes

    Returns:
        Derived key
    """
    # Keyed once, copied per round
    prf = hmac.new(password, digestmod=hash_name)
    rounds = max(iterations, 1)
    block_count = -(-dklen // prf.digest_size)

    key = b"".join(
        _block(prf, salt, rounds, index)
        for index in range(1, block_count + 1)
    )
    return key[:dklen]
