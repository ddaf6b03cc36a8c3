"""Password hashing for the HomeStation login handshake."""

import hashlib

from ..config import PBKDF2_ITERATIONS, PBKDF2_KEY_BYTES


def derive_hash(secret: str, salt: str) -> str:
    """
    Replicate the router's browser-side PBKDF2 step from login.js:

      PBKDF2(secret, salt, {keySize:4, hasher:SHA256, iterations:1000})
      → 16 bytes, rendered as 32 lowercase hex characters

    The login runs it twice: once over the password with ``salt`` and once
    over that result with ``saltwebui``.
    """
    dk = hashlib.pbkdf2_hmac(
        "sha256",
        secret.encode("utf-8"),
        salt.encode("utf-8"),
        PBKDF2_ITERATIONS,
        dklen=PBKDF2_KEY_BYTES,
    )
    return dk.hex()
