"""Utilities for hashing account passwords."""

from __future__ import annotations

import hashlib
import secrets

from ..config import get_settings

_ALGORITHM = "pbkdf2_sha256"


def hash_password(password: str, *, iterations: int | None = None) -> str:
    """Derive a salted PBKDF2-SHA256 digest suitable for storage.

    Parameters
    ----------
    password:
        Raw password submitted at signup.
    iterations:
        Optional override for the PBKDF2 work factor; defaults to the
        configured ``password_hash_iterations``.

    Returns
    -------
    str
        ``"pbkdf2_sha256$<iterations>$<salt hex>$<digest hex>"``.
    """

    rounds = iterations or get_settings().password_hash_iterations
    salt = secrets.token_bytes(16)
    digest = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, rounds)
    return f"{_ALGORITHM}${rounds}${salt.hex()}${digest.hex()}"
