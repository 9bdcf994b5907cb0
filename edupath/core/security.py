"""Security helpers (hashing and verification)."""

from __future__ import annotations

import bcrypt
from argon2 import PasswordHasher, exceptions as argon_exc

_PREFIX = "argon2$"
_BCRYPT_PREFIXES = ("$2a$", "$2b$", "$2y$")


class CredentialHasher:
    """One-way password hashing.

    New digests are Argon2id with an ``argon2$`` prefix for detection. Digests
    written by the previous Node service are bcrypt and are still accepted by
    ``verify``.
    """

    def __init__(self, hasher: PasswordHasher | None = None) -> None:
        self._ph = hasher or PasswordHasher()

    def hash(self, password: str) -> str:
        return f"{_PREFIX}{self._ph.hash(password)}"

    def verify(self, password: str, digest: str | None) -> bool:
        stored = digest or ""
        if stored.startswith(_PREFIX):
            try:
                return self._ph.verify(stored[len(_PREFIX) :], password)
            except (argon_exc.VerifyMismatchError, argon_exc.VerificationError, argon_exc.InvalidHashError):
                return False
        if stored.startswith(_BCRYPT_PREFIXES):
            return _legacy_verify(password, stored)
        return False


def _legacy_verify(password: str, stored: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8"), stored.encode("utf-8"))
    except ValueError:
        # salt invalido ou senha acima de 72 bytes
        return False

