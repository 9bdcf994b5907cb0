"""
Account signup, login and lookups.
"""

from __future__ import annotations

import logging
import secrets
from functools import cached_property
from typing import Optional

from edupath.core.security import CredentialHasher
from edupath.domain.records import Account, AccountSummary
from edupath.repositories.json_storage import CollectionStore
from edupath.services.errors import ConflictError, InvalidInputError, UnauthorizedError

logger = logging.getLogger(__name__)

_INVALID_CREDENTIALS = "Invalid email or password"


def _clean(value) -> str:
    return value.strip() if isinstance(value, str) else ""


def _is_password(value) -> bool:
    return isinstance(value, str) and bool(value)


class AccountRegistry:
    """Owns the accounts collection: unique emails, hashed passwords."""

    def __init__(self, store: CollectionStore[Account], hasher: CredentialHasher | None = None) -> None:
        self.store = store
        self.hasher = hasher or CredentialHasher()

    def find_by_email(self, email: str, *, case_sensitive: bool = False) -> Optional[Account]:
        if not email:
            return None
        accounts = self.store.load()
        if case_sensitive:
            return next((a for a in accounts if a.email == email), None)
        wanted = email.lower()
        return next((a for a in accounts if a.email.lower() == wanted), None)

    def signup(self, name: str, email: str, password: str) -> AccountSummary:
        name = _clean(name)
        raw_email = _clean(email)
        if not name or not raw_email or not _is_password(password):
            raise InvalidInputError("Missing fields")

        password_hash = self.hasher.hash(password)
        wanted = raw_email.lower()
        with self.store.transaction() as accounts:
            if any(a.email.lower() == wanted for a in accounts):
                raise ConflictError("Email already registered")
            account = Account(
                id=str(self.store.next_id(accounts)),
                name=name,
                email=raw_email,
                password_hash=password_hash,
            )
            accounts.append(account)
        logger.info("Registered account %s", account.id)
        return account.summary()

    def login(self, email: str, password: str) -> AccountSummary:
        raw_email = _clean(email)
        if not raw_email or not _is_password(password):
            raise InvalidInputError("Missing fields")
        account = self.find_by_email(raw_email)
        # unknown emails still pay for one verification
        digest = account.password_hash if account else self._placeholder_digest
        verified = self.hasher.verify(password, digest)
        if not account or not verified:
            logger.warning("Failed login attempt")
            raise UnauthorizedError(_INVALID_CREDENTIALS)
        return account.summary()

    @cached_property
    def _placeholder_digest(self) -> str:
        return self.hasher.hash(secrets.token_urlsafe(16))

    def list_all(self) -> list[Account]:
        """Every account including hash material; callers must be privileged."""
        return self.store.load()
