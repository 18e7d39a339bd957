"""Account service provisioning accounts from validated signup input."""

from __future__ import annotations

import asyncio
import logging

from .account import AccountModel
from .contracts import AddAccountModel
from ..repository import AccountStore
from ..security.hashing import hash_password

logger = logging.getLogger(__name__)


class AccountCreationError(RuntimeError):
    """Raised when the backing store fails to persist an account."""


class AccountService:
    """Implements :class:`~signup_service.domain.contracts.AddAccount` over an account store."""

    def __init__(self, repository: AccountStore, *, hash_iterations: int | None = None) -> None:
        """Store the repository and the PBKDF2 work factor used for new accounts."""
        self._repository = repository
        self._hash_iterations = hash_iterations

    async def add(self, account: AddAccountModel) -> AccountModel:
        """Hash the password, persist the account and return it without the password."""
        password_hash = await asyncio.to_thread(
            hash_password, account.password, iterations=self._hash_iterations
        )
        try:
            record = await asyncio.to_thread(
                self._repository.create_account,
                name=account.name,
                email=account.email,
                password_hash=password_hash,
            )
        except Exception as exc:
            raise AccountCreationError("account could not be stored") from exc
        logger.info("account created account_id=%s", record.account_id)
        return AccountModel(id=record.account_id, name=record.name, email=record.email)
