"""Domain-level contracts shared by the presentation and data layers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from .account import AccountModel


@dataclass(frozen=True, slots=True)
class AddAccountModel:
    """Validated inputs required to create an account."""

    name: str
    email: str
    password: str


@runtime_checkable
class AddAccount(Protocol):
    """Provisions an account from validated signup input."""

    async def add(self, account: AddAccountModel) -> AccountModel:
        ...
