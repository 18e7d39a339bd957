"""Account persistence backends used by the account service."""

from __future__ import annotations

import hashlib
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from threading import Lock
from typing import Protocol

from psycopg.rows import tuple_row
from psycopg_pool import ConnectionPool


@dataclass(slots=True)
class AccountRecord:
    """Row projection of a stored account, including its password hash."""

    account_id: str
    name: str
    email: str
    password_hash: str
    created_at: datetime


class AccountStore(Protocol):
    def create_account(self, *, name: str, email: str, password_hash: str) -> AccountRecord:
        ...


def _hash_email(email: str) -> bytes:
    """Normalise an email address and return its SHA-256 digest."""
    return hashlib.sha256(email.lower().encode("utf-8")).digest()


class InMemoryAccountRepository:
    """Thread-safe dict-backed store for development and tests."""

    def __init__(self) -> None:
        self._accounts: dict[str, AccountRecord] = {}
        self._lock = Lock()

    def create_account(self, *, name: str, email: str, password_hash: str) -> AccountRecord:
        record = AccountRecord(
            account_id=str(uuid.uuid4()),
            name=name,
            email=email,
            password_hash=password_hash,
            created_at=datetime.now(timezone.utc),
        )
        with self._lock:
            self._accounts[record.account_id] = record
        return record


class AccountRepository:
    """Postgres-backed account persistence."""

    def __init__(self, pool: ConnectionPool) -> None:
        """Store the connection pool used for all database interactions."""
        self._pool = pool

    def create_account(self, *, name: str, email: str, password_hash: str) -> AccountRecord:
        """Insert a new account row and return its projection."""
        account_id = str(uuid.uuid4())
        now = datetime.now(timezone.utc)
        with self._pool.connection() as conn:
            with conn.cursor(row_factory=tuple_row) as cur:
                cur.execute(
                    """
                    INSERT INTO accounts (account_id, name, email, email_hash, password_hash, created_at)
                    VALUES (%s, %s, %s, %s, %s, %s)
                    RETURNING account_id, name, email, password_hash, created_at
                    """,
                    (account_id, name, email, _hash_email(email), password_hash, now),
                )
                row = cur.fetchone()
                conn.commit()
        return AccountRecord(*row)
