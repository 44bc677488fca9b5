"""Database repository for account data."""

from __future__ import annotations

import hashlib
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone

from psycopg.errors import UniqueViolation
from psycopg.rows import tuple_row
from psycopg_pool import ConnectionPool

from .domain.account import Account
from .domain.contracts import CreateAccountInput
from .domain.errors import DuplicateEmailError


@dataclass(slots=True)
class AccountRecord:
    """Row projection used when mapping database tuples to domain aggregates."""

    account_id: str | uuid.UUID
    name: str
    email: str
    password: str
    created_at: datetime


class AccountRepository:
    """Postgres-backed account persistence keyed by a normalised email digest."""

    def __init__(self, pool: ConnectionPool) -> None:
        """Store the connection pool used for all database interactions."""
        self._pool = pool

    def _hash_email(self, email: str) -> bytes:
        """Normalise an email address and return its SHA-256 digest."""
        return hashlib.sha256(email.lower().encode("utf-8")).digest()

    def create_account(self, payload: CreateAccountInput) -> Account:
        """Insert a new account row and return it with its generated id.

        Raises
        ------
        DuplicateEmailError
            When an account with the same (case-insensitive) email already exists.
        """
        account_id = str(uuid.uuid4())
        now = datetime.now(timezone.utc)

        with self._pool.connection() as conn:
            with conn.cursor(row_factory=tuple_row) as cur:
                try:
                    cur.execute(
                        """
                        INSERT INTO accounts (account_id, name, email, email_hash, password, created_at)
                        VALUES (%s, %s, %s, %s, %s, %s)
                        RETURNING account_id, name, email, password, created_at
                        """,
                        (
                            account_id,
                            payload.name,
                            payload.email,
                            self._hash_email(payload.email),
                            payload.password,
                            now,
                        ),
                    )
                except UniqueViolation as exc:
                    raise DuplicateEmailError(payload.email) from exc
                record = AccountRecord(*cur.fetchone())
            conn.commit()

        return self._map_record(record)

    def _map_record(self, record: AccountRecord) -> Account:
        """Convert a row projection into the domain ``Account`` dataclass."""
        return Account(
            id=str(record.account_id),
            name=record.name,
            email=record.email,
            password=record.password,
        )
