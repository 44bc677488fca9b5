"""Tests for the Postgres account repository using a stand-in connection pool."""

from __future__ import annotations

import hashlib
import uuid
from contextlib import contextmanager
from datetime import datetime, timezone

import pytest
from psycopg.errors import UniqueViolation

from signup_service.domain.contracts import CreateAccountInput
from signup_service.domain.errors import DuplicateEmailError
from signup_service.repository import AccountRepository


class FakeCursor:
    def __init__(self, conn: "FakeConnection") -> None:
        self._conn = conn
        self._row = None

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def execute(self, query, params):
        self._conn.executed.append((query, params))
        if self._conn.error is not None:
            raise self._conn.error
        account_id, name, email, _email_hash, password, created_at = params
        self._row = (uuid.UUID(account_id), name, email, password, created_at)

    def fetchone(self):
        return self._row


class FakeConnection:
    def __init__(self, error: Exception | None = None) -> None:
        self.error = error
        self.executed: list[tuple[str, tuple]] = []
        self.committed = False

    def cursor(self, row_factory=None):
        return FakeCursor(self)

    def commit(self):
        self.committed = True


class FakePool:
    def __init__(self, conn: FakeConnection) -> None:
        self.conn = conn

    @contextmanager
    def connection(self):
        yield self.conn


PAYLOAD = CreateAccountInput(name="name test", email="MailTest@mail.com", password="passwordtest")


def test_create_account_inserts_and_maps_row():
    conn = FakeConnection()
    repository = AccountRepository(FakePool(conn))  # type: ignore[arg-type]

    account = repository.create_account(PAYLOAD)

    assert conn.committed
    query, params = conn.executed[0]
    assert "INSERT INTO accounts" in query
    assert params[0] == account.id
    assert params[3] == hashlib.sha256(b"mailtest@mail.com").digest()
    assert isinstance(params[5], datetime) and params[5].tzinfo == timezone.utc
    assert isinstance(account.id, str)
    uuid.UUID(account.id)
    assert (account.name, account.email, account.password) == (
        "name test",
        "MailTest@mail.com",
        "passwordtest",
    )


def test_create_account_generates_distinct_ids():
    repository = AccountRepository(FakePool(FakeConnection()))  # type: ignore[arg-type]

    first = repository.create_account(PAYLOAD)
    second = repository.create_account(PAYLOAD)

    assert first.id != second.id


def test_unique_violation_becomes_duplicate_email_error():
    conn = FakeConnection(error=UniqueViolation("duplicate key value violates unique constraint"))
    repository = AccountRepository(FakePool(conn))  # type: ignore[arg-type]

    with pytest.raises(DuplicateEmailError) as excinfo:
        repository.create_account(PAYLOAD)

    assert excinfo.value.email == PAYLOAD.email
    assert isinstance(excinfo.value.__cause__, UniqueViolation)
    assert not conn.committed
