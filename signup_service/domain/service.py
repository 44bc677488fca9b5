"""Account service exposing repository persistence as an async capability."""

from __future__ import annotations

import logging
from typing import Protocol

import anyio.to_thread

from .account import Account
from .contracts import CreateAccountInput
from .errors import DuplicateEmailError

logger = logging.getLogger(__name__)


class AccountStore(Protocol):
    def create_account(self, payload: CreateAccountInput) -> Account:
        ...


class AccountService:
    """Account creation backed by blocking storage, run off the event loop."""

    def __init__(self, repository: AccountStore) -> None:
        """Store the repository used to persist new accounts."""
        self._repository = repository

    async def create(self, payload: CreateAccountInput) -> Account:
        """Persist ``payload`` in a worker thread and return the stored account.

        Repository errors are logged and re-raised unchanged; callers decide how
        they are reported.
        """
        try:
            account = await anyio.to_thread.run_sync(self._repository.create_account, payload)
        except DuplicateEmailError:
            logger.warning("account creation rejected: email already registered")
            raise
        except Exception:
            logger.exception("account creation failed")
            raise
        logger.info("account created id=%s", account.id)
        return account
