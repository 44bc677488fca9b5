"""Exceptions raised by account creation collaborators."""

from __future__ import annotations


class AccountCreationError(Exception):
    """Base class for failures while persisting a new account."""


class DuplicateEmailError(AccountCreationError):
    """Raised when an account already exists for the given email address."""

    def __init__(self, email: str) -> None:
        super().__init__("account already exists for email")
        self.email = email
