"""Domain-level contracts shared by the signup controller and its collaborators."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Awaitable, Protocol

from .account import Account


@dataclass(slots=True, frozen=True)
class CreateAccountInput:
    """Validated inputs required to create an account.

    The password confirmation is checked by the controller and never reaches
    the account creation capability.
    """

    name: str
    email: str
    password: str


class EmailValidator(Protocol):
    """Capability that decides whether an email address is well formed."""

    def is_valid(self, email: str) -> bool | Awaitable[bool]:
        ...


class CreateAccount(Protocol):
    """Capability that persists a new account and returns it with its assigned id."""

    def create(self, payload: CreateAccountInput) -> Account | Awaitable[Account]:
        ...
