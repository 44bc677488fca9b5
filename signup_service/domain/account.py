from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class Account:
    """Registered account as returned by the account creation capability."""

    id: str
    name: str
    email: str
    password: str
