"""Signup controller validating registration requests before account creation."""

from __future__ import annotations

import inspect
from typing import Any, Awaitable, Final, Mapping, TypeVar

from .contracts import CreateAccount, CreateAccountInput, EmailValidator
from .responses import (
    HttpRequest,
    HttpResponse,
    InvalidParam,
    MissingParam,
    bad_request,
    ok,
    server_error,
)

T = TypeVar("T")

REQUIRED_FIELDS: Final[tuple[str, ...]] = ("name", "email", "password", "passwordConfirmation")


def _is_missing(body: Mapping[str, Any], field: str) -> bool:
    value = body.get(field)
    return value is None or value == ""


async def _resolve(result: T | Awaitable[T]) -> T:
    if inspect.isawaitable(result):
        return await result
    return result


class SignUpController:
    """Turn a signup request into exactly one response envelope.

    Checks run in a fixed order and the first failure wins: required fields,
    password confirmation, email format, then account creation. Failures from
    the two collaborators become an opaque ``500`` and are never re-raised.
    """

    __slots__ = ("_email_validator", "_create_account")

    def __init__(self, email_validator: EmailValidator, create_account: CreateAccount) -> None:
        self._email_validator = email_validator
        self._create_account = create_account

    async def handle(self, request: HttpRequest) -> HttpResponse:
        body = request.body
        for field in REQUIRED_FIELDS:
            if _is_missing(body, field):
                return bad_request(MissingParam(field))

        if body["password"] != body["passwordConfirmation"]:
            return bad_request(InvalidParam("passwordConfirmation"))

        try:
            if not await _resolve(self._email_validator.is_valid(body["email"])):
                return bad_request(InvalidParam("email"))

            account = await _resolve(
                self._create_account.create(
                    CreateAccountInput(
                        name=body["name"],
                        email=body["email"],
                        password=body["password"],
                    )
                )
            )
        except Exception:
            return server_error()

        return ok(account)
