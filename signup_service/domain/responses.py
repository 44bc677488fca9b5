"""Transport-agnostic request/response envelope used by controllers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Mapping, Union

from .account import Account


@dataclass(slots=True, frozen=True)
class MissingParam:
    """A required field was absent from the request."""

    kind: ClassVar[str] = "MissingParam"
    field: str

    def to_dict(self) -> dict[str, str]:
        return {"kind": self.kind, "field": self.field}


@dataclass(slots=True, frozen=True)
class InvalidParam:
    """A field was present but violates a semantic rule."""

    kind: ClassVar[str] = "InvalidParam"
    field: str

    def to_dict(self) -> dict[str, str]:
        return {"kind": self.kind, "field": self.field}


@dataclass(slots=True, frozen=True)
class ServerFault:
    """Opaque failure; carries no detail about its cause."""

    kind: ClassVar[str] = "ServerFault"

    def to_dict(self) -> dict[str, str]:
        return {"kind": self.kind}


ErrorDescriptor = Union[MissingParam, InvalidParam, ServerFault]


@dataclass(slots=True, frozen=True)
class HttpRequest:
    body: Mapping[str, Any] = field(default_factory=dict)


@dataclass(slots=True, frozen=True)
class HttpResponse:
    status_code: int
    body: Account | ErrorDescriptor


def bad_request(error: MissingParam | InvalidParam) -> HttpResponse:
    return HttpResponse(status_code=400, body=error)


def server_error() -> HttpResponse:
    return HttpResponse(status_code=500, body=ServerFault())


def ok(account: Account) -> HttpResponse:
    return HttpResponse(status_code=200, body=account)
