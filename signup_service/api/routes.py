"""HTTP route definitions for the signup service."""

from __future__ import annotations

import logging
from typing import Any, Literal

from fastapi import APIRouter, Body, Depends, HTTPException, Request, status
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse
from prometheus_client import Counter
from pydantic import BaseModel

from ..config import get_settings
from ..domain.account import Account
from ..domain.responses import ErrorDescriptor, HttpRequest
from ..domain.signup import SignUpController
from ..security.rate_limiter import build_rate_limiter

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1")

SIGNUP_REQUESTS = Counter(
    "signup_requests_total",
    "Signup requests handled, by response status code.",
    ["status_code"],
)


class AccountResponse(BaseModel):
    """Serialised representation of an `Account`."""

    id: Any
    name: str
    email: str
    password: str

    @classmethod
    def from_domain(cls, account: Account) -> "AccountResponse":
        """Build a response model from the domain aggregate."""
        return cls(
            id=account.id,
            name=account.name,
            email=account.email,
            password=account.password,
        )


class ErrorResponse(BaseModel):
    """Single violated rule, or an opaque server fault without a field."""

    kind: Literal["MissingParam", "InvalidParam", "ServerFault"]
    field: str | None = None

    @classmethod
    def from_domain(cls, error: ErrorDescriptor) -> "ErrorResponse":
        """Build a response model from a domain error descriptor."""
        return cls(**error.to_dict())


settings = get_settings()

rate_limiter = build_rate_limiter(settings)


def get_controller(request: Request) -> SignUpController:
    """Resolve the `SignUpController` stored on the FastAPI application state."""
    controller: SignUpController = request.app.state.signup_controller
    return controller


def _client_key(request: Request) -> str:
    host = request.client.host if request.client else "unknown"
    return f"signup:{host}"


def _render(body: Account | ErrorDescriptor) -> dict[str, Any]:
    if isinstance(body, Account):
        return AccountResponse.from_domain(body).model_dump(mode="json")
    return ErrorResponse.from_domain(body).model_dump(exclude_none=True)


@router.post(
    "/signup",
    response_model=AccountResponse,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_429_TOO_MANY_REQUESTS: {"description": "Rate limited"},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
)
async def signup(
    request: Request,
    payload: dict[str, Any] | None = Body(default=None),
    controller: SignUpController = Depends(get_controller),
) -> JSONResponse:
    """Register an account after validating the submitted fields."""
    decision = await run_in_threadpool(rate_limiter.allow, _client_key(request))
    if not decision.allowed:
        raise HTTPException(
            status_code=status.HTTP_429_TOO_MANY_REQUESTS,
            detail="rate limited",
            headers={"Retry-After": str(decision.retry_after)},
        )

    response = await controller.handle(HttpRequest(body=payload or {}))
    SIGNUP_REQUESTS.labels(status_code=str(response.status_code)).inc()
    if response.status_code != status.HTTP_200_OK:
        logger.info("signup rejected status=%s kind=%s", response.status_code, response.body.kind)
    return JSONResponse(status_code=response.status_code, content=_render(response.body))
