"""HTTP route definitions for the signup service."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, Request
from fastapi.responses import JSONResponse
from prometheus_client import Counter
from pydantic import BaseModel, ValidationError

from ..domain.account import AccountModel
from ..presentation.helpers import server_error
from ..presentation.protocols import Controller, HttpRequest, HttpResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1")

SIGNUP_RESPONSES = Counter(
    "signup_responses_total",
    "Signup responses grouped by HTTP status code.",
    ["status_code"],
)


class AccountResponse(BaseModel):
    """Serialised representation of a created account."""

    id: str
    name: str
    email: str

    @classmethod
    def from_domain(cls, account: AccountModel) -> "AccountResponse":
        """Build a response model from the domain record."""
        return cls(id=account.id, name=account.name, email=account.email)


def get_controller(request: Request) -> Controller:
    """Resolve the signup controller stored on the FastAPI application state."""
    controller: Controller = request.app.state.signup_controller
    return controller


def _serialise_body(body: Any) -> Any:
    if isinstance(body, AccountModel):
        return AccountResponse.from_domain(body).model_dump()
    if hasattr(body, "to_dict"):
        return body.to_dict()
    return body


def to_json_response(response: HttpResponse) -> JSONResponse:
    """Render a controller response as a FastAPI ``JSONResponse``.

    A body that cannot be serialised is reported as a ``ServerError`` response.
    """
    try:
        content = _serialise_body(response.body)
    except ValidationError:
        logger.exception("signup response could not be serialised")
        response = server_error()
        content = _serialise_body(response.body)
    return JSONResponse(status_code=response.status_code, content=content)


@router.post("/signup")
async def signup(
    payload: dict[str, Any] | None = Body(default=None),
    controller: Controller = Depends(get_controller),
) -> JSONResponse:
    """Validate the signup payload and create the account."""
    result = await controller.handle(HttpRequest(body=payload))
    if result.status_code >= 400:
        logger.info("signup rejected status=%s error=%s", result.status_code, result.body.name)
    json_response = to_json_response(result)
    SIGNUP_RESPONSES.labels(status_code=str(json_response.status_code)).inc()
    return json_response
