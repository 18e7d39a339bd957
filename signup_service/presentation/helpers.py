"""Pure helpers mapping controller outcomes onto :class:`HttpResponse` values."""

from __future__ import annotations

from typing import Any

from .errors import ParamError, ServerError
from .protocols import HttpResponse


def bad_request(error: ParamError) -> HttpResponse:
    """Return a 400 response carrying a field-level validation error."""
    return HttpResponse(status_code=400, body=error)


def server_error() -> HttpResponse:
    """Return a 500 response with an opaque :class:`ServerError` body."""
    return HttpResponse(status_code=500, body=ServerError())


def ok(payload: Any) -> HttpResponse:
    return HttpResponse(status_code=200, body=payload)
