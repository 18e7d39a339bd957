"""Presentation layer: controllers, response helpers, and the error taxonomy."""

from .errors import InvalidParamError, MissingParamError, ServerError
from .helpers import bad_request, ok, server_error
from .protocols import Controller, EmailValidator, HttpRequest, HttpResponse

__all__ = [
    "Controller",
    "EmailValidator",
    "HttpRequest",
    "HttpResponse",
    "InvalidParamError",
    "MissingParamError",
    "ServerError",
    "bad_request",
    "ok",
    "server_error",
]
