"""Controller handling account signup requests."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from ...domain.contracts import AddAccount, AddAccountModel
from ..errors import InvalidParamError, MissingParamError
from ..helpers import bad_request, ok, server_error
from ..protocols import EmailValidator, HttpRequest, HttpResponse

logger = logging.getLogger(__name__)

REQUIRED_FIELDS: tuple[str, ...] = ("name", "email", "password", "passwordConfirmation")


def _is_missing(body: Mapping[str, Any], field: str) -> bool:
    value = body.get(field)
    return value is None or value == ""


class SignUpController:
    """Validate a signup payload, provision the account and shape the response.

    Fields must be present and textual; validation failures are returned as
    400 responses. Any exception raised while handling the request, including
    those from the injected collaborators, is logged and converted into an
    opaque 500 response.
    """

    def __init__(
        self,
        email_validator: EmailValidator,
        add_account: AddAccount,
        *,
        require_password_match: bool = False,
    ) -> None:
        """Store the collaborators; the controller holds no other state."""
        self._email_validator = email_validator
        self._add_account = add_account
        self._require_password_match = require_password_match

    async def handle(self, request: HttpRequest) -> HttpResponse:
        try:
            body = request.body or {}
            for field in REQUIRED_FIELDS:
                if _is_missing(body, field):
                    return bad_request(MissingParamError(field))
            for field in REQUIRED_FIELDS:
                if not isinstance(body[field], str):
                    return bad_request(InvalidParamError(field))

            name = body["name"]
            email = body["email"]
            password = body["password"]

            if self._require_password_match and password != body["passwordConfirmation"]:
                return bad_request(InvalidParamError("passwordConfirmation"))

            if not self._email_validator.is_valid(email):
                return bad_request(InvalidParamError("email"))

            account = await self._add_account.add(
                AddAccountModel(name=name, email=email, password=password)
            )
            return ok(account)
        except Exception:
            logger.exception("signup request failed")
            return server_error()
