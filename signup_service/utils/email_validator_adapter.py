"""Email-format check backed by the ``email-validator`` package."""

from __future__ import annotations

from email_validator import EmailNotValidError, validate_email


class EmailValidatorAdapter:
    """Adapts :func:`email_validator.validate_email` to a boolean ``is_valid`` check."""

    def __init__(self, *, check_deliverability: bool = False) -> None:
        self._check_deliverability = check_deliverability

    def is_valid(self, email: str) -> bool:
        if not isinstance(email, str):
            return False
        try:
            validate_email(email, check_deliverability=self._check_deliverability)
        except EmailNotValidError:
            return False
        return True
