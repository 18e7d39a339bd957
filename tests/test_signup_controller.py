"""Tests for the signup controller's validation pipeline and error containment."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import pytest

from signup_service.domain.account import AccountModel
from signup_service.domain.contracts import AddAccountModel
from signup_service.presentation.controllers.signup import SignUpController
from signup_service.presentation.errors import InvalidParamError, MissingParamError, ServerError
from signup_service.presentation.protocols import HttpRequest


class EmailValidatorStub:
    """Returns a fixed verdict and records every email it was asked about."""

    def __init__(self, result: bool = True) -> None:
        self.result = result
        self.calls: list[str] = []

    def is_valid(self, email: str) -> bool:
        self.calls.append(email)
        return self.result


class EmailValidatorWithError:
    def is_valid(self, email: str) -> bool:
        raise RuntimeError("validator exploded")


@dataclass
class AddAccountStub:
    account: AccountModel = field(
        default_factory=lambda: AccountModel(id="valid_id", name="valid_name", email="valid_email@mail.com")
    )
    error: Exception | None = None
    calls: list[AddAccountModel] = field(default_factory=list)

    async def add(self, account: AddAccountModel) -> AccountModel:
        self.calls.append(account)
        if self.error is not None:
            raise self.error
        return self.account


@dataclass
class Sut:
    controller: SignUpController
    email_validator: EmailValidatorStub
    add_account: AddAccountStub


def make_sut(*, require_password_match: bool = False) -> Sut:
    email_validator = EmailValidatorStub()
    add_account = AddAccountStub()
    controller = SignUpController(
        email_validator, add_account, require_password_match=require_password_match
    )
    return Sut(controller, email_validator, add_account)


def make_body(**overrides) -> dict:
    body = {
        "name": "any_name",
        "email": "any_email@mail.com",
        "password": "any_password",
        "passwordConfirmation": "any_password",
    }
    body.update(overrides)
    return {key: value for key, value in body.items() if value is not ...}


@pytest.mark.asyncio
@pytest.mark.parametrize("field_name", ["name", "email", "password", "passwordConfirmation"])
async def test_returns_400_when_a_field_is_absent(field_name):
    sut = make_sut()

    response = await sut.controller.handle(HttpRequest(body=make_body(**{field_name: ...})))

    assert response.status_code == 400
    assert response.body == MissingParamError(field_name)
    assert sut.add_account.calls == []


@pytest.mark.asyncio
@pytest.mark.parametrize("empty_value", [None, ""])
async def test_treats_none_and_empty_string_as_missing(empty_value):
    sut = make_sut()

    response = await sut.controller.handle(HttpRequest(body=make_body(email=empty_value)))

    assert response.status_code == 400
    assert response.body == MissingParamError("email")
    assert sut.email_validator.calls == []


@pytest.mark.asyncio
async def test_reports_only_first_missing_field_in_order():
    sut = make_sut()

    response = await sut.controller.handle(
        HttpRequest(body={"email": "any_email@mail.com", "passwordConfirmation": ""})
    )

    assert response.status_code == 400
    assert response.body == MissingParamError("name")


@pytest.mark.asyncio
async def test_missing_body_reports_name_first():
    sut = make_sut()

    response = await sut.controller.handle(HttpRequest(body=None))

    assert response.status_code == 400
    assert response.body == MissingParamError("name")


@pytest.mark.asyncio
async def test_missing_field_response_is_repeatable():
    sut = make_sut()
    request = HttpRequest(body=make_body(password=...))

    first = await sut.controller.handle(request)
    second = await sut.controller.handle(request)

    assert first == second


@pytest.mark.asyncio
async def test_returns_400_when_email_is_invalid():
    sut = make_sut()
    sut.email_validator.result = False

    response = await sut.controller.handle(HttpRequest(body=make_body(email="invalid_email@mail.com")))

    assert response.status_code == 400
    assert response.body == InvalidParamError("email")
    assert sut.add_account.calls == []


@pytest.mark.asyncio
async def test_calls_email_validator_with_submitted_email():
    sut = make_sut()

    await sut.controller.handle(HttpRequest(body=make_body()))

    assert sut.email_validator.calls == ["any_email@mail.com"]


@pytest.mark.asyncio
async def test_returns_500_when_email_validator_raises(caplog):
    add_account = AddAccountStub()
    controller = SignUpController(EmailValidatorWithError(), add_account)

    with caplog.at_level(logging.ERROR, logger="signup_service"):
        response = await controller.handle(HttpRequest(body=make_body()))

    assert response.status_code == 500
    assert response.body == ServerError()
    assert add_account.calls == []
    assert "signup request failed" in caplog.text


@pytest.mark.asyncio
async def test_calls_add_account_with_correct_values():
    sut = make_sut()

    await sut.controller.handle(HttpRequest(body=make_body()))

    assert sut.add_account.calls == [
        AddAccountModel(name="any_name", email="any_email@mail.com", password="any_password")
    ]


@pytest.mark.asyncio
async def test_returns_500_when_add_account_raises():
    sut = make_sut()
    sut.add_account.error = RuntimeError("database unavailable")

    response = await sut.controller.handle(HttpRequest(body=make_body()))

    assert response.status_code == 500
    assert response.body == ServerError()
    assert "database unavailable" not in response.body.message


@pytest.mark.asyncio
async def test_returns_200_with_created_account():
    sut = make_sut()
    sut.add_account.account = AccountModel(id="1", name="Jane", email="jane@x.com")

    response = await sut.controller.handle(
        HttpRequest(body={"name": "Jane", "email": "jane@x.com", "password": "pw", "passwordConfirmation": "pw"})
    )

    assert response.status_code == 200
    assert response.body == AccountModel(id="1", name="Jane", email="jane@x.com")


@pytest.mark.asyncio
async def test_password_mismatch_is_ignored_by_default():
    sut = make_sut()

    response = await sut.controller.handle(HttpRequest(body=make_body(passwordConfirmation="other")))

    assert response.status_code == 200


@pytest.mark.asyncio
async def test_password_mismatch_rejected_when_enabled():
    sut = make_sut(require_password_match=True)

    response = await sut.controller.handle(HttpRequest(body=make_body(passwordConfirmation="other")))

    assert response.status_code == 400
    assert response.body == InvalidParamError("passwordConfirmation")
    assert sut.email_validator.calls == []
    assert sut.add_account.calls == []


@pytest.mark.asyncio
@pytest.mark.parametrize("field_name", ["name", "email", "password", "passwordConfirmation"])
async def test_returns_400_when_a_field_is_not_text(field_name):
    sut = make_sut()

    response = await sut.controller.handle(HttpRequest(body=make_body(**{field_name: 123})))

    assert response.status_code == 400
    assert response.body == InvalidParamError(field_name)
    assert sut.email_validator.calls == []
    assert sut.add_account.calls == []


@pytest.mark.asyncio
async def test_missing_field_wins_over_non_text_field():
    sut = make_sut()

    response = await sut.controller.handle(HttpRequest(body=make_body(name=123, password="")))

    assert response.body == MissingParamError("password")
