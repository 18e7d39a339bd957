"""Request/response shapes and the capability contracts controllers depend on."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Protocol, runtime_checkable


@dataclass(frozen=True, slots=True)
class HttpRequest:
    """Transport-neutral request handed to a controller."""

    body: Mapping[str, Any] | None = None


@dataclass(frozen=True, slots=True)
class HttpResponse:
    """Status code plus body produced by a controller."""

    status_code: int
    body: Any


@runtime_checkable
class EmailValidator(Protocol):
    """Decides whether an email address is well formed. May raise."""

    def is_valid(self, email: str) -> bool:
        ...


class Controller(Protocol):
    async def handle(self, request: HttpRequest) -> HttpResponse:
        ...
