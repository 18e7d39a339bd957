"""Error values returned (never raised) by presentation controllers.

Errors compare structurally so two ``MissingParamError("name")`` instances are
interchangeable; the transport layer serialises them through :meth:`to_dict`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class MissingParamError:
    """A required request field was absent, ``None``, or empty."""

    param_name: str

    @property
    def name(self) -> str:
        return type(self).__name__

    @property
    def message(self) -> str:
        return f"Missing param: {self.param_name}"

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.name, "message": self.message, "param": self.param_name}


@dataclass(frozen=True, slots=True)
class InvalidParamError:
    """A present request field failed a semantic check."""

    param_name: str

    @property
    def name(self) -> str:
        return type(self).__name__

    @property
    def message(self) -> str:
        return f"Invalid param: {self.param_name}"

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.name, "message": self.message, "param": self.param_name}


@dataclass(frozen=True, slots=True)
class ServerError:
    """Opaque marker for any unexpected failure; carries no caller-visible detail."""

    @property
    def name(self) -> str:
        return type(self).__name__

    @property
    def message(self) -> str:
        return "Internal server error"

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.name, "message": self.message}


ParamError = MissingParamError | InvalidParamError
