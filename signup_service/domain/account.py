from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class AccountModel:
    """Account as returned to callers once provisioned; never carries the password."""

    id: str
    name: str
    email: str

    def to_dict(self) -> dict[str, str]:
        return {"id": self.id, "name": self.name, "email": self.email}
