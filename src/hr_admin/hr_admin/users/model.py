from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    """Domain entity: an administrator account.

    Plain data object (no DB access). ``password_digest`` never leaves the
    service layer; use ``to_public_dict`` for anything rendered outward.
    """

    id: int
    name: str
    last_name: str
    email: str
    password_digest: str
    agency: str

    def to_public_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "last_name": self.last_name,
            "email": self.email,
            "agency": self.agency,
        }
