from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..common.datetime_utils import format_dmy


@dataclass(frozen=True)
class Employee:
    """Domain entity: an employee owned by an administrator (``id_user``)."""

    id: int
    name: str
    last_name: str
    agency: str
    date_of_birth: date
    high_date: date
    status: str
    id_user: int
    low_date: Optional[date] = None
    photo: Optional[str] = None
    user_email: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "last_name": self.last_name,
            "agency": self.agency,
            "date_of_birth": format_dmy(self.date_of_birth),
            "high_date": format_dmy(self.high_date),
            "status": self.status,
            "low_date": format_dmy(self.low_date),
            "photo": self.photo,
            "id_user": self.id_user,
            "user_email": self.user_email,
        }
