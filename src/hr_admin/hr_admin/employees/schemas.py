from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Optional

from ..common.validators import (
    optional_date,
    optional_str,
    require_date,
    require_int,
    require_non_empty,
    require_object,
)
from ..core.exceptions import ValidationError

REQUIRED_FIELDS = ("name", "last_name", "agency", "date_of_birth", "high_date", "status", "id_user")


@dataclass(frozen=True)
class EmployeeInput:
    """Body of POST/PUT /api/employees.

    Dates arrive as YYYY-MM-DD strings. ``photo`` and ``low_date`` are optional.
    """

    name: str
    last_name: str
    agency: str
    date_of_birth: date
    high_date: date
    status: str
    id_user: int
    photo: Optional[str] = None
    low_date: Optional[date] = None

    @classmethod
    def from_payload(cls, payload: Any) -> "EmployeeInput":
        data = require_object(payload)
        missing = [f for f in REQUIRED_FIELDS if data.get(f) in (None, "")]
        if missing:
            raise ValidationError(f"All required fields must be provided (missing: {', '.join(missing)})")

        return cls(
            name=require_non_empty(data.get("name"), "name"),
            last_name=require_non_empty(data.get("last_name"), "last_name"),
            agency=require_non_empty(data.get("agency"), "agency"),
            date_of_birth=require_date(data.get("date_of_birth"), "date_of_birth"),
            high_date=require_date(data.get("high_date"), "high_date"),
            status=require_non_empty(data.get("status"), "status"),
            id_user=require_int(data.get("id_user"), "id_user"),
            photo=optional_str(data.get("photo"), "photo"),
            low_date=optional_date(data.get("low_date"), "low_date"),
        )
