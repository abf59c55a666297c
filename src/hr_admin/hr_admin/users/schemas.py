from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from ..common.validators import optional_str, require_non_empty, require_object
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class LoginRequest:
    email: str
    password: str

    @classmethod
    def from_payload(cls, payload: Any) -> "LoginRequest":
        data = require_object(payload)
        email = data.get("email")
        password = data.get("password")
        if not isinstance(email, str) or not isinstance(password, str) or not email or not password:
            raise ValidationError("Email and password are required")
        return cls(email=email, password=password)


@dataclass(frozen=True)
class UserCreate:
    name: str
    last_name: str
    email: str
    password: str
    agency: str

    @classmethod
    def from_payload(cls, payload: Any) -> "UserCreate":
        data = require_object(payload)
        values = {}
        for field in ("name", "last_name", "email", "password", "agency"):
            value = data.get(field)
            if not isinstance(value, str) or not value.strip():
                raise ValidationError("All fields are required: name, last_name, email, password, agency")
            values[field] = value
        return cls(
            name=values["name"].strip(),
            last_name=values["last_name"].strip(),
            email=values["email"].strip(),
            # passwords are taken verbatim
            password=values["password"],
            agency=values["agency"].strip(),
        )


@dataclass(frozen=True)
class UserUpdate:
    """Full replace of the profile; ``password`` is None when left blank."""

    name: str
    last_name: str
    email: str
    agency: str
    password: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: Any) -> "UserUpdate":
        data = require_object(payload)
        password = optional_str(data.get("password"), "password")
        if password is not None and not password.strip():
            password = None
        return cls(
            name=require_non_empty(data.get("name"), "name"),
            last_name=require_non_empty(data.get("last_name"), "last_name"),
            email=require_non_empty(data.get("email"), "email"),
            agency=require_non_empty(data.get("agency"), "agency"),
            password=password,
        )
