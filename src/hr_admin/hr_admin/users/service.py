from __future__ import annotations

import logging
import secrets
from dataclasses import dataclass

from ..core.constants import LOGIN_TOKEN_BYTES
from ..core.exceptions import (
    AuthenticationError,
    BlockedError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from ..employees.repository import EmployeeRepository
from ..security.hashing import PasswordHasher
from .model import User
from .repository import UserRepository
from .schemas import UserCreate, UserUpdate

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid email or password"


@dataclass(frozen=True)
class LoginResult:
    """What the login endpoint hands back to the front-end."""

    user: User
    token: str

    def to_dict(self) -> dict:
        return {"success": True, "user": self.user.to_public_dict(), "token": self.token}


class AuthService:
    """Use case: authenticate an administrator (login).

    The returned token is random and is not stored or checked anywhere else.
    """

    def __init__(self, users: UserRepository, hasher: PasswordHasher):
        self._users = users
        self._hasher = hasher

    def authenticate(self, email: str, password: str) -> LoginResult:
        if not isinstance(email, str) or not isinstance(password, str) or not email or not password:
            raise ValidationError("Email and password are required")

        user = self._users.get_by_email(email)
        # Same error for unknown email and wrong password.
        if not user or not self._hasher.verify(user.password_digest, password):
            logger.info("Rejected login for %s", email)
            raise AuthenticationError(INVALID_CREDENTIALS)

        return LoginResult(user=user, token=secrets.token_hex(LOGIN_TOKEN_BYTES))


class UserService:
    """Use case: manage administrator accounts."""

    def __init__(self, users: UserRepository, employees: EmployeeRepository, hasher: PasswordHasher):
        self._users = users
        self._employees = employees
        self._hasher = hasher

    def list_users(self) -> list[User]:
        return list(self._users.list_all())

    def get_user(self, user_id: int) -> User:
        user = self._users.get_by_id(user_id)
        if not user:
            raise NotFoundError("User not found")
        return user

    def create_user(self, data: UserCreate) -> int:
        if self._users.get_by_email(data.email):
            raise ConflictError("A user with this email already exists")

        return self._users.create_user(
            name=data.name,
            last_name=data.last_name,
            email=data.email,
            password_digest=self._hasher.hash(data.password),
            agency=data.agency,
        )

    def update_user(self, user_id: int, data: UserUpdate) -> None:
        if not self._users.exists(user_id):
            raise NotFoundError("User not found")

        owner = self._users.get_by_email(data.email)
        if owner and owner.id != user_id:
            raise ConflictError("A user with this email already exists")

        digest = self._hasher.hash(data.password) if data.password else None
        self._users.update_user(
            user_id,
            name=data.name,
            last_name=data.last_name,
            email=data.email,
            agency=data.agency,
            password_digest=digest,
        )

    def delete_user(self, user_id: int) -> None:
        if not self._users.exists(user_id):
            raise NotFoundError("User not found")

        if self._employees.count_for_user(user_id) > 0:
            logger.info("Refused to delete user %s: employees still reference it", user_id)
            raise BlockedError(
                "This user cannot be deleted because it has associated employees. "
                "Reassign or remove those employees first."
            )

        if not self._users.delete_by_id(user_id):
            raise NotFoundError("User not found")
