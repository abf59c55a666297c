from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import User


class UserRepository(Protocol):
    """Repository interface for User.

    The service layer depends on this interface, not on a concrete database.
    """

    def get_by_id(self, user_id: int) -> Optional[User]:
        raise NotImplementedError

    def get_by_email(self, email: str) -> Optional[User]:
        raise NotImplementedError

    def exists(self, user_id: int) -> bool:
        raise NotImplementedError

    def list_all(self) -> Sequence[User]:
        raise NotImplementedError

    def create_user(
        self,
        *,
        name: str,
        last_name: str,
        email: str,
        password_digest: str,
        agency: str,
    ) -> int:
        raise NotImplementedError

    def update_user(
        self,
        user_id: int,
        *,
        name: str,
        last_name: str,
        email: str,
        agency: str,
        password_digest: Optional[str] = None,
    ) -> None:
        """Overwrite profile columns; the digest only when one is given."""

        raise NotImplementedError

    def delete_by_id(self, user_id: int) -> bool:
        raise NotImplementedError
