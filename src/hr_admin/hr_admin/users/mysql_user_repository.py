from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabasePool
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import User
from .repository import UserRepository

_USER_COLUMNS = "id, name, last_name, email, password, agency"


def _row_to_user(row: dict) -> User:
    return User(
        id=int(row["id"]),
        name=row["name"],
        last_name=row["last_name"],
        email=row["email"],
        password_digest=row.get("password") or "",
        agency=row["agency"],
    )


class MySQLUserRepository(UserRepository):
    def __init__(self, pool: DatabasePool):
        self._pool = pool

    def get_by_id(self, user_id: int) -> Optional[User]:
        with db_cursor(self._pool) as (_, cur):
            cur.execute(f"SELECT {_USER_COLUMNS} FROM Users WHERE id=%s", (user_id,))
            return fetchone(cur, _row_to_user)

    def get_by_email(self, email: str) -> Optional[User]:
        with db_cursor(self._pool) as (_, cur):
            cur.execute(f"SELECT {_USER_COLUMNS} FROM Users WHERE email=%s", (email,))
            return fetchone(cur, _row_to_user)

    def exists(self, user_id: int) -> bool:
        with db_cursor(self._pool) as (_, cur):
            cur.execute("SELECT id FROM Users WHERE id=%s", (user_id,))
            return fetchone(cur) is not None

    def list_all(self) -> Sequence[User]:
        with db_cursor(self._pool) as (_, cur):
            cur.execute(f"SELECT {_USER_COLUMNS} FROM Users ORDER BY id DESC")
            return fetchall(cur, _row_to_user)

    def create_user(
        self,
        *,
        name: str,
        last_name: str,
        email: str,
        password_digest: str,
        agency: str,
    ) -> int:
        with db_cursor(self._pool) as (_, cur):
            cur.execute(
                """
                INSERT INTO Users (name, last_name, email, password, agency)
                VALUES (%s, %s, %s, %s, %s)
                """,
                (name, last_name, email, password_digest, agency),
            )
            return int(cur.lastrowid)

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
        with db_cursor(self._pool) as (_, cur):
            if password_digest:
                cur.execute(
                    """
                    UPDATE Users
                    SET name=%s, last_name=%s, email=%s, password=%s, agency=%s
                    WHERE id=%s
                    """,
                    (name, last_name, email, password_digest, agency, user_id),
                )
            else:
                cur.execute(
                    """
                    UPDATE Users
                    SET name=%s, last_name=%s, email=%s, agency=%s
                    WHERE id=%s
                    """,
                    (name, last_name, email, agency, user_id),
                )

    def delete_by_id(self, user_id: int) -> bool:
        with db_cursor(self._pool) as (_, cur):
            cur.execute("DELETE FROM Users WHERE id=%s", (user_id,))
            return cur.rowcount > 0
