from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabasePool
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Employee
from .repository import EmployeeRepository
from .schemas import EmployeeInput

_SELECT_EMPLOYEES = """
    SELECT e.id, e.name, e.last_name, e.agency,
           e.date_of_birth, e.high_date, e.status, e.low_date,
           e.photo, e.id_user,
           u.email AS user_email
    FROM Employees e
    JOIN Users u ON e.id_user = u.id
"""


def _photo(value) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, (bytes, bytearray)):
        return value.decode("utf-8")
    return str(value)


def _row_to_employee(row: dict) -> Employee:
    return Employee(
        id=int(row["id"]),
        name=row["name"],
        last_name=row["last_name"],
        agency=row["agency"],
        date_of_birth=row["date_of_birth"],
        high_date=row["high_date"],
        status=row["status"],
        id_user=int(row["id_user"]),
        low_date=row.get("low_date"),
        photo=_photo(row.get("photo")),
        user_email=row.get("user_email"),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, pool: DatabasePool):
        self._pool = pool

    def list_all(self) -> Sequence[Employee]:
        with db_cursor(self._pool) as (_, cur):
            cur.execute(_SELECT_EMPLOYEES + " ORDER BY e.id")
            return fetchall(cur, _row_to_employee)

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        with db_cursor(self._pool) as (_, cur):
            cur.execute(_SELECT_EMPLOYEES + " WHERE e.id=%s", (employee_id,))
            return fetchone(cur, _row_to_employee)

    def exists(self, employee_id: int) -> bool:
        with db_cursor(self._pool) as (_, cur):
            cur.execute("SELECT id FROM Employees WHERE id=%s", (employee_id,))
            return fetchone(cur) is not None

    def count_for_user(self, user_id: int) -> int:
        with db_cursor(self._pool) as (_, cur):
            cur.execute("SELECT COUNT(*) AS total FROM Employees WHERE id_user=%s", (user_id,))
            row = fetchone(cur)
            return int(row["total"]) if row else 0

    def create_employee(self, data: EmployeeInput) -> int:
        with db_cursor(self._pool) as (_, cur):
            cur.execute(
                """
                INSERT INTO Employees
                    (name, last_name, agency, date_of_birth, high_date, status, low_date, photo, id_user)
                VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s)
                """,
                (
                    data.name,
                    data.last_name,
                    data.agency,
                    data.date_of_birth,
                    data.high_date,
                    data.status,
                    data.low_date,
                    data.photo,
                    data.id_user,
                ),
            )
            return int(cur.lastrowid)

    def update_employee(self, employee_id: int, data: EmployeeInput) -> None:
        with db_cursor(self._pool) as (_, cur):
            cur.execute(
                """
                UPDATE Employees
                SET name=%s, last_name=%s, agency=%s,
                    date_of_birth=%s, high_date=%s,
                    status=%s, low_date=%s, photo=%s, id_user=%s
                WHERE id=%s
                """,
                (
                    data.name,
                    data.last_name,
                    data.agency,
                    data.date_of_birth,
                    data.high_date,
                    data.status,
                    data.low_date,
                    data.photo,
                    data.id_user,
                    employee_id,
                ),
            )
