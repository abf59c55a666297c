from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee
from .schemas import EmployeeInput


class EmployeeRepository(Protocol):
    def list_all(self) -> Sequence[Employee]:
        """Return employees joined with their owner's email."""

        raise NotImplementedError

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        raise NotImplementedError

    def exists(self, employee_id: int) -> bool:
        raise NotImplementedError

    def count_for_user(self, user_id: int) -> int:
        raise NotImplementedError

    def create_employee(self, data: EmployeeInput) -> int:
        raise NotImplementedError

    def update_employee(self, employee_id: int, data: EmployeeInput) -> None:
        raise NotImplementedError
