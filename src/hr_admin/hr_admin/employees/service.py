from __future__ import annotations

from ..core.exceptions import NotFoundError
from ..users.repository import UserRepository
from .model import Employee
from .repository import EmployeeRepository
from .schemas import EmployeeInput


class EmployeeService:
    """Use case: manage employees and keep ``id_user`` pointing at a real user."""

    def __init__(self, employees: EmployeeRepository, users: UserRepository):
        self._employees = employees
        self._users = users

    def list_employees(self) -> list[Employee]:
        return list(self._employees.list_all())

    def get_employee(self, employee_id: int) -> Employee:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError("Employee not found")
        return employee

    def _require_owner(self, user_id: int) -> None:
        if not self._users.exists(user_id):
            raise NotFoundError("The associated user does not exist")

    def create_employee(self, data: EmployeeInput) -> int:
        self._require_owner(data.id_user)
        return self._employees.create_employee(data)

    def update_employee(self, employee_id: int, data: EmployeeInput) -> None:
        if not self._employees.exists(employee_id):
            raise NotFoundError("Employee not found")
        self._require_owner(data.id_user)
        self._employees.update_employee(employee_id, data)
