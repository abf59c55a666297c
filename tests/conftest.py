from __future__ import annotations

from dataclasses import replace
from typing import Optional

import pytest

from src.hr_admin.hr_admin.container import assemble
from src.hr_admin.hr_admin.employees.model import Employee
from src.hr_admin.hr_admin.employees.schemas import EmployeeInput
from src.hr_admin.hr_admin.main import create_app
from src.hr_admin.hr_admin.security.hashing import LegacyPasswordHasher
from src.hr_admin.hr_admin.users.model import User


class InMemoryUsers:
    def __init__(self):
        self.users: dict[int, User] = {}
        self._id = 0

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self.users.get(user_id)

    def get_by_email(self, email: str) -> Optional[User]:
        for u in self.users.values():
            if u.email == email:
                return u
        return None

    def exists(self, user_id: int) -> bool:
        return user_id in self.users

    def list_all(self):
        return sorted(self.users.values(), key=lambda u: u.id, reverse=True)

    def create_user(self, *, name, last_name, email, password_digest, agency) -> int:
        self._id += 1
        self.users[self._id] = User(
            id=self._id,
            name=name,
            last_name=last_name,
            email=email,
            password_digest=password_digest,
            agency=agency,
        )
        return self._id

    def update_user(self, user_id, *, name, last_name, email, agency, password_digest=None) -> None:
        current = self.users[user_id]
        self.users[user_id] = replace(
            current,
            name=name,
            last_name=last_name,
            email=email,
            agency=agency,
            password_digest=password_digest or current.password_digest,
        )

    def delete_by_id(self, user_id: int) -> bool:
        return self.users.pop(user_id, None) is not None


class InMemoryEmployees:
    def __init__(self, users: InMemoryUsers):
        self._users = users
        self.rows: dict[int, tuple[int, EmployeeInput]] = {}
        self._id = 0

    def _to_employee(self, employee_id: int, data: EmployeeInput) -> Employee:
        owner = self._users.get_by_id(data.id_user)
        return Employee(
            id=employee_id,
            name=data.name,
            last_name=data.last_name,
            agency=data.agency,
            date_of_birth=data.date_of_birth,
            high_date=data.high_date,
            status=data.status,
            id_user=data.id_user,
            low_date=data.low_date,
            photo=data.photo,
            user_email=owner.email if owner else None,
        )

    def list_all(self):
        return [self._to_employee(i, d) for i, (_, d) in sorted(self.rows.items())]

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        if employee_id not in self.rows:
            return None
        return self._to_employee(employee_id, self.rows[employee_id][1])

    def exists(self, employee_id: int) -> bool:
        return employee_id in self.rows

    def count_for_user(self, user_id: int) -> int:
        return sum(1 for _, d in self.rows.values() if d.id_user == user_id)

    def create_employee(self, data: EmployeeInput) -> int:
        self._id += 1
        self.rows[self._id] = (self._id, data)
        return self._id

    def update_employee(self, employee_id: int, data: EmployeeInput) -> None:
        self.rows[employee_id] = (employee_id, data)


@pytest.fixture
def hasher():
    return LegacyPasswordHasher()


@pytest.fixture
def users_repo():
    return InMemoryUsers()


@pytest.fixture
def employees_repo(users_repo):
    return InMemoryEmployees(users_repo)


@pytest.fixture
def container(users_repo, employees_repo, hasher):
    return assemble(users_repo=users_repo, employees_repo=employees_repo, hasher=hasher)


@pytest.fixture
def app(container):
    app = create_app(container, settings_module="config.testing")
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin(users_repo, hasher) -> User:
    user_id = users_repo.create_user(
        name="Admin",
        last_name="Demo",
        email="admin@rh.local",
        password_digest=hasher.hash("admin123"),
        agency="Central",
    )
    return users_repo.get_by_id(user_id)


@pytest.fixture
def employee_payload(admin) -> dict:
    return {
        "name": "Lucia",
        "last_name": "Torres",
        "agency": "North",
        "date_of_birth": "1990-05-14",
        "high_date": "2018-01-15",
        "status": "Activo",
        "photo": None,
        "id_user": admin.id,
    }
