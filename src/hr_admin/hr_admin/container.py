from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .database.connection import DBConfig, DatabasePool
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .security.hashing import PasswordHasher, build_hasher
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository
from .users.service import AuthService, UserService


@dataclass(frozen=True)
class Container:
    pool: Optional[DatabasePool]

    users_repo: UserRepository
    employees_repo: EmployeeRepository
    hasher: PasswordHasher

    auth_service: AuthService
    user_service: UserService
    employee_service: EmployeeService

    def close(self) -> None:
        if self.pool is not None:
            self.pool.close()


def assemble(
    *,
    users_repo: UserRepository,
    employees_repo: EmployeeRepository,
    hasher: PasswordHasher,
    pool: Optional[DatabasePool] = None,
) -> Container:
    return Container(
        pool=pool,
        users_repo=users_repo,
        employees_repo=employees_repo,
        hasher=hasher,
        auth_service=AuthService(users_repo, hasher),
        user_service=UserService(users_repo, employees_repo, hasher),
        employee_service=EmployeeService(employees_repo, users_repo),
    )


def build_container(*, db_config: dict, password_hasher: str = "legacy") -> Container:
    pool = DatabasePool(DBConfig.from_mapping(db_config))
    return assemble(
        users_repo=MySQLUserRepository(pool),
        employees_repo=MySQLEmployeeRepository(pool),
        hasher=build_hasher(password_hasher),
        pool=pool,
    )
