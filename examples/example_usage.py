"""Example: drive the service layer directly (no Flask).

Controllers are a thin layer; the rules about users and employees live in the services.
"""

import importlib

from config import get_settings_module

from src.hr_admin.hr_admin.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG, password_hasher=settings.PASSWORD_HASHER)
    try:
        for user in container.user_service.list_users():
            print(user.to_public_dict())
        for employee in container.employee_service.list_employees():
            print(employee.to_dict())
    finally:
        container.close()


if __name__ == "__main__":
    main()
