from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.responses import fail, server_error
from ..core.exceptions import NotFoundError, ValidationError
from ..container import Container
from .schemas import EmployeeInput

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/employees", methods=["GET"], endpoint="api_employees_list")
    def api_employees_list():
        try:
            employees = container.employee_service.list_employees()
            return jsonify([e.to_dict() for e in employees]), 200
        except Exception as e:
            return server_error(logger, "Failed to load employees", e)

    @app.route("/api/employees/<int:employee_id>", methods=["GET"], endpoint="api_employees_get")
    def api_employees_get(employee_id: int):
        try:
            employee = container.employee_service.get_employee(employee_id)
            return jsonify(employee.to_dict()), 200
        except NotFoundError as e:
            return fail(str(e), 404)
        except Exception as e:
            return server_error(logger, "Failed to load employee", e)

    @app.route("/api/employees", methods=["POST"], endpoint="api_employees_create")
    def api_employees_create():
        try:
            data = EmployeeInput.from_payload(request.get_json(silent=True))
            employee_id = container.employee_service.create_employee(data)
            return jsonify({"success": True, "message": "Employee created", "employeeId": employee_id}), 201
        except ValidationError as e:
            return fail(str(e), 400)
        except NotFoundError as e:
            return fail(str(e), 404)
        except Exception as e:
            return server_error(logger, "Server error while creating employee", e)

    @app.route("/api/employees/<int:employee_id>", methods=["PUT"], endpoint="api_employees_update")
    def api_employees_update(employee_id: int):
        """Full replace: optional fields left out of the body (photo, low_date) are cleared."""
        try:
            data = EmployeeInput.from_payload(request.get_json(silent=True))
            container.employee_service.update_employee(employee_id, data)
            return jsonify({"success": True, "message": "Employee updated"}), 200
        except ValidationError as e:
            return fail(str(e), 400)
        except NotFoundError as e:
            return fail(str(e), 404)
        except Exception as e:
            return server_error(logger, "Server error while updating employee", e)
