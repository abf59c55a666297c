from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.responses import fail, server_error
from ..core.exceptions import (
    AuthenticationError,
    BlockedError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from ..container import Container
from .schemas import LoginRequest, UserCreate, UserUpdate

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/auth/login", methods=["POST"], endpoint="api_login")
    def api_login():
        try:
            credentials = LoginRequest.from_payload(request.get_json(silent=True))
            result = container.auth_service.authenticate(credentials.email, credentials.password)
            return jsonify(result.to_dict()), 200
        except ValidationError as e:
            return fail(str(e), 400)
        except AuthenticationError as e:
            return fail(str(e), 401)
        except Exception as e:
            return server_error(logger, "Server error during login", e)

    @app.route("/api/users", methods=["GET"], endpoint="api_users_list")
    def api_users_list():
        try:
            users = container.user_service.list_users()
            return jsonify([{**u.to_public_dict(), "admin": "No"} for u in users]), 200
        except Exception as e:
            return server_error(logger, "Failed to load users", e)

    @app.route("/api/users/<int:user_id>", methods=["GET"], endpoint="api_users_get")
    def api_users_get(user_id: int):
        try:
            user = container.user_service.get_user(user_id)
            return jsonify(user.to_public_dict()), 200
        except NotFoundError as e:
            return fail(str(e), 404)
        except Exception as e:
            return server_error(logger, "Failed to load user", e)

    @app.route("/api/users", methods=["POST"], endpoint="api_users_create")
    def api_users_create():
        try:
            data = UserCreate.from_payload(request.get_json(silent=True))
            user_id = container.user_service.create_user(data)
            return jsonify({"success": True, "message": "User created", "userId": user_id}), 201
        except ValidationError as e:
            return fail(str(e), 400)
        except ConflictError as e:
            return fail(str(e), 409)
        except Exception as e:
            return server_error(logger, "Server error while creating user", e)

    @app.route("/api/users/<int:user_id>", methods=["PUT"], endpoint="api_users_update")
    def api_users_update(user_id: int):
        try:
            data = UserUpdate.from_payload(request.get_json(silent=True))
            container.user_service.update_user(user_id, data)
            return jsonify({"success": True, "message": "User updated"}), 200
        except ValidationError as e:
            return fail(str(e), 400)
        except NotFoundError as e:
            return fail(str(e), 404)
        except ConflictError as e:
            return fail(str(e), 409)
        except Exception as e:
            return server_error(logger, "Server error while updating user", e)

    @app.route("/api/users/<int:user_id>", methods=["DELETE"], endpoint="api_users_delete")
    def api_users_delete(user_id: int):
        try:
            container.user_service.delete_user(user_id)
            return jsonify({"success": True, "message": "User deleted"}), 200
        except NotFoundError as e:
            return fail(str(e), 404)
        except BlockedError as e:
            return fail(str(e), 400)
        except Exception as e:
            return server_error(logger, "Server error while deleting user", e)
