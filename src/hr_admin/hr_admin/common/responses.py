from __future__ import annotations

import logging

from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException


def fail(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def server_error(logger: logging.Logger, message: str, exc: Exception):
    """500 body echoes the raw error; this is an internal admin tool."""
    logger.exception("%s: %s", message, exc)
    return jsonify({"success": False, "message": message, "error": str(exc)}), 500


def register_api_error_handlers(app: Flask) -> None:
    """Routing failures under /api/ (bad id in the path, wrong method) answer in JSON."""

    @app.errorhandler(404)
    def api_not_found(e: HTTPException):
        if request.path.startswith("/api/"):
            return fail("Resource not found", 404)
        return e

    @app.errorhandler(405)
    def api_method_not_allowed(e: HTTPException):
        if request.path.startswith("/api/"):
            return fail("Method not allowed", 405)
        return e
