from __future__ import annotations

import atexit
import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask
from flask_cors import CORS

from config import get_settings_module

from .common.responses import register_api_error_handlers
from .container import Container, build_container
from .database.bootstrap import apply_schema, apply_seed_sql, ensure_demo_admin, list_tables
from .database.connection import DBConfig
from .employees.controller import register as register_employees
from .security.hashing import build_hasher
from .users.controller import register as register_users

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app(container: Optional[Container] = None, *, settings_module: Optional[str] = None) -> Flask:
    """Build the Flask app.

    When ``container`` is given (tests), no database work happens at startup.
    """
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    db_config = dict(getattr(settings, "DB_CONFIG"))
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["PORT"] = int(getattr(settings, "PORT", 3001))
    password_hasher = getattr(settings, "PASSWORD_HASHER", "legacy")

    configure_logging(getattr(settings, "LOG_LEVEL", "DEBUG" if app.config["DEBUG"] else "INFO"))
    CORS(app, resources={r"/api/*": {"origins": getattr(settings, "CORS_ORIGINS", ["*"])}})

    if container is None:
        db = DBConfig.from_mapping(db_config)
        logger.info("settings=%s db=%s hasher=%s", settings_module, db.describe(), password_hasher)

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db)
            logger.info("schema ready (tables=%s)", len(list_tables(db)))
        if bool(getattr(settings, "AUTO_SEED_DB", False)):
            apply_seed_sql(db)
            ensure_demo_admin(db, hasher=build_hasher(password_hasher))
            logger.info("demo seed ready")

        container = build_container(db_config=db_config, password_hasher=password_hasher)
        atexit.register(container.close)

    app.extensions["hr_admin.container"] = container

    register_api_error_handlers(app)
    register_users(app, container)
    register_employees(app, container)

    return app


def main() -> None:
    app = create_app()
    app.run(host="0.0.0.0", port=app.config["PORT"], debug=app.config["DEBUG"])


if __name__ == "__main__":
    main()
