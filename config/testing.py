import os

from .config import db_config_from_env, env_flag

SECRET_KEY = "test-secret"

PORT = int(os.getenv("PORT", "3001"))

DB_CONFIG = db_config_from_env(default_password="12345")

PASSWORD_HASHER = os.getenv("PASSWORD_HASHER", "legacy")

CORS_ORIGINS = ["*"]

DEBUG = False
TESTING = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")

AUTO_INIT_DB = env_flag("AUTO_INIT_DB", "0")
AUTO_SEED_DB = env_flag("AUTO_SEED_DB", "0")
