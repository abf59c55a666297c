import os

from .config import cors_origins_from_env, db_config_from_env, env_flag

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

PORT = int(os.getenv("PORT", "3001"))

DB_CONFIG = db_config_from_env()

PASSWORD_HASHER = os.getenv("PASSWORD_HASHER", "legacy")

CORS_ORIGINS = cors_origins_from_env()

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

AUTO_INIT_DB = env_flag("AUTO_INIT_DB", "0")
AUTO_SEED_DB = env_flag("AUTO_SEED_DB", "0")
