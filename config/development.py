import os

from .config import cors_origins_from_env, db_config_from_env, env_flag

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

PORT = int(os.getenv("PORT", "3001"))

DB_CONFIG = db_config_from_env()

# 'legacy' keeps existing MD5 digests valid; 'strong' switches to salted werkzeug hashes
PASSWORD_HASHER = os.getenv("PASSWORD_HASHER", "legacy")

CORS_ORIGINS = cors_origins_from_env()

DEBUG = env_flag("DEBUG", "1")
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = env_flag("AUTO_INIT_DB", "1")
# Optional: also seed demo data on startup
AUTO_SEED_DB = env_flag("AUTO_SEED_DB", "0")
