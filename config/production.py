import os

from .config import JWT_ALGORITHM, JWT_EXPIRATION_SECONDS, LOG_LEVEL, db_config_from_env

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")
# No default: create_app() refuses to start without a real secret.
JWT_SECRET = os.getenv("JWT_SECRET", "")

DB_CONFIG = db_config_from_env()

DEBUG = False

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
