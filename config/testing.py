from .config import db_config_from_env

SECRET_KEY = "test-secret"
JWT_SECRET = "test-jwt-secret-0123456789abcdef0123456789"
JWT_ALGORITHM = "HS256"
JWT_EXPIRATION_SECONDS = 600
LOG_LEVEL = "WARNING"

DB_CONFIG = db_config_from_env(default_password="12345")

DEBUG = False
TESTING = True

AUTO_INIT_DB = False
AUTO_SEED_DB = False
