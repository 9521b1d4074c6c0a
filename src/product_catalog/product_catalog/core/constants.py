"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100
DEFAULT_TOKEN_EXPIRATION_SECONDS = 3600
DEFAULT_JWT_ALGORITHM = "HS256"
# HS256 keys shorter than the digest size are rejected.
MIN_JWT_SECRET_BYTES = 32
MIN_PASSWORD_LENGTH = 6
MAX_USERNAME_LENGTH = 50
MAX_PAGE_NUMBER = 1_000_000

TOKEN_TYPE = "Bearer"
RECORDS_SAVED_MESSAGE = "Records saved successfully"
USER_REGISTERED_MESSAGE = "User registered successfully"

# Paths reachable without a bearer token.
PERMITTED_PATHS = frozenset({"/auth/login", "/auth/register", "/health"})
