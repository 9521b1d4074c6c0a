"""Issue and verify the signed bearer tokens used by the API.

A token carries the username as ``sub``, the user's ``role`` and the
``iat``/``exp`` timestamps. It is accepted only when the signature matches the
configured secret, it has not expired and its role is a known ``Role``.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict

import jwt

from ..common.datetime_utils import now_utc
from ..core.constants import DEFAULT_JWT_ALGORITHM, DEFAULT_TOKEN_EXPIRATION_SECONDS, MIN_JWT_SECRET_BYTES
from ..core.enums import Role
from ..core.exceptions import InvalidTokenError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TokenClaims:
    """Decoded JWT payload."""

    username: str
    role: Role
    issued_at: datetime
    expires_at: datetime

    @property
    def authorities(self) -> frozenset[str]:
        return frozenset({self.role.authority})


class JwtGenerator:
    def __init__(
        self,
        secret: str,
        *,
        algorithm: str = DEFAULT_JWT_ALGORITHM,
        expiration_seconds: int = DEFAULT_TOKEN_EXPIRATION_SECONDS,
        clock: Callable[[], datetime] = now_utc,
    ):
        if not secret:
            raise ValueError("JWT secret must not be empty")
        if len(secret.encode("utf-8")) < MIN_JWT_SECRET_BYTES:
            raise ValueError(f"JWT secret must be at least {MIN_JWT_SECRET_BYTES} bytes")
        self._secret = secret
        self._algorithm = algorithm
        self._expiration = timedelta(seconds=int(expiration_seconds))
        self._clock = clock

    def generate_token(self, username: str, role: Role) -> str:
        issued_at = self._clock()
        payload: Dict[str, Any] = {
            "sub": username,
            "role": Role(role).value,
            "iat": int(issued_at.timestamp()),
            "exp": int((issued_at + self._expiration).timestamp()),
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def get_claims(self, token: str) -> TokenClaims:
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["sub", "exp", "iat"]},
            )
        except jwt.ExpiredSignatureError:
            raise InvalidTokenError("Token has expired")
        except jwt.InvalidTokenError as e:
            logger.debug("Rejected token: %s", e)
            raise InvalidTokenError("Invalid token")

        try:
            role = Role(payload.get("role"))
        except ValueError:
            raise InvalidTokenError("Invalid token: unknown role")

        return TokenClaims(
            username=str(payload["sub"]),
            role=role,
            issued_at=datetime.fromtimestamp(payload["iat"], tz=timezone.utc),
            expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
        )

    def validate_token(self, token: str) -> bool:
        try:
            self.get_claims(token)
        except InvalidTokenError:
            return False
        return True
