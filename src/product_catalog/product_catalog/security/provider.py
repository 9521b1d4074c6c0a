from __future__ import annotations

import logging
from dataclasses import dataclass

from werkzeug.security import check_password_hash

from ..core.enums import Role
from ..core.exceptions import BadCredentialsError, UsernameNotFoundError
from ..users.service import UserDetailsService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Authentication:
    """Result of a successful credential check."""

    principal: str
    role: Role


class AuthenticationProvider:
    """Check a username/password pair against the user store."""

    def __init__(self, user_details_service: UserDetailsService):
        self._user_details_service = user_details_service

    def authenticate(self, username: str, password: str) -> Authentication:
        try:
            details = self._user_details_service.load_user_by_username(username)
        except UsernameNotFoundError:
            # Same answer as a wrong password, so usernames cannot be probed.
            raise BadCredentialsError("Bad credentials")

        if not details.enabled:
            logger.info("Rejected login for disabled user: %s", username)
            raise BadCredentialsError("User account is disabled")

        try:
            ok = check_password_hash(details.password_hash, password)
        except (TypeError, ValueError):
            # e.g. placeholder hashes like 'CHANGE_ME' or corrupted values
            ok = False

        if not ok:
            logger.info("Rejected login for user: %s", username)
            raise BadCredentialsError("Bad credentials")

        return Authentication(principal=details.username, role=details.role)
