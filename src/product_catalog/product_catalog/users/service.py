from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from werkzeug.security import generate_password_hash

from ..common.validators import require_min_length, require_non_empty
from ..core.constants import MAX_USERNAME_LENGTH, MIN_PASSWORD_LENGTH
from ..core.enums import Role
from ..core.exceptions import DataIntegrityError, UsernameNotFoundError, ValidationError
from .dto import AuthResponseDTO, UserDTO
from .model import UserDetails
from .repository import UserRepository

if TYPE_CHECKING:
    from ..security.jwt_generator import JwtGenerator
    from ..security.provider import AuthenticationProvider

logger = logging.getLogger(__name__)


class UserDetailsService:
    """Use case: load a user for the authentication provider."""

    def __init__(self, users: UserRepository):
        self._users = users

    def load_user_by_username(self, username: str) -> UserDetails:
        logger.info("Attempting to load user by username: %s", username)
        user = self._users.get_by_username(username)
        if not user:
            raise UsernameNotFoundError(f"User with username {username} not found")
        logger.info("User loaded successfully: %s", username)
        return UserDetails.from_user(user)


class AuthenticationService:
    """Use cases: log in (credentials -> token) and register."""

    def __init__(self, users: UserRepository, provider: "AuthenticationProvider", jwt_generator: "JwtGenerator"):
        self._users = users
        self._provider = provider
        self._jwt = jwt_generator

    def authenticate_user(self, dto: UserDTO) -> AuthResponseDTO:
        auth = self._provider.authenticate(dto.username, dto.password)
        token = self._jwt.generate_token(auth.principal, auth.role)
        logger.info("Issued token for user: %s", auth.principal)
        return AuthResponseDTO(access_token=token)

    def register_user(self, dto: UserDTO) -> int:
        username = require_non_empty(dto.username, "Username")
        if len(username) > MAX_USERNAME_LENGTH:
            raise ValidationError(f"Username must be at most {MAX_USERNAME_LENGTH} characters")
        require_min_length(dto.password, "Password", MIN_PASSWORD_LENGTH)

        role = dto.role or Role.ROLE_USER
        if role == Role.ROLE_ADMIN:
            raise ValidationError("Admin accounts cannot be self-registered")

        if self._users.exists_by_username(username):
            raise ValidationError("Username is already taken")

        try:
            user_id = self._users.create_user(
                username=username,
                password_hash=generate_password_hash(dto.password),
                role=role,
            )
        except DataIntegrityError:
            # unique key on username; lost a race with a concurrent registration
            logger.info("Registration for %s rejected by the store", username)
            raise ValidationError("Username is already taken")
        logger.info("Registered user %s (id=%s)", username, user_id)
        return user_id
