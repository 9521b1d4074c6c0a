from __future__ import annotations

from typing import Sequence


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""

    def __init__(self, message: str, errors: Sequence[str] = ()):
        super().__init__(message)
        self.errors = list(errors) or [message]


class AuthenticationError(DomainError):
    """Raised when a caller cannot be authenticated."""


class UsernameNotFoundError(AuthenticationError):
    """Raised when no user exists for the given username."""


class BadCredentialsError(AuthenticationError):
    """Raised when the password does not match or the account is disabled."""


class InvalidTokenError(AuthenticationError):
    """Raised when a bearer token is malformed, forged or expired."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class DataIntegrityError(DomainError):
    """Raised when the store rejects a write (duplicate key, constraint)."""
