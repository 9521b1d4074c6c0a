from __future__ import annotations

from typing import Optional, Protocol

from ..core.enums import Role
from .model import User


class UserRepository(Protocol):
    """Repository interface for User.

    Note: the service layer depends on this interface, not on a concrete DB.
    """

    def get_by_username(self, username: str) -> Optional[User]:
        raise NotImplementedError

    def exists_by_username(self, username: str) -> bool:
        raise NotImplementedError

    def create_user(self, *, username: str, password_hash: str, role: Role) -> int:
        raise NotImplementedError
