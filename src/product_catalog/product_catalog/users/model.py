from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Domain entity: User.

    Note: Plain data object (no DB access code here).
    """

    user_id: Optional[int]
    username: str
    password_hash: str
    role: Role
    is_active: bool = True


@dataclass(frozen=True)
class UserDetails:
    """What the authentication provider needs to know about a user."""

    username: str
    password_hash: str
    role: Role
    enabled: bool = True

    @property
    def authorities(self) -> frozenset[str]:
        return frozenset({self.role.authority})

    @classmethod
    def from_user(cls, user: User) -> "UserDetails":
        return cls(
            username=user.username,
            password_hash=user.password_hash,
            role=user.role,
            enabled=user.is_active,
        )
