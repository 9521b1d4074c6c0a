from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User role; the value doubles as the granted authority name."""

    ROLE_USER = "ROLE_USER"
    ROLE_ADMIN = "ROLE_ADMIN"

    @property
    def authority(self) -> str:
        return self.value
