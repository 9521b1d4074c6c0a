from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..common.validators import require_non_empty
from ..core.constants import TOKEN_TYPE
from ..core.enums import Role
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class UserDTO:
    username: str
    password: str
    role: Optional[Role] = None

    @classmethod
    def from_payload(cls, payload: Any) -> "UserDTO":
        if not isinstance(payload, Mapping):
            raise ValidationError("Request body must be a JSON object")

        errors = []
        username = password = ""
        try:
            username = require_non_empty(payload.get("username"), "Username")
        except ValidationError as e:
            errors.append(str(e))
        raw_password = payload.get("password")
        if not isinstance(raw_password, str) or not raw_password:
            errors.append("Password cannot be empty")
        else:
            password = raw_password

        role = None
        if payload.get("role") is not None:
            try:
                role = Role(payload["role"])
            except ValueError:
                errors.append("Role is not valid")

        if errors:
            raise ValidationError("Invalid credentials payload", errors)
        return cls(username=username, password=password, role=role)


@dataclass(frozen=True)
class AuthResponseDTO:
    access_token: str
    token_type: str = TOKEN_TYPE

    def to_dict(self) -> dict:
        return {"accessToken": self.access_token, "tokenType": self.token_type}
