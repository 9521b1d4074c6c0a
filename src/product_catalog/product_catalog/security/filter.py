"""Stateless request security for the Flask app.

Every request outside the permitted paths must carry
``Authorization: Bearer <token>``. The token is verified by ``JwtGenerator``
and the resulting principal is stored on ``flask.g``; anything else is turned
away by the entry point with a 401 JSON body.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import wraps
from typing import Iterable, Optional

from flask import Flask, g, jsonify, request

from ..core.constants import PERMITTED_PATHS, TOKEN_TYPE
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, AuthorizationError, ValidationError
from .jwt_generator import JwtGenerator

logger = logging.getLogger(__name__)

_BEARER_PREFIX = f"{TOKEN_TYPE} "


@dataclass(frozen=True)
class Principal:
    username: str
    role: Role

    @property
    def authorities(self) -> frozenset[str]:
        return frozenset({self.role.authority})


def extract_bearer_token(header: Optional[str]) -> Optional[str]:
    if not header or not header.startswith(_BEARER_PREFIX):
        return None
    token = header[len(_BEARER_PREFIX):].strip()
    return token or None


def current_principal() -> Optional[Principal]:
    return g.get("principal")


def unauthorized(message: str):
    """Entry point: the response sent to unauthenticated callers."""
    resp = jsonify({"status": 401, "error": "Unauthorized", "message": message, "path": request.path})
    resp.status_code = 401
    resp.headers["WWW-Authenticate"] = TOKEN_TYPE
    return resp


def forbidden(message: str):
    resp = jsonify({"status": 403, "error": "Forbidden", "message": message, "path": request.path})
    resp.status_code = 403
    return resp


def roles_required(*roles: Role):
    """Allow the view only for principals holding one of ``roles``."""
    allowed = frozenset(Role(r).authority for r in roles)

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            principal = current_principal()
            if principal is None:
                return unauthorized("Full authentication is required to access this resource")
            if allowed and not (principal.authorities & allowed):
                return forbidden("Access is denied")
            return view(*args, **kwargs)

        return wrapper

    return decorator


def register_security(
    app: Flask,
    jwt_generator: JwtGenerator,
    *,
    permitted_paths: Iterable[str] = PERMITTED_PATHS,
) -> None:
    permitted = frozenset(permitted_paths)

    @app.before_request
    def jwt_filter():
        if request.method == "OPTIONS" or request.path in permitted:
            return None

        token = extract_bearer_token(request.headers.get("Authorization"))
        if token is None:
            return unauthorized("Full authentication is required to access this resource")

        try:
            claims = jwt_generator.get_claims(token)
        except AuthenticationError as e:
            logger.info("Rejected request to %s: %s", request.path, e)
            return unauthorized(str(e))

        g.principal = Principal(username=claims.username, role=claims.role)
        return None

    @app.errorhandler(ValidationError)
    def handle_validation_error(e: ValidationError):
        return jsonify({"success": False, "message": str(e), "errors": e.errors}), 400

    @app.errorhandler(AuthenticationError)
    def handle_authentication_error(e: AuthenticationError):
        return unauthorized(str(e))

    @app.errorhandler(AuthorizationError)
    def handle_authorization_error(e: AuthorizationError):
        return forbidden(str(e))
