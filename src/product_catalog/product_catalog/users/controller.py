from __future__ import annotations

from flask import Flask, Response, jsonify, request

from ..core.constants import USER_REGISTERED_MESSAGE
from ..container import Container
from .dto import UserDTO


def register(app: Flask, container: Container) -> None:
    # AuthenticationError -> 401 and ValidationError -> 400 via the registered error handlers.

    @app.route("/auth/login", methods=["POST"], endpoint="login")
    def login():
        dto = UserDTO.from_payload(request.get_json(silent=True))
        response = container.authentication_service.authenticate_user(dto)
        return jsonify(response.to_dict())

    @app.route("/auth/register", methods=["POST"], endpoint="register")
    def register_user():
        dto = UserDTO.from_payload(request.get_json(silent=True))
        container.authentication_service.register_user(dto)
        return Response(USER_REGISTERED_MESSAGE, status=201, mimetype="text/plain")

    @app.route("/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"status": "UP"})
