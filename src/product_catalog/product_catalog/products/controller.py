from __future__ import annotations

import logging

from flask import Flask, Response, jsonify, request

from ..common.paging import Pageable
from ..core.constants import RECORDS_SAVED_MESSAGE
from ..core.enums import Role
from ..container import Container
from ..security.filter import roles_required
from .dto import ProductDTO
from .model import COLUMNS

logger = logging.getLogger(__name__)


def _text(body: str, status: int) -> Response:
    return Response(body, status=status, mimetype="text/plain")


def register(app: Flask, container: Container) -> None:
    @app.route("/products/add", methods=["POST"], endpoint="add_products")
    @roles_required(Role.ROLE_USER, Role.ROLE_ADMIN)
    def add_products():
        # ValidationError -> 400 via the registered error handler
        dto = ProductDTO.from_payload(request.get_json(silent=True))
        try:
            container.product_service.save_products(dto)
        except Exception as e:
            logger.exception("Saving products failed")
            return _text(str(e), 500)
        return _text(RECORDS_SAVED_MESSAGE, 200)

    @app.route("/products/all", methods=["GET"], endpoint="list_products")
    @roles_required(Role.ROLE_USER, Role.ROLE_ADMIN)
    def list_products():
        pageable = Pageable.from_args(request.args, sortable=tuple(COLUMNS))
        try:
            page = container.product_service.get_all_products(pageable)
        except Exception as e:
            logger.exception("Listing products failed")
            return _text(str(e), 500)
        return jsonify(page.to_dict(lambda p: p.to_dict()))
