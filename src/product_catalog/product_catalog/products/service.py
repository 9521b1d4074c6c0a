from __future__ import annotations

import logging

from ..common.paging import Page, Pageable
from .dto import ProductDTO
from .model import Product
from .repository import ProductRepository

logger = logging.getLogger(__name__)


class ProductService:
    """Use cases: bulk-add products and list them page by page."""

    def __init__(self, products: ProductRepository):
        self._products = products

    def save_products(self, dto: ProductDTO) -> int:
        logger.info("Saving %s record(s) for table '%s'", len(dto.records), dto.table)
        saved = self._products.save_all(list(dto.records))
        logger.info("Saved %s record(s) for table '%s'", saved, dto.table)
        return saved

    def get_all_products(self, pageable: Pageable) -> Page[Product]:
        return self._products.find_page(pageable)
