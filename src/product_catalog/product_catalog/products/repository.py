from __future__ import annotations

from typing import Protocol, Sequence

from ..common.paging import Page, Pageable
from .model import Product


class ProductRepository(Protocol):
    def save_all(self, products: Sequence[Product]) -> int:
        """Store all products in one transaction; return how many were written."""
        raise NotImplementedError

    def find_page(self, pageable: Pageable) -> Page[Product]:
        raise NotImplementedError
