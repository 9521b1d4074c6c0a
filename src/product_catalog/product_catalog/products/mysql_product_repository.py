from __future__ import annotations

from typing import Sequence

from ..common.paging import Page, Pageable
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import COLUMNS, Product
from .repository import ProductRepository


class MySQLProductRepository(ProductRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def save_all(self, products: Sequence[Product]) -> int:
        if not products:
            return 0
        with db_cursor(self._conn_factory) as (_, cur):
            # Records with an existing id are updated in place.
            cur.executemany(
                """
                INSERT INTO products(id, date, item_code, item_name, item_quantity, status)
                VALUES(%s,%s,%s,%s,%s,%s) AS new
                ON DUPLICATE KEY UPDATE
                    date=new.date, item_code=new.item_code, item_name=new.item_name,
                    item_quantity=new.item_quantity, status=new.status
                """,
                [(p.id, p.date, p.item_code, p.item_name, p.item_quantity, p.status) for p in products],
            )
            return len(products)

    def find_page(self, pageable: Pageable) -> Page[Product]:
        order_by = "id ASC"
        if pageable.sort:
            # prop was whitelisted against COLUMNS by Pageable.from_args
            order_by = f"{COLUMNS[pageable.sort.prop]} {pageable.sort.direction}, id ASC"

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT COUNT(*) AS total FROM products")
            total = int(fetchone(cur)["total"])
            cur.execute(
                f"""
                SELECT id, date, item_code, item_name, item_quantity, status
                FROM products
                ORDER BY {order_by}
                LIMIT %s OFFSET %s
                """,
                (int(pageable.size), int(pageable.offset)),
            )
            rows = fetchall(cur)

        content = [
            Product(
                id=int(r["id"]),
                date=r.get("date"),
                item_code=r["item_code"],
                item_name=r["item_name"],
                item_quantity=int(r["item_quantity"]),
                status=r.get("status"),
            )
            for r in rows
        ]
        return Page(content=content, pageable=pageable, total_elements=total)
