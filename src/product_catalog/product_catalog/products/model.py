from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Mapping, Optional

from ..common.datetime_utils import format_date, parse_date
from ..common.validators import require_non_empty, require_non_negative_int
from ..core.exceptions import ValidationError

# JSON field name -> DB column; also the whitelist for sorting.
COLUMNS = {
    "id": "id",
    "date": "date",
    "itemCode": "item_code",
    "itemName": "item_name",
    "itemQuantity": "item_quantity",
    "status": "status",
}


@dataclass(frozen=True)
class Product:
    id: Optional[int]
    date: Optional[date]
    item_code: str
    item_name: str
    item_quantity: int
    status: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "date": format_date(self.date) if self.date else None,
            "itemCode": self.item_code,
            "itemName": self.item_name,
            "itemQuantity": self.item_quantity,
            "status": self.status,
        }

    @classmethod
    def from_dict(cls, data: Any) -> "Product":
        """Build from a JSON record, collecting every field error at once."""
        if not isinstance(data, Mapping):
            raise ValidationError("Product record must be an object")

        errors: list[str] = []

        def check(fn, *args):
            try:
                return fn(*args)
            except ValidationError as e:
                errors.append(str(e))
                return None

        product_id = data.get("id")
        if product_id is not None:
            product_id = check(require_non_negative_int, product_id, "id")

        item_code = check(require_non_empty, _as_text(data.get("itemCode")), "itemCode")
        item_name = check(require_non_empty, data.get("itemName"), "itemName")
        item_quantity = check(require_non_negative_int, data.get("itemQuantity", 0), "itemQuantity")

        record_date = None
        raw_date = data.get("date")
        if raw_date not in (None, ""):
            try:
                record_date = parse_date(str(raw_date))
            except ValueError:
                errors.append(f"date '{raw_date}' is not a valid date")

        status = data.get("status")
        if status is not None and not isinstance(status, str):
            errors.append("status must be a string")

        if errors:
            raise ValidationError("Invalid product record", errors)

        return cls(
            id=product_id,
            date=record_date,
            item_code=item_code,
            item_name=item_name,
            item_quantity=item_quantity,
            status=status,
        )


def _as_text(value: Any) -> Any:
    # item codes are often sent as numbers
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return value
