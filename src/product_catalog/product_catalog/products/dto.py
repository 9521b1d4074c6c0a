from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Sequence

from ..core.exceptions import ValidationError
from .model import Product


@dataclass(frozen=True)
class ProductDTO:
    """Bulk-add request: a target table name plus the records to store."""

    table: str
    records: Sequence[Product]

    @classmethod
    def from_payload(cls, payload: Any) -> "ProductDTO":
        if not isinstance(payload, Mapping):
            raise ValidationError("Request body must be a JSON object")

        errors: list[str] = []

        table = payload.get("table")
        if not isinstance(table, str) or not table.strip():
            errors.append("Table name cannot be empty")

        raw_records = payload.get("records")
        records: list[Product] = []
        if not isinstance(raw_records, list) or not raw_records:
            errors.append("Product records cannot be empty")
        else:
            for index, raw in enumerate(raw_records):
                try:
                    records.append(Product.from_dict(raw))
                except ValidationError as e:
                    errors.extend(f"records[{index}]: {msg}" for msg in e.errors)

        if errors:
            raise ValidationError("Validation failed", errors)
        return cls(table=table.strip(), records=records)
