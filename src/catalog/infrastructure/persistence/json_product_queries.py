"""JSON-file-backed implementation of ProductQueries.

Handy for local use without a database. Records are kept in insertion
order; every call re-reads the file, so it is single-process only.
"""

from __future__ import annotations

import json
import uuid
from datetime import datetime
from decimal import Decimal
from pathlib import Path
from typing import Callable

from loguru import logger

from catalog.infrastructure.persistence.product_queries import ProductQueries
from catalog.infrastructure.persistence.product_record import ProductRecord


class JsonProductQueries(ProductQueries):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- Reads ----------------------------------------------------------------

    def get_by_id(self, product_id: uuid.UUID) -> ProductRecord | None:
        for record in self._load():
            if record.id == product_id:
                return record
        return None

    def list_all(self) -> list[ProductRecord]:
        return self._load()

    def search_by_name(self, fragment: str) -> list[ProductRecord]:
        needle = fragment.casefold()
        return self._where(lambda r: needle in r.name.casefold())

    def list_by_name(self, name: str) -> list[ProductRecord]:
        return self._where(lambda r: r.name == name)

    def list_in_stock(self) -> list[ProductRecord]:
        return self._where(lambda r: r.stock_quantity > 0)

    def list_out_of_stock(self) -> list[ProductRecord]:
        return self._where(lambda r: r.stock_quantity == 0)

    def list_by_price_range(
        self, min_amount: Decimal, max_amount: Decimal
    ) -> list[ProductRecord]:
        return self._where(lambda r: min_amount <= r.price_amount <= max_amount)

    def list_by_currency(self, currency_code: str) -> list[ProductRecord]:
        return self._where(lambda r: r.price_currency == currency_code)

    def list_low_stock(self, threshold: int) -> list[ProductRecord]:
        return self._where(lambda r: r.stock_quantity < threshold)

    def count(self) -> int:
        return len(self._load())

    def count_in_stock(self) -> int:
        return len(self.list_in_stock())

    def exists_by_id(self, product_id: uuid.UUID) -> bool:
        return self.get_by_id(product_id) is not None

    # --- Writes ---------------------------------------------------------------

    def insert(self, record: ProductRecord) -> None:
        records = self._load()
        records.append(record)
        self._persist(records)
        logger.debug("Inserted product {} into {}", record.id, self._file_path)

    def update(self, record: ProductRecord) -> None:
        records = self._load()
        for i, stored in enumerate(records):
            if stored.id == record.id:
                records[i] = record
                break
        self._persist(records)
        logger.debug("Updated product {} in {}", record.id, self._file_path)

    def delete_by_id(self, product_id: uuid.UUID) -> None:
        self._persist([r for r in self._load() if r.id != product_id])

    def delete_all(self) -> None:
        self._persist([])

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(record: ProductRecord) -> dict:
        return {
            "id": str(record.id),
            "name": record.name,
            "description": record.description,
            "price_amount": str(record.price_amount),
            "price_currency": record.price_currency,
            "stock_quantity": record.stock_quantity,
            "created_at": record.created_at.isoformat(),
            "updated_at": record.updated_at.isoformat() if record.updated_at else None,
        }

    @staticmethod
    def _to_record(raw: dict) -> ProductRecord:
        updated_at = raw.get("updated_at")
        return ProductRecord(
            id=uuid.UUID(raw["id"]),
            name=raw["name"],
            description=raw["description"],
            price_amount=Decimal(raw["price_amount"]),
            price_currency=raw["price_currency"],
            stock_quantity=raw["stock_quantity"],
            created_at=datetime.fromisoformat(raw["created_at"]),
            updated_at=datetime.fromisoformat(updated_at) if updated_at else None,
        )

    # --- File helpers ---------------------------------------------------------

    def _where(self, predicate: Callable[[ProductRecord], bool]) -> list[ProductRecord]:
        return [r for r in self._load() if predicate(r)]

    def _load(self) -> list[ProductRecord]:
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        return [self._to_record(item) for item in raw]

    def _persist(self, records: list[ProductRecord]) -> None:
        raw = [self._to_raw(r) for r in records]
        self._file_path.write_text(json.dumps(raw, indent=2) + "\n", encoding="utf-8")

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
