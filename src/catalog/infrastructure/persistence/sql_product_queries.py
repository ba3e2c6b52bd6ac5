"""SQLAlchemy-backed implementation of ProductQueries."""

from __future__ import annotations

import uuid
from dataclasses import asdict
from decimal import ROUND_CEILING, ROUND_FLOOR, Decimal

from loguru import logger
from sqlalchemy import Engine, Select, delete, func, insert, select, update

from catalog.domain.model.value_objects import CENT, MAX_PRICE_AMOUNT
from catalog.infrastructure.persistence.product_queries import ProductQueries
from catalog.infrastructure.persistence.product_record import ProductRecord
from catalog.infrastructure.persistence.product_table import products_table

_c = products_table.c


class SqlProductQueries(ProductQueries):

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    # --- Reads ----------------------------------------------------------------

    def get_by_id(self, product_id: uuid.UUID) -> ProductRecord | None:
        with self._engine.connect() as conn:
            row = conn.execute(
                select(products_table).where(_c.id == product_id)
            ).first()
        return None if row is None else self._to_record(row)

    def list_all(self) -> list[ProductRecord]:
        return self._fetch(self._listing())

    def search_by_name(self, fragment: str) -> list[ProductRecord]:
        # SQLite gets casefold() from build_engine; elsewhere lower() is Unicode-aware
        if self._engine.dialect.name == "sqlite":
            folded, needle = func.casefold(_c.name), fragment.casefold()
        else:
            folded, needle = func.lower(_c.name), fragment.lower()
        return self._fetch(
            self._listing().where(folded.contains(needle, autoescape=True))
        )

    def list_by_name(self, name: str) -> list[ProductRecord]:
        return self._fetch(self._listing().where(_c.name == name))

    def list_in_stock(self) -> list[ProductRecord]:
        return self._fetch(self._listing().where(_c.stock_quantity > 0))

    def list_out_of_stock(self) -> list[ProductRecord]:
        return self._fetch(self._listing().where(_c.stock_quantity == 0))

    def list_by_price_range(
        self, min_amount: Decimal, max_amount: Decimal
    ) -> list[ProductRecord]:
        # Stored amounts are whole cents no larger than MAX_PRICE_AMOUNT
        if min_amount > MAX_PRICE_AMOUNT:
            return []
        low = min_amount.quantize(CENT, rounding=ROUND_CEILING)
        high = min(max_amount, MAX_PRICE_AMOUNT).quantize(CENT, rounding=ROUND_FLOOR)
        if low > high:
            return []
        return self._fetch(self._listing().where(_c.price_amount.between(low, high)))

    def list_by_currency(self, currency_code: str) -> list[ProductRecord]:
        return self._fetch(self._listing().where(_c.price_currency == currency_code))

    def list_low_stock(self, threshold: int) -> list[ProductRecord]:
        return self._fetch(self._listing().where(_c.stock_quantity < threshold))

    def count(self) -> int:
        return self._count(select(func.count()).select_from(products_table))

    def count_in_stock(self) -> int:
        return self._count(
            select(func.count()).select_from(products_table).where(_c.stock_quantity > 0)
        )

    def exists_by_id(self, product_id: uuid.UUID) -> bool:
        with self._engine.connect() as conn:
            row = conn.execute(
                select(_c.id).where(_c.id == product_id).limit(1)
            ).first()
        return row is not None

    # --- Writes ---------------------------------------------------------------

    def insert(self, record: ProductRecord) -> None:
        with self._engine.begin() as conn:
            conn.execute(insert(products_table).values(**asdict(record)))
        logger.debug("Inserted product row {}", record.id)

    def update(self, record: ProductRecord) -> None:
        values = asdict(record)
        # created_at is written once, on insert
        del values["id"], values["created_at"]
        with self._engine.begin() as conn:
            conn.execute(
                update(products_table).where(_c.id == record.id).values(**values)
            )
        logger.debug("Updated product row {}", record.id)

    def delete_by_id(self, product_id: uuid.UUID) -> None:
        with self._engine.begin() as conn:
            result = conn.execute(delete(products_table).where(_c.id == product_id))
        logger.debug("Deleted {} product row(s) for {}", result.rowcount, product_id)

    def delete_all(self) -> None:
        with self._engine.begin() as conn:
            result = conn.execute(delete(products_table))
        logger.info("Deleted all {} product row(s)", result.rowcount)

    # --- Helpers --------------------------------------------------------------

    @staticmethod
    def _listing() -> Select:
        return select(products_table).order_by(_c.created_at, _c.name)

    def _fetch(self, statement: Select) -> list[ProductRecord]:
        with self._engine.connect() as conn:
            rows = conn.execute(statement).all()
        return [self._to_record(row) for row in rows]

    def _count(self, statement: Select) -> int:
        with self._engine.connect() as conn:
            return conn.execute(statement).scalar_one()

    @staticmethod
    def _to_record(row) -> ProductRecord:
        return ProductRecord(**row._mapping)
