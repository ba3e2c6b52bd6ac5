"""Relational schema for products.

This is how a ProductRecord is stored in the database. It is kept apart
from the domain model; only the SQL adapter imports it.
"""

from decimal import Decimal

from sqlalchemy import (
    CheckConstraint,
    Column,
    DateTime,
    Integer,
    MetaData,
    Numeric,
    String,
    Table,
    TypeDecorator,
    Uuid,
)

# 17 integer digits, the point, 2 decimals
_SQLITE_MONEY_WIDTH = 20


class Money(TypeDecorator):
    """``decimal(19, 2)`` that stays exact on SQLite.

    SQLite has no decimal storage and would keep NUMERIC values as REAL.
    There the amount is written as a zero-padded string instead; amounts
    are never negative, so string order matches numeric order and range
    comparisons keep working.
    """

    impl = Numeric(19, 2)
    cache_ok = True

    def load_dialect_impl(self, dialect):
        if dialect.name == "sqlite":
            return dialect.type_descriptor(String(_SQLITE_MONEY_WIDTH))
        return dialect.type_descriptor(Numeric(19, 2, asdecimal=True))

    def process_bind_param(self, value, dialect):
        if value is None or dialect.name != "sqlite":
            return value
        return format(Decimal(str(value)), f"0{_SQLITE_MONEY_WIDTH}.2f")

    def process_result_value(self, value, dialect):
        if value is None or dialect.name != "sqlite":
            return value
        return Decimal(value)


metadata = MetaData()

products_table = Table(
    "products",
    metadata,
    Column("id", Uuid, primary_key=True),
    Column("name", String(255), nullable=False, index=True),
    Column("description", String(1000), nullable=False),
    Column("price_amount", Money, nullable=False),
    Column("price_currency", String(3), nullable=False),
    Column("stock_quantity", Integer, nullable=False),
    Column("created_at", DateTime(timezone=True), nullable=False),
    Column("updated_at", DateTime(timezone=True), nullable=True),
    CheckConstraint("price_amount >= 0", name="ck_products_price_amount_non_negative"),
    CheckConstraint("stock_quantity >= 0", name="ck_products_stock_quantity_non_negative"),
)
