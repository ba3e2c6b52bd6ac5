"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from functools import lru_cache

from sqlalchemy import Engine

from catalog.domain.repository.product_repository import ProductRepository
from catalog.infrastructure.persistence.database import build_engine, create_schema
from catalog.infrastructure.persistence.json_product_queries import JsonProductQueries
from catalog.infrastructure.persistence.product_queries import ProductQueries
from catalog.infrastructure.persistence.sql_product_queries import SqlProductQueries
from catalog.infrastructure.persistence.store_product_repository import (
    StoreProductRepository,
)
from catalog.infrastructure.settings import get_settings


@lru_cache
def engine() -> Engine:
    settings = get_settings()
    db_engine = build_engine(settings.database_url, echo=settings.echo_sql)
    create_schema(db_engine)
    return db_engine


def product_queries() -> ProductQueries:
    settings = get_settings()
    if settings.storage == "json":
        return JsonProductQueries(settings.json_path)
    return SqlProductQueries(engine())


def product_repository() -> ProductRepository:
    return StoreProductRepository(product_queries())
