"""Query port: the storage primitives the product repository relies on.

Adapters work purely in ProductRecord values and never see domain
objects. Arguments are assumed valid; the repository checks them first.
"""

from __future__ import annotations

import uuid
from abc import ABC, abstractmethod
from decimal import Decimal

from catalog.infrastructure.persistence.product_record import ProductRecord


class ProductQueries(ABC):

    @abstractmethod
    def get_by_id(self, product_id: uuid.UUID) -> ProductRecord | None:
        """Return the record with this id, or None."""

    @abstractmethod
    def list_all(self) -> list[ProductRecord]:
        """Return every record."""

    @abstractmethod
    def search_by_name(self, fragment: str) -> list[ProductRecord]:
        """Records whose name contains *fragment*, ignoring case."""

    @abstractmethod
    def list_by_name(self, name: str) -> list[ProductRecord]:
        """Records whose name equals *name*."""

    @abstractmethod
    def list_in_stock(self) -> list[ProductRecord]:
        """Records with ``stock_quantity > 0``."""

    @abstractmethod
    def list_out_of_stock(self) -> list[ProductRecord]:
        """Records with ``stock_quantity == 0``."""

    @abstractmethod
    def list_by_price_range(
        self, min_amount: Decimal, max_amount: Decimal
    ) -> list[ProductRecord]:
        """Records with ``min_amount <= price_amount <= max_amount``."""

    @abstractmethod
    def list_by_currency(self, currency_code: str) -> list[ProductRecord]:
        """Records priced in *currency_code*."""

    @abstractmethod
    def list_low_stock(self, threshold: int) -> list[ProductRecord]:
        """Records with ``stock_quantity < threshold``."""

    @abstractmethod
    def count(self) -> int:
        """Number of records."""

    @abstractmethod
    def count_in_stock(self) -> int:
        """Number of records with ``stock_quantity > 0``."""

    @abstractmethod
    def insert(self, record: ProductRecord) -> None:
        """Store a new record."""

    @abstractmethod
    def update(self, record: ProductRecord) -> None:
        """Replace the stored record that has the same id."""

    @abstractmethod
    def delete_by_id(self, product_id: uuid.UUID) -> None:
        """Remove the record with this id if present."""

    @abstractmethod
    def exists_by_id(self, product_id: uuid.UUID) -> bool:
        """True if a record with this id is stored."""

    @abstractmethod
    def delete_all(self) -> None:
        """Remove every record."""
