"""Abstract repository for the Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations live in the infrastructure
layer and may sit on any store adapter (SQL, JSON, in-memory).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal

from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import Currency, ProductId


class ProductRepository(ABC):

    @abstractmethod
    def save(self, product: Product) -> Product:
        """Insert or update a product and return it as re-read from the store.

        Raises ValidationError for a None product.
        """

    @abstractmethod
    def find_by_id(self, product_id: ProductId | None) -> Product | None:
        """Return the product, or None if it is missing or *product_id* is None."""

    @abstractmethod
    def find_all(self) -> list[Product]:
        """Return every product in the catalog."""

    @abstractmethod
    def find_by_name_containing(self, fragment: str | None) -> list[Product]:
        """Case-insensitive substring search. Blank input yields []."""

    @abstractmethod
    def find_by_name(self, name: str | None) -> list[Product]:
        """Products whose name matches *name* exactly."""

    @abstractmethod
    def find_in_stock_products(self) -> list[Product]:
        """Products with a quantity above zero."""

    @abstractmethod
    def find_out_of_stock_products(self) -> list[Product]:
        """Products with a quantity of exactly zero."""

    @abstractmethod
    def find_by_price_range(
        self,
        min_price: Decimal | int | float | str,
        max_price: Decimal | int | float | str,
    ) -> list[Product]:
        """Products priced within [min_price, max_price], inclusive.

        Raises ValidationError when a bound is negative or min > max.
        """

    @abstractmethod
    def find_by_currency(self, currency: Currency | str) -> list[Product]:
        """Products priced in *currency*."""

    @abstractmethod
    def find_low_stock_products(self, threshold: int) -> list[Product]:
        """Products with fewer than *threshold* units."""

    @abstractmethod
    def delete_by_id(self, product_id: ProductId) -> None:
        """Remove a product. Raises ValidationError for a None id."""

    @abstractmethod
    def exists_by_id(self, product_id: ProductId | None) -> bool:
        """True if a product with this id is stored; False for None."""

    @abstractmethod
    def count(self) -> int:
        """Number of stored products."""

    @abstractmethod
    def count_in_stock_products(self) -> int:
        """Number of products with a quantity above zero."""
