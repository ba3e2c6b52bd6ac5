"""ProductRepository implemented on top of a ProductQueries adapter.

Every argument is checked here, before the adapter is called, so invalid
input never reaches the store. Storage errors propagate unchanged.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

from loguru import logger

from catalog.domain.exceptions import EntityNotFoundError, ValidationError
from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import Currency, ProductId
from catalog.domain.repository.product_repository import ProductRepository
from catalog.infrastructure.persistence.product_mapper import ProductMapper
from catalog.infrastructure.persistence.product_queries import ProductQueries


class StoreProductRepository(ProductRepository):

    def __init__(self, queries: ProductQueries) -> None:
        self._queries = queries

    # --- Writes ---------------------------------------------------------------

    def save(self, product: Product) -> Product:
        if product is None:
            raise _rejected("Product to save must not be None")

        existing = self._queries.get_by_id(product.id.value)
        record = ProductMapper.to_record(product, existing)
        if existing is None:
            self._queries.insert(record)
            logger.info("Created product {} '{}'", product.id, product.name)
        else:
            self._queries.update(record)
            logger.info("Updated product {} '{}'", product.id, product.name)

        stored = self._queries.get_by_id(product.id.value)
        if stored is None:
            raise EntityNotFoundError(f"Product {product.id} missing after save")
        return ProductMapper.to_domain(stored)

    def delete_by_id(self, product_id: ProductId) -> None:
        if product_id is None:
            raise _rejected("Product id to delete must not be None")
        _check_id(product_id)
        self._queries.delete_by_id(product_id.value)
        logger.info("Deleted product {}", product_id)

    # --- Lookups --------------------------------------------------------------

    def find_by_id(self, product_id: ProductId | None) -> Product | None:
        if product_id is None:
            return None
        _check_id(product_id)
        record = self._queries.get_by_id(product_id.value)
        return None if record is None else ProductMapper.to_domain(record)

    def find_all(self) -> list[Product]:
        return ProductMapper.to_domain_list(self._queries.list_all())

    def find_by_name_containing(self, fragment: str | None) -> list[Product]:
        if fragment is None or not fragment.strip():
            return []
        return ProductMapper.to_domain_list(self._queries.search_by_name(fragment))

    def find_by_name(self, name: str | None) -> list[Product]:
        if name is None or not name.strip():
            return []
        return ProductMapper.to_domain_list(self._queries.list_by_name(name.strip()))

    def find_in_stock_products(self) -> list[Product]:
        return ProductMapper.to_domain_list(self._queries.list_in_stock())

    def find_out_of_stock_products(self) -> list[Product]:
        return ProductMapper.to_domain_list(self._queries.list_out_of_stock())

    def find_by_price_range(
        self,
        min_price: Decimal | int | float | str,
        max_price: Decimal | int | float | str,
    ) -> list[Product]:
        low = _price_bound(min_price, "minimum")
        high = _price_bound(max_price, "maximum")
        if low < 0 or high < 0 or low > high:
            raise _rejected(f"Invalid price range: {min_price} to {max_price}")
        return ProductMapper.to_domain_list(self._queries.list_by_price_range(low, high))

    def find_by_currency(self, currency: Currency | str) -> list[Product]:
        if not isinstance(currency, Currency):
            resolved = Currency.from_code(currency)
            if resolved.is_failure:
                raise _rejected(str(resolved.error))
            currency = resolved.value
        return ProductMapper.to_domain_list(self._queries.list_by_currency(currency.code))

    def find_low_stock_products(self, threshold: int) -> list[Product]:
        if isinstance(threshold, bool) or not isinstance(threshold, int) or threshold < 0:
            raise _rejected(f"Low-stock threshold must be a non-negative integer, got {threshold!r}")
        return ProductMapper.to_domain_list(self._queries.list_low_stock(threshold))

    def exists_by_id(self, product_id: ProductId | None) -> bool:
        if product_id is None:
            return False
        _check_id(product_id)
        return self._queries.exists_by_id(product_id.value)

    def count(self) -> int:
        return self._queries.count()

    def count_in_stock_products(self) -> int:
        return self._queries.count_in_stock()

    # --- Maintenance ----------------------------------------------------------

    def clear(self) -> None:
        """Remove every product. Intended for tests and local resets."""
        self._queries.delete_all()


def _price_bound(value: Decimal | int | float | str, label: str) -> Decimal:
    if isinstance(value, bool):
        raise _rejected(f"Invalid {label} price: {value!r}")
    try:
        amount = Decimal(str(value))
    except (InvalidOperation, ValueError) as exc:
        raise _rejected(f"Invalid {label} price: {value!r}") from exc
    if not amount.is_finite():
        raise _rejected(f"Invalid {label} price: {value!r}")
    return amount


def _rejected(message: str) -> ValidationError:
    logger.warning(message)
    return ValidationError(message)


def _check_id(product_id: ProductId) -> None:
    if not isinstance(product_id, ProductId):
        raise _rejected(
            f"Product id must be a ProductId, got {type(product_id).__name__}"
        )
