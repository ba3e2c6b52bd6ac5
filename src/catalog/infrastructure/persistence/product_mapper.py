"""Translation between the Product aggregate and ProductRecord.

Pure and stateless: nothing here reads or writes the store. Timestamps
exist only on the record side; an update carries the existing
``created_at`` forward and refreshes ``updated_at``.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, timezone

from catalog.domain.exceptions import ValidationError
from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import Currency, Price, ProductId, Stock
from catalog.infrastructure.persistence.product_record import ProductRecord


class ProductMapper:

    @staticmethod
    def to_record(
        product: Product,
        existing: ProductRecord | None = None,
        now: datetime | None = None,
    ) -> ProductRecord:
        """Project *product* onto a record.

        Pass the currently stored record as *existing* when updating so
        its ``created_at`` is preserved.
        """
        now = now or datetime.now(timezone.utc)
        if existing is not None and existing.id != product.id.value:
            raise ValidationError(
                f"Record {existing.id} does not belong to product {product.id}"
            )

        return ProductRecord(
            id=product.id.value,
            name=product.name,
            description=product.description,
            price_amount=product.price.amount,
            price_currency=product.price.currency.code,
            stock_quantity=product.stock.quantity,
            created_at=existing.created_at if existing is not None else now,
            updated_at=now,
        )

    @staticmethod
    def to_domain(record: ProductRecord) -> Product:
        currency = Currency.from_code(record.price_currency).unwrap()
        return Product.reconstruct(
            ProductId(record.id),
            record.name,
            record.description,
            Price(record.price_amount, currency),
            Stock(record.stock_quantity),
        )

    # --- Collections ----------------------------------------------------------

    @staticmethod
    def to_records(products: Iterable[Product] | None) -> list[ProductRecord]:
        return [ProductMapper.to_record(p) for p in products or ()]

    @staticmethod
    def to_domain_list(records: Iterable[ProductRecord] | None) -> list[Product]:
        return [ProductMapper.to_domain(r) for r in records or ()]
