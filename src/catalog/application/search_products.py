"""Application service: Search Products use case (query).

Translates a ProductFilter into exactly one repository lookup.
"""

from __future__ import annotations

from catalog.application.dto import ProductDTO, ProductFilter, product_dto
from catalog.domain.exceptions import ValidationError
from catalog.domain.model.product import Product
from catalog.domain.repository.product_repository import ProductRepository


class SearchProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, criteria: ProductFilter | None = None) -> list[ProductDTO]:
        return [product_dto(p) for p in self._lookup(criteria or ProductFilter())]

    def _lookup(self, criteria: ProductFilter) -> list[Product]:
        by_price = criteria.min_price is not None or criteria.max_price is not None
        active = [
            criteria.name_contains is not None,
            criteria.stock is not None,
            by_price,
            criteria.currency is not None,
            criteria.low_stock_below is not None,
        ]
        if sum(active) > 1:
            raise ValidationError("Only one filter may be applied at a time")

        repo = self._product_repo
        if criteria.name_contains is not None:
            return repo.find_by_name_containing(criteria.name_contains)
        if criteria.stock == "in":
            return repo.find_in_stock_products()
        if criteria.stock == "out":
            return repo.find_out_of_stock_products()
        if criteria.stock is not None:
            raise ValidationError(f"Unknown stock filter: {criteria.stock!r}")
        if by_price:
            if criteria.min_price is None or criteria.max_price is None:
                raise ValidationError("Both minimum and maximum price are required")
            return repo.find_by_price_range(criteria.min_price, criteria.max_price)
        if criteria.currency is not None:
            return repo.find_by_currency(criteria.currency)
        if criteria.low_stock_below is not None:
            return repo.find_low_stock_products(criteria.low_stock_below)
        return repo.find_all()
