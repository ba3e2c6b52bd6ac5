"""Application service: Add Product use case."""

from __future__ import annotations

from catalog.application.dto import ProductDTO, product_dto
from catalog.domain.exceptions import ValidationError
from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import Price, Stock
from catalog.domain.repository.product_repository import ProductRepository


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        name: str,
        description: str,
        price: str,
        currency: str,
        stock: int,
    ) -> ProductDTO:
        """Add a new product to the catalog.

        Names are unique within the catalog (exact match).
        """
        price_result = Price.of(price, currency)
        if price_result.is_failure:
            raise price_result.error
        stock_result = Stock.of(stock)
        if stock_result.is_failure:
            raise stock_result.error

        product = Product.create(
            name, description, price_result.value, stock_result.value
        ).unwrap()

        if self._product_repo.find_by_name(product.name):
            raise ValidationError(f"Product '{product.name}' already exists")

        return product_dto(self._product_repo.save(product))
