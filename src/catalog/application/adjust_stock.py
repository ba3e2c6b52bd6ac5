"""Application service: Adjust Stock use case."""

from __future__ import annotations

from catalog.application.dto import ProductDTO, product_dto
from catalog.domain.exceptions import EntityNotFoundError, ValidationError
from catalog.domain.model.value_objects import ProductId
from catalog.domain.repository.product_repository import ProductRepository


class AdjustStockHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str, delta: int) -> ProductDTO:
        """Add *delta* units when positive, remove them when negative."""
        if delta == 0:
            raise ValidationError("Stock adjustment must not be zero")

        pid = ProductId.parse(product_id).unwrap()
        product = self._product_repo.find_by_id(pid)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        if delta > 0:
            product.add_stock(delta)
        else:
            product.reduce_stock(-delta)

        return product_dto(self._product_repo.save(product))
