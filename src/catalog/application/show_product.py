"""Application service: Show Product use case (query)."""

from __future__ import annotations

from catalog.application.dto import ProductDTO, product_dto
from catalog.domain.exceptions import EntityNotFoundError
from catalog.domain.model.value_objects import ProductId
from catalog.domain.repository.product_repository import ProductRepository


class ShowProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str) -> ProductDTO:
        pid = ProductId.parse(product_id).unwrap()
        product = self._product_repo.find_by_id(pid)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
        return product_dto(product)
