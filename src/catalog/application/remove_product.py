"""Application service: Remove Product use case."""

from __future__ import annotations

from catalog.domain.exceptions import EntityNotFoundError
from catalog.domain.model.value_objects import ProductId
from catalog.domain.repository.product_repository import ProductRepository


class RemoveProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str) -> None:
        pid = ProductId.parse(product_id).unwrap()
        if not self._product_repo.exists_by_id(pid):
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
        self._product_repo.delete_by_id(pid)
