"""Application service: Catalog Stats use case (query)."""

from __future__ import annotations

from catalog.application.dto import CatalogStatsDTO
from catalog.domain.repository.product_repository import ProductRepository


class CatalogStatsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self) -> CatalogStatsDTO:
        total = self._product_repo.count()
        in_stock = self._product_repo.count_in_stock_products()
        return CatalogStatsDTO(
            total=total,
            in_stock=in_stock,
            out_of_stock=total - in_stock,
        )
