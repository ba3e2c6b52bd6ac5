"""Integration tests for the AdjustStock use case."""

import pytest

from catalog.application.add_product import AddProductHandler
from catalog.application.adjust_stock import AdjustStockHandler
from catalog.domain.exceptions import EntityNotFoundError, ValidationError
from catalog.domain.model.value_objects import ProductId
from catalog.infrastructure.persistence.store_product_repository import (
    StoreProductRepository,
)
from tests.fakes import FakeProductQueries


def _setup(stock: int = 10):
    repo = StoreProductRepository(FakeProductQueries())
    dto = AddProductHandler(repo).handle("Widget", "", "15.00", "USD", stock)
    return AdjustStockHandler(repo), repo, dto.id


class TestAdjustStock:

    def test_positive_delta_adds(self):
        handler, _, product_id = _setup(10)
        assert handler.handle(product_id, 5).stock == 15

    def test_negative_delta_reduces(self):
        handler, _, product_id = _setup(10)
        assert handler.handle(product_id, -3).stock == 7

    def test_reduce_to_zero(self):
        handler, repo, product_id = _setup(4)
        handler.handle(product_id, -4)
        assert repo.count_in_stock_products() == 0

    def test_reduce_beyond_stock_rejected_and_not_saved(self):
        handler, repo, product_id = _setup(2)
        with pytest.raises(ValidationError, match="Insufficient stock"):
            handler.handle(product_id, -3)
        assert repo.find_by_id(ProductId.parse(product_id).unwrap()).stock.quantity == 2

    def test_zero_delta_rejected(self):
        handler, _, product_id = _setup()
        with pytest.raises(ValidationError, match="must not be zero"):
            handler.handle(product_id, 0)

    def test_unknown_product(self):
        handler, _, _ = _setup()
        with pytest.raises(EntityNotFoundError):
            handler.handle(str(ProductId.generate()), 1)
