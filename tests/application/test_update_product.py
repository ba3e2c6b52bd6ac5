"""Integration tests for the UpdateProduct use case."""

import pytest

from catalog.application.add_product import AddProductHandler
from catalog.application.update_product import UpdateProductHandler
from catalog.domain.exceptions import EntityNotFoundError, ValidationError
from catalog.domain.model.value_objects import ProductId
from catalog.infrastructure.persistence.store_product_repository import (
    StoreProductRepository,
)
from tests.fakes import FakeProductQueries


def _setup():
    repo = StoreProductRepository(FakeProductQueries())
    dto = AddProductHandler(repo).handle("Laptop", "Gaming Laptop", "100.00", "TRY", 10)
    return UpdateProductHandler(repo), repo, dto.id


def test_rename_keeps_other_fields():
    handler, _, product_id = _setup()
    dto = handler.handle(product_id, name="Ultrabook")
    assert dto.name == "Ultrabook"
    assert dto.description == "Gaming Laptop"
    assert dto.price == "100.00 TRY"


def test_price_change_keeps_currency():
    handler, repo, product_id = _setup()
    handler.handle(product_id, price="150.00")
    product = repo.find_by_id(ProductId.parse(product_id).unwrap())
    assert str(product.price) == "150.00 TRY"


def test_currency_change_keeps_amount():
    handler, _, product_id = _setup()
    assert handler.handle(product_id, currency="USD").price == "100.00 USD"


def test_clear_description():
    handler, _, product_id = _setup()
    assert handler.handle(product_id, description="").description == ""


def test_nothing_to_update_rejected():
    handler, _, product_id = _setup()
    with pytest.raises(ValidationError, match="Nothing to update"):
        handler.handle(product_id)


def test_invalid_price_leaves_product_unchanged():
    handler, repo, product_id = _setup()
    with pytest.raises(ValidationError):
        handler.handle(product_id, name="Renamed", price="-5")
    product = repo.find_by_id(ProductId.parse(product_id).unwrap())
    assert product.name == "Laptop"


def test_unknown_product():
    handler, _, _ = _setup()
    with pytest.raises(EntityNotFoundError, match="not found"):
        handler.handle(str(ProductId.generate()), name="Ghost")


def test_malformed_id():
    handler, _, _ = _setup()
    with pytest.raises(ValidationError, match="Invalid product id"):
        handler.handle("42", name="Ghost")
