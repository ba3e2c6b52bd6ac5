"""Tests for the JSON-file product store, driven through the repository."""

import json
from decimal import Decimal

import pytest

from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import Currency, Price, Stock
from catalog.infrastructure.persistence.json_product_queries import JsonProductQueries
from catalog.infrastructure.persistence.store_product_repository import (
    StoreProductRepository,
)


@pytest.fixture
def path(tmp_path):
    return tmp_path / "data" / "products.json"


def _product(name, amount="100.00", quantity=10, currency=Currency.TRY):
    return Product.create(
        name, "Description", Price.of(amount, currency).unwrap(), Stock(quantity)
    ).unwrap()


def test_creates_missing_file(path):
    JsonProductQueries(path)
    assert json.loads(path.read_text(encoding="utf-8")) == []


def test_saved_product_survives_reopen(path):
    product = _product("Laptop", "15000.00", 10)
    StoreProductRepository(JsonProductQueries(path)).save(product)

    reopened = StoreProductRepository(JsonProductQueries(path))

    assert reopened.find_by_id(product.id) == product


def test_amount_is_stored_as_exact_decimal_string(path):
    StoreProductRepository(JsonProductQueries(path)).save(_product("Pen", "0.10"))
    raw = json.loads(path.read_text(encoding="utf-8"))
    assert raw[0]["price_amount"] == "0.10"


def test_update_keeps_position_and_created_at(path):
    queries = JsonProductQueries(path)
    repo = StoreProductRepository(queries)
    first = repo.save(_product("First"))
    repo.save(_product("Second"))
    created_at = queries.get_by_id(first.id.value).created_at

    first.reduce_stock(4)
    repo.save(first)

    assert [p.name for p in repo.find_all()] == ["First", "Second"]
    assert queries.get_by_id(first.id.value).created_at == created_at
    assert repo.find_by_id(first.id).stock.quantity == 6


def test_queries_match_sql_semantics(path):
    repo = StoreProductRepository(JsonProductQueries(path))
    repo.save(_product("Cheap Mouse", "100.00", 0))
    repo.save(_product("Gaming Laptop", "1000.00", 3, Currency.USD))
    repo.save(_product("Gaming Chair", "5000.00", 40))

    assert [p.name for p in repo.find_by_name_containing("GAMING")] == [
        "Gaming Laptop",
        "Gaming Chair",
    ]
    assert [p.name for p in repo.find_out_of_stock_products()] == ["Cheap Mouse"]
    assert [p.name for p in repo.find_by_price_range(500, 2000)] == ["Gaming Laptop"]
    assert [p.name for p in repo.find_by_currency("USD")] == ["Gaming Laptop"]
    assert [p.name for p in repo.find_low_stock_products(5)] == ["Cheap Mouse", "Gaming Laptop"]
    assert repo.count() == 3
    assert repo.count_in_stock_products() == 2


def test_delete(path):
    repo = StoreProductRepository(JsonProductQueries(path))
    doomed = repo.save(_product("Doomed"))
    repo.save(_product("Kept"))

    repo.delete_by_id(doomed.id)

    assert not repo.exists_by_id(doomed.id)
    assert repo.count() == 1
    assert repo.find_by_id(doomed.id) is None


def test_price_amount_round_trips_as_decimal(path):
    queries = JsonProductQueries(path)
    product = _product("Exact", "19.99")
    StoreProductRepository(queries).save(product)
    assert queries.get_by_id(product.id.value).price_amount == Decimal("19.99")
