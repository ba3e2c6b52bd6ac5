"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from catalog.domain.model.product import Product


@dataclass(frozen=True)
class ProductDTO:
    """Output: a product as displayed to the user."""

    id: str
    name: str
    description: str
    price: str  # formatted, e.g. "15000.00 TRY"
    currency: str
    stock: int


@dataclass(frozen=True)
class ProductFilter:
    """Input: a single search criterion for the product listing.

    All fields empty means "list everything".
    """

    name_contains: str | None = None
    stock: str | None = None  # "in" or "out"
    min_price: str | None = None
    max_price: str | None = None
    currency: str | None = None
    low_stock_below: int | None = None


@dataclass(frozen=True)
class CatalogStatsDTO:
    total: int
    in_stock: int
    out_of_stock: int


def product_dto(product: Product) -> ProductDTO:
    return ProductDTO(
        id=str(product.id),
        name=product.name,
        description=product.description,
        price=str(product.price),
        currency=product.price.currency.code,
        stock=product.stock.quantity,
    )
