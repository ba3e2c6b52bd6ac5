"""Product aggregate.

The Product owns its price and stock value objects and is the only place
where stock quantities change. Timestamps are a storage concern and do not
live here.
"""

from __future__ import annotations

from dataclasses import dataclass

from catalog.domain.exceptions import ValidationError
from catalog.domain.model.value_objects import Price, ProductId, Stock
from catalog.domain.result import Result

MAX_NAME_LENGTH = 255
MAX_DESCRIPTION_LENGTH = 1000


@dataclass
class Product:
    """Aggregate root for the catalog.

    Use ``Product.create()`` for new products: it generates the identity
    and validates every field. ``Product.reconstruct()`` rebuilds a
    product that already exists in the store and trusts its data.
    """

    id: ProductId
    name: str
    description: str
    price: Price
    stock: Stock

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def create(
        name: str,
        description: str | None,
        price: Price,
        stock: Stock,
    ) -> Result[Product]:
        """Create a new product with a freshly generated id."""
        try:
            name, description = _validated_details(name, description)
            _check_price(price)
            if not isinstance(stock, Stock):
                raise ValidationError("Product stock must be a Stock")
        except ValidationError as exc:
            return Result.failure(exc)

        return Result.success(
            Product(
                id=ProductId.generate(),
                name=name,
                description=description,
                price=price,
                stock=stock,
            )
        )

    @staticmethod
    def reconstruct(
        product_id: ProductId,
        name: str,
        description: str,
        price: Price,
        stock: Stock,
    ) -> Product:
        """Rebuild a persisted product, keeping its id."""
        return Product(
            id=product_id,
            name=name,
            description=description,
            price=price,
            stock=stock,
        )

    # --- Mutations ------------------------------------------------------------

    def update_details(self, name: str, description: str | None) -> None:
        """Rename and redescribe the product."""
        self.name, self.description = _validated_details(name, description)

    def update_price(self, price: Price) -> None:
        _check_price(price)
        self.price = price

    def add_stock(self, quantity: int) -> None:
        if quantity <= 0:
            raise ValidationError("Stock increase must be positive")
        self.stock = Stock(self.stock.quantity + quantity)

    def reduce_stock(self, quantity: int) -> None:
        """Take *quantity* units out of stock.

        Raises ValidationError and leaves the stock untouched when the
        product does not hold enough units.
        """
        if quantity <= 0:
            raise ValidationError("Stock decrease must be positive")
        if quantity > self.stock.quantity:
            raise ValidationError(
                f"Insufficient stock for {self.name} "
                f"(need {quantity}, have {self.stock.quantity})"
            )
        self.stock = Stock(self.stock.quantity - quantity)

    @property
    def is_in_stock(self) -> bool:
        return self.stock.quantity > 0


def _validated_details(name: str, description: str | None) -> tuple[str, str]:
    if not isinstance(name, str) or not name.strip():
        raise ValidationError("Product name is required")
    name = name.strip()
    if len(name) > MAX_NAME_LENGTH:
        raise ValidationError(f"Product name exceeds {MAX_NAME_LENGTH} characters")

    description = description or ""
    if len(description) > MAX_DESCRIPTION_LENGTH:
        raise ValidationError(
            f"Product description exceeds {MAX_DESCRIPTION_LENGTH} characters"
        )
    return name, description


def _check_price(price: Price) -> None:
    if not isinstance(price, Price):
        raise ValidationError("Product price must be a Price")
