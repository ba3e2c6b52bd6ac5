"""Value Objects of the product catalog.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist: the
constructors raise ValidationError, while the ``of``/``from_code``/``parse``
factories report the same problems through a Result.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from enum import Enum

from catalog.domain.exceptions import ValidationError
from catalog.domain.result import Result

# Prices fit a decimal(19, 2) column.
CENT = Decimal("0.01")
MAX_PRICE_AMOUNT = Decimal("99999999999999999.99")


class Currency(Enum):
    TRY = "TRY"
    USD = "USD"
    EUR = "EUR"
    GBP = "GBP"

    @property
    def code(self) -> str:
        return self.value

    @staticmethod
    def from_code(code: str) -> Result[Currency]:
        """Resolve a three-letter code such as ``"try"`` or ``" USD "``."""
        if not isinstance(code, str):
            return Result.failure(f"Currency code must be a string, got {type(code).__name__}")
        try:
            return Result.success(Currency(code.strip().upper()))
        except ValueError:
            return Result.failure(f"Unknown currency code: {code!r}")


@dataclass(frozen=True)
class Price:
    """Monetary amount tagged with its currency.

    Uses Decimal to avoid floating-point rounding errors that would be
    unacceptable for money.
    """

    amount: Decimal
    currency: Currency

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Price amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise ValidationError(f"Price amount must be finite, got {self.amount}")
        if self.amount < Decimal("0"):
            raise ValidationError(f"Price amount cannot be negative, got {self.amount}")
        if self.amount > MAX_PRICE_AMOUNT:
            raise ValidationError(
                f"Price amount exceeds {MAX_PRICE_AMOUNT}, got {self.amount}"
            )
        if self.amount.quantize(CENT) != self.amount:
            raise ValidationError(
                f"Price amount has more than 2 decimal places, got {self.amount}"
            )
        if not isinstance(self.currency, Currency):
            raise ValidationError(
                f"Price currency must be a Currency, got {type(self.currency).__name__}"
            )

    def __str__(self) -> str:
        return f"{self.amount:.2f} {self.currency.code}"

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def of(
        amount: str | float | int | Decimal,
        currency: Currency | str,
    ) -> Result[Price]:
        """Coerce *amount* to Decimal safely and resolve *currency*."""
        if not isinstance(currency, Currency):
            resolved = Currency.from_code(currency)
            if resolved.is_failure:
                return Result.failure(resolved.error)
            currency = resolved.value
        try:
            value = Decimal(str(amount))
        except (InvalidOperation, ValueError):
            return Result.failure(f"Invalid price amount: {amount!r}")
        try:
            return Result.success(Price(value, currency))
        except ValidationError as exc:
            return Result.failure(exc)


@dataclass(frozen=True)
class Stock:
    """Units on hand. Never negative.

    Stock has no arithmetic of its own; quantities change only through
    ``Product.add_stock`` and ``Product.reduce_stock``.
    """

    quantity: int

    def __post_init__(self) -> None:
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int):
            raise ValidationError(
                f"Stock quantity must be an integer, got {type(self.quantity).__name__}"
            )
        if self.quantity < 0:
            raise ValidationError(f"Stock quantity cannot be negative, got {self.quantity}")

    def __str__(self) -> str:
        return str(self.quantity)

    @staticmethod
    def of(quantity: int) -> Result[Stock]:
        try:
            return Result.success(Stock(quantity))
        except ValidationError as exc:
            return Result.failure(exc)


@dataclass(frozen=True)
class ProductId:
    """Opaque product identity backed by a UUID."""

    value: uuid.UUID

    def __post_init__(self) -> None:
        if not isinstance(self.value, uuid.UUID):
            raise ValidationError(
                f"ProductId must wrap a UUID, got {type(self.value).__name__}"
            )

    def __str__(self) -> str:
        return str(self.value)

    @staticmethod
    def generate() -> ProductId:
        return ProductId(uuid.uuid4())

    @staticmethod
    def parse(raw: str | uuid.UUID | ProductId) -> Result[ProductId]:
        if isinstance(raw, ProductId):
            return Result.success(raw)
        if isinstance(raw, uuid.UUID):
            return Result.success(ProductId(raw))
        try:
            return Result.success(ProductId(uuid.UUID(str(raw).strip())))
        except ValueError:
            return Result.failure(f"Invalid product id: {raw!r}")
