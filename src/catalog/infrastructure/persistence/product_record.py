"""Storage-shaped projection of a Product.

One flat, immutable row per product. Field names match the columns of the
``products`` table so adapters can build records straight from rows.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal


@dataclass(frozen=True)
class ProductRecord:

    id: uuid.UUID
    name: str
    description: str
    price_amount: Decimal
    price_currency: str
    stock_quantity: int
    created_at: datetime
    updated_at: datetime | None = None
