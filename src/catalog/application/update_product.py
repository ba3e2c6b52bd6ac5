"""Application service: Update Product use case."""

from __future__ import annotations

from catalog.application.dto import ProductDTO, product_dto
from catalog.domain.exceptions import EntityNotFoundError, ValidationError
from catalog.domain.model.value_objects import Price, ProductId
from catalog.domain.repository.product_repository import ProductRepository


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        product_id: str,
        name: str | None = None,
        description: str | None = None,
        price: str | None = None,
        currency: str | None = None,
    ) -> ProductDTO:
        """Change any of a product's name, description, price or currency.

        Omitted fields keep their current value.
        """
        if name is None and description is None and price is None and currency is None:
            raise ValidationError("Nothing to update")

        pid = ProductId.parse(product_id).unwrap()
        product = self._product_repo.find_by_id(pid)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        if name is not None or description is not None:
            product.update_details(
                name if name is not None else product.name,
                description if description is not None else product.description,
            )

        if price is not None or currency is not None:
            new_price = Price.of(
                price if price is not None else product.price.amount,
                currency if currency is not None else product.price.currency,
            ).unwrap()
            product.update_price(new_price)

        return product_dto(self._product_repo.save(product))
