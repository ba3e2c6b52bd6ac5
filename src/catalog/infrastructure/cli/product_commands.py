"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from catalog.application.add_product import AddProductHandler
from catalog.application.dto import ProductDTO, ProductFilter
from catalog.application.remove_product import RemoveProductHandler
from catalog.application.search_products import SearchProductsHandler
from catalog.application.show_product import ShowProductHandler
from catalog.application.update_product import UpdateProductHandler
from catalog.domain.exceptions import DomainException
from catalog.infrastructure.bootstrap import product_repository


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--description", default="", help="Product description.")
@click.option("--price", required=True, help="Price (e.g. 15000.00).")
@click.option("--currency", required=True, help="Currency code (e.g. TRY).")
@click.option("--stock", default=0, show_default=True, type=int, help="Units on hand.")
def product_add(name: str, description: str, price: str, currency: str, stock: int) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(product_repo=product_repository())

    try:
        dto = handler.handle(
            name=name, description=description, price=price, currency=currency, stock=stock
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {dto.id} '{dto.name}' added at {dto.price} ({dto.stock} in stock)")


@click.command("list")
@click.option("--name", "name_contains", help="Only names containing this text.")
@click.option("--stock", type=click.Choice(["in", "out"]), help="Only in-stock or out-of-stock.")
@click.option("--min-price", help="Lower price bound (inclusive).")
@click.option("--max-price", help="Upper price bound (inclusive).")
@click.option("--currency", help="Only prices in this currency.")
@click.option("--low-stock", "low_stock_below", type=int, help="Only fewer units than this.")
def product_list(
    name_contains: str | None,
    stock: str | None,
    min_price: str | None,
    max_price: str | None,
    currency: str | None,
    low_stock_below: int | None,
) -> None:
    """List products, optionally filtered by one criterion."""
    handler = SearchProductsHandler(product_repo=product_repository())
    criteria = ProductFilter(
        name_contains=name_contains,
        stock=stock,
        min_price=min_price,
        max_price=max_price,
        currency=currency,
        low_stock_below=low_stock_below,
    )

    try:
        products = handler.handle(criteria)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<36}  {'Name':<24} {'Price':>16} {'Stock':>7}")
    click.echo("-" * 86)
    for p in products:
        click.echo(f"{p.id:<36}  {p.name[:24]:<24} {p.price:>16} {p.stock:>7}")


def _display_product(dto: ProductDTO) -> None:
    click.echo(f"Product {dto.id}")
    click.echo(f"Name:        {dto.name}")
    click.echo(f"Description: {dto.description}")
    click.echo(f"Price:       {dto.price}")
    click.echo(f"Stock:       {dto.stock}")


@click.command("show")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_show(product_id: str) -> None:
    """Show details of a product."""
    handler = ShowProductHandler(product_repo=product_repository())

    try:
        dto = handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_product(dto)


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--name", help="New name.")
@click.option("--description", help="New description.")
@click.option("--price", help="New price (e.g. 29.99).")
@click.option("--currency", help="New currency code.")
def product_update(
    product_id: str,
    name: str | None,
    description: str | None,
    price: str | None,
    currency: str | None,
) -> None:
    """Update a product's details or price."""
    handler = UpdateProductHandler(product_repo=product_repository())

    try:
        dto = handler.handle(
            product_id=product_id,
            name=name,
            description=description,
            price=price,
            currency=currency,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {dto.id} updated")
    _display_product(dto)


@click.command("remove")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_remove(product_id: str) -> None:
    """Remove a product from the catalog."""
    handler = RemoveProductHandler(product_repo=product_repository())

    try:
        handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product_id} removed")
