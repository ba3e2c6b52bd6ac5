"""CLI commands for stock levels."""

from __future__ import annotations

import click

from catalog.application.adjust_stock import AdjustStockHandler
from catalog.domain.exceptions import DomainException
from catalog.infrastructure.bootstrap import product_repository


def _adjust(product_id: str, delta: int) -> None:
    handler = AdjustStockHandler(product_repo=product_repository())

    try:
        dto = handler.handle(product_id=product_id, delta=delta)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Stock for '{dto.name}' is now {dto.stock}")


@click.command("add")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--quantity", required=True, type=click.IntRange(min=1), help="Units to add.")
def stock_add(product_id: str, quantity: int) -> None:
    """Receive units into stock."""
    _adjust(product_id, quantity)


@click.command("reduce")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--quantity", required=True, type=click.IntRange(min=1), help="Units to remove.")
def stock_reduce(product_id: str, quantity: int) -> None:
    """Take units out of stock."""
    _adjust(product_id, -quantity)
