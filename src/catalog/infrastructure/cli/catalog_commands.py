"""CLI commands for the catalog as a whole."""

from __future__ import annotations

import click

from catalog.application.catalog_stats import CatalogStatsHandler
from catalog.infrastructure.bootstrap import product_queries, product_repository
from catalog.infrastructure.settings import get_settings


@click.command("init-db")
def init_db() -> None:
    """Create the product store if it does not exist."""
    product_queries()
    settings = get_settings()
    target = settings.json_path if settings.storage == "json" else settings.database_url
    click.echo(f"Product store ready ({settings.storage}: {target})")


@click.command("stats")
def stats() -> None:
    """Show product counts."""
    dto = CatalogStatsHandler(product_repo=product_repository()).handle()

    click.echo(f"{'Products':<14} {dto.total:>6}")
    click.echo(f"{'In stock':<14} {dto.in_stock:>6}")
    click.echo(f"{'Out of stock':<14} {dto.out_of_stock:>6}")
