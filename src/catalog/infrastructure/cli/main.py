import click

from catalog.infrastructure.cli.catalog_commands import init_db, stats
from catalog.infrastructure.cli.product_commands import (
    product_add,
    product_list,
    product_remove,
    product_show,
    product_update,
)
from catalog.infrastructure.cli.stock_commands import stock_add, stock_reduce
from catalog.infrastructure.log_setup import configure_logging
from catalog.infrastructure.settings import get_settings


@click.group()
def cli() -> None:
    """Catalog: product inventory and pricing."""
    configure_logging(get_settings().log_level)


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def stock() -> None:
    """Manage stock levels."""


# Register subcommands
cli.add_command(init_db)
cli.add_command(stats)
product.add_command(product_add)
product.add_command(product_list)
product.add_command(product_remove)
product.add_command(product_show)
product.add_command(product_update)
stock.add_command(stock_add)
stock.add_command(stock_reduce)
