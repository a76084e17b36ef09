import click

from catalog.infrastructure.bootstrap import load_config
from catalog.infrastructure.cli.inventory_commands import inventory_stats, seed
from catalog.infrastructure.cli.product_commands import (
    product_activate,
    product_add,
    product_deactivate,
    product_delete,
    product_list,
    product_search,
    product_show,
    product_update,
)
from catalog.infrastructure.cli.stock_commands import stock_add, stock_remove
from catalog.infrastructure.config import configure_logging


@click.group()
def cli() -> None:
    """Catalog — Product Catalog Service"""
    try:
        config = load_config()
    except ValueError as exc:
        raise click.ClickException(str(exc))
    configure_logging(config)


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def stock() -> None:
    """Adjust stock levels."""


@cli.group()
def inventory() -> None:
    """Inventory reporting."""


# Register subcommands
product.add_command(product_activate)
product.add_command(product_add)
product.add_command(product_deactivate)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_search)
product.add_command(product_show)
product.add_command(product_update)
stock.add_command(stock_add)
stock.add_command(stock_remove)
inventory.add_command(inventory_stats)
cli.add_command(seed)
