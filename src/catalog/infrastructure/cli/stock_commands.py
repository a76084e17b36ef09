"""CLI commands for stock adjustments."""

from __future__ import annotations

import click

from catalog.application.adjust_stock import AddStockHandler, RemoveStockHandler
from catalog.domain.exceptions import DomainException
from catalog.infrastructure.bootstrap import product_repository


@click.command("add")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="Units received.")
def stock_add(product_id: str, quantity: int) -> None:
    """Add units to a product's stock."""
    handler = AddStockHandler(product_repo=product_repository())

    try:
        dto = handler.handle(product_id=product_id, quantity=quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Stock for '{dto.name}' is now {dto.stock_quantity}")


@click.command("remove")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="Units taken out.")
def stock_remove(product_id: str, quantity: int) -> None:
    """Remove units from a product's stock."""
    handler = RemoveStockHandler(product_repo=product_repository())

    try:
        dto = handler.handle(product_id=product_id, quantity=quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Stock for '{dto.name}' is now {dto.stock_quantity}")
