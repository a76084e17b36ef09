"""CLI commands for catalog-wide inventory reporting and seeding."""

from __future__ import annotations

import click

from catalog.application.inventory_statistics import InventoryStatisticsHandler
from catalog.application.seed_catalog import SeedCatalogHandler
from catalog.domain.exceptions import DomainException
from catalog.infrastructure.bootstrap import (
    domain_service,
    load_config,
    product_repository,
)


@click.command("stats")
def inventory_stats() -> None:
    """Show inventory statistics."""
    handler = InventoryStatisticsHandler(
        product_repo=product_repository(), domain_service=domain_service()
    )

    try:
        stats = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"{'Total products':<22} {stats.total_products:>6}")
    click.echo(f"{'Active':<22} {stats.active_products:>6}")
    click.echo(f"{'Inactive':<22} {stats.inactive_products:>6}")
    click.echo(f"{'Active, in stock':<22} {stats.products_in_stock:>6}")
    click.echo(f"{'Active, out of stock':<22} {stats.products_out_of_stock:>6}")


@click.command("seed")
def seed() -> None:
    """Load the sample product data set."""
    handler = SeedCatalogHandler(
        product_repo=product_repository(), domain_service=domain_service()
    )

    try:
        created = handler.handle(currency=load_config().default_currency)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Seeded {len(created)} product(s)")
