"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from catalog.application.change_status import (
    ActivateProductHandler,
    DeactivateProductHandler,
)
from catalog.application.create_product import CreateProductHandler
from catalog.application.delete_product import DeleteProductHandler
from catalog.application.list_products import ListProductsHandler
from catalog.application.show_product import ShowProductHandler
from catalog.application.update_product import UpdateProductHandler
from catalog.domain.exceptions import DomainException
from catalog.infrastructure.bootstrap import (
    domain_service,
    load_config,
    product_repository,
)
from catalog.infrastructure.cli.formatting import echo_product, echo_product_table


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--description", default=None, help="Free-text description.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.option("--currency", default=None, help="Currency code (defaults to config).")
@click.option("--stock", default=0, type=int, show_default=True, help="Initial stock.")
def product_add(
    name: str, description: str | None, price: str, currency: str | None, stock: int
) -> None:
    """Add a new product to the catalog."""
    handler = CreateProductHandler(
        product_repo=product_repository(), domain_service=domain_service()
    )

    try:
        dto = handler.handle(
            name=name,
            description=description,
            price=price,
            currency=currency or load_config().default_currency,
            stock_quantity=stock,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {dto.id} '{dto.name}' added at {dto.price} {dto.currency}")


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--name", required=True, help="New name.")
@click.option("--description", default=None, help="New description.")
@click.option("--price", required=True, help="New price (e.g. 29.99).")
@click.option("--currency", default=None, help="Currency code (defaults to the current one).")
def product_update(
    product_id: str, name: str, description: str | None, price: str, currency: str | None
) -> None:
    """Replace a product's name, description and price."""
    handler = UpdateProductHandler(
        product_repo=product_repository(), domain_service=domain_service()
    )

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

    click.echo(f"Product {dto.id} updated: '{dto.name}' at {dto.price} {dto.currency}")


@click.command("delete")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_delete(product_id: str) -> None:
    """Remove a product from the catalog."""
    handler = DeleteProductHandler(
        product_repo=product_repository(), domain_service=domain_service()
    )

    try:
        handler.handle(product_id=product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product_id} deleted")


@click.command("show")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_show(product_id: str) -> None:
    """Show a single product."""
    handler = ShowProductHandler(product_repo=product_repository())

    try:
        dto = handler.handle(product_id=product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    echo_product(dto)


@click.command("list")
@click.option("--active", "active_only", is_flag=True, help="Only ACTIVE products.")
def product_list(active_only: bool) -> None:
    """List products in the catalog."""
    handler = ListProductsHandler(product_repo=product_repository())

    try:
        products = handler.active() if active_only else handler.all()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    echo_product_table(products)


@click.command("search")
@click.option("--name", required=True, help="Text the product name contains.")
def product_search(name: str) -> None:
    """Find products by (partial) name."""
    handler = ListProductsHandler(product_repo=product_repository())

    try:
        products = handler.search(name)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    echo_product_table(products)


@click.command("activate")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_activate(product_id: str) -> None:
    """Mark a product ACTIVE."""
    handler = ActivateProductHandler(product_repo=product_repository())

    try:
        dto = handler.handle(product_id=product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {dto.id} is now {dto.status}")


@click.command("deactivate")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_deactivate(product_id: str) -> None:
    """Mark a product INACTIVE."""
    handler = DeactivateProductHandler(product_repo=product_repository())

    try:
        dto = handler.handle(product_id=product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {dto.id} is now {dto.status}")
