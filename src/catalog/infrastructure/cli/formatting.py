"""Shared table formatting for CLI output."""

from __future__ import annotations

import click

from catalog.application.dto import ProductDTO


def echo_product_table(products: list[ProductDTO]) -> None:
    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<36}  {'Name':<24} {'Price':>12} {'Stock':>7}  Status")
    click.echo("-" * 92)
    for p in products:
        price = f"{p.price} {p.currency}"
        click.echo(
            f"{p.id:<36}  {p.name[:24]:<24} {price:>12} {p.stock_quantity:>7}  {p.status}"
        )


def echo_product(dto: ProductDTO) -> None:
    click.echo(f"Product {dto.id}  (status={dto.status})")
    click.echo(f"Name:        {dto.name}")
    click.echo(f"Description: {dto.description or '-'}")
    click.echo(f"Price:       {dto.price} {dto.currency}")
    click.echo(f"Stock:       {dto.stock_quantity}")
    click.echo(f"Available:   {'yes' if dto.available else 'no'}")
    click.echo(f"Created:     {dto.created_at}")
    click.echo(f"Updated:     {dto.updated_at}")
