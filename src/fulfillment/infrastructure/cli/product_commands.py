"""CLI commands for inspecting the product catalog."""

from __future__ import annotations

import click

from fulfillment.domain.exceptions import DomainException
from fulfillment.infrastructure.bootstrap import product_repository


@click.command("list")
def product_list() -> None:
    """List all products with their stock levels."""
    try:
        products = product_repository().list_all()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<22} {'Type':<10} {'Available':>10} {'Lead':>6}")
    click.echo("-" * 58)
    for p in products:
        click.echo(
            f"{p.id:<6} {p.name:<22} {p.type.value:<10} {p.available:>10} {p.lead_time_days:>6}"
        )
