"""CLI commands for processing orders."""

from __future__ import annotations

import click

from fulfillment.domain.exceptions import DomainException
from fulfillment.infrastructure.bootstrap import order_repository, process_order_handler


@click.command("process")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to process.")
def order_process(order_id: int) -> None:
    """Apply the fulfillment rules to every product in an order."""
    handler = process_order_handler()

    try:
        result = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{result.order_id} processed.")


@click.command("list")
def order_list() -> None:
    """List all orders with their line-item product IDs."""
    try:
        orders = order_repository().list_all()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not orders:
        click.echo("No orders found.")
        return

    click.echo(f"{'Order':<8} {'Products'}")
    click.echo("-" * 30)
    for order in orders:
        products = ", ".join(order.product_ids) or "(empty)"
        click.echo(f"{order.id:<8} {products}")
