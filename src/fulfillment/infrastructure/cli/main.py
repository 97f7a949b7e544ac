from datetime import datetime, timezone

import click

from fulfillment.domain.exceptions import DomainException
from fulfillment.infrastructure.bootstrap import order_repository, product_repository
from fulfillment.infrastructure.cli.order_commands import order_list, order_process
from fulfillment.infrastructure.cli.product_commands import product_list
from fulfillment.infrastructure.config import get_settings
from fulfillment.infrastructure.logging import configure_logging
from fulfillment.infrastructure.seed import seed


@click.group()
@click.option("--log-level", default=None, help="Override FULFILLMENT_LOG_LEVEL.")
def cli(log_level: str | None) -> None:
    """Order fulfillment rules engine"""
    configure_logging(log_level or get_settings().log_level)


@cli.group()
def order() -> None:
    """Process and inspect orders."""


@cli.group()
def product() -> None:
    """Inspect the product catalog."""


@cli.command("seed")
def seed_command() -> None:
    """Reset the data files to the demo catalog."""
    products = product_repository()
    try:
        n_products, n_orders = seed(
            products, order_repository(products), datetime.now(timezone.utc)
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Seeded {n_products} products and {n_orders} orders.")


# Register subcommands
order.add_command(order_list)
order.add_command(order_process)
product.add_command(product_list)
