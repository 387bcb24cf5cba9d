"""Console actions for the product catalog."""

from __future__ import annotations

import click

from orderdesk.application.list_catalog import next_id
from orderdesk.infrastructure.bootstrap import App
from orderdesk.infrastructure.cli.params import NON_BLANK, POSITIVE_DECIMAL, POSITIVE_INT


def add_product(app: App) -> None:
    """Prompt for a product and register it."""
    product_id = click.prompt("Product id", type=POSITIVE_INT, default=next_id(app.products))
    name = click.prompt("Name", type=NON_BLANK)
    price = click.prompt("Price", type=POSITIVE_DECIMAL)
    category = click.prompt("Category", type=NON_BLANK)

    product = app.add_product.handle(
        product_id=product_id, name=name, price=price, category=category
    )
    click.echo(f"Product #{product.id} '{product.name}' added at {product.price}")


def list_products(app: App) -> None:
    products = app.list_products.handle()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Category':<15} {'Price':>10}")
    click.echo("-" * 54)
    for p in products:
        click.echo(f"{p.id:<6} {p.name:<20} {p.category:<15} {p.price:>10}")
