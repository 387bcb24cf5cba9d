"""Console actions for orders."""

from __future__ import annotations

import click

from orderdesk.application.dto import OrderDTO, OrderItemSpec
from orderdesk.application.list_catalog import next_id
from orderdesk.infrastructure.bootstrap import App
from orderdesk.infrastructure.cli.params import POSITIVE_INT


def _prompt_items() -> list[OrderItemSpec]:
    """Read 'product id, quantity' pairs until a blank product id."""
    specs: list[OrderItemSpec] = []
    while True:
        raw = click.prompt(
            "Product id (blank to finish)", default="", show_default=False
        ).strip()
        if not raw:
            return specs
        try:
            product_id = POSITIVE_INT.convert(raw, None, None)
        except click.BadParameter as exc:
            click.echo(f"Error: {exc.message}")
            continue
        quantity = click.prompt("Quantity", type=POSITIVE_INT)
        specs.append(OrderItemSpec(product_id=product_id, quantity=quantity))


def display_order(dto: OrderDTO) -> None:
    click.echo(f"Order #{dto.id} created")
    click.echo(f"Customer: {dto.customer_name}")
    click.echo(f"Created:  {dto.created_at}")
    click.echo()
    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*47}")
    for item in dto.items:
        click.echo(
            f"  {item.product_name:<20} {item.quantity:>5} {item.unit_price:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*47}")
    click.echo(f"  {'Order Total':<27} {dto.total:>20}")


def create_order(app: App) -> None:
    """Prompt for an order and create it (discounts are applied first)."""
    order_id = click.prompt("Order id", type=POSITIVE_INT, default=next_id(app.orders))
    customer_id = click.prompt("Customer id", type=POSITIVE_INT)
    specs = _prompt_items()

    dto = app.create_order.handle(
        order_id=order_id, customer_id=customer_id, item_specs=specs
    )
    display_order(dto)


def order_report(app: App) -> None:
    for line in app.order_report.handle().lines():
        click.echo(line)
