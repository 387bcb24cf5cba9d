"""Console actions for the customer catalog."""

from __future__ import annotations

import click

from orderdesk.application.list_catalog import next_id
from orderdesk.infrastructure.bootstrap import App
from orderdesk.infrastructure.cli.params import NON_BLANK, POSITIVE_INT


def add_customer(app: App) -> None:
    """Prompt for a customer and register them."""
    customer_id = click.prompt(
        "Customer id", type=POSITIVE_INT, default=next_id(app.customers)
    )
    name = click.prompt("Name", type=NON_BLANK)
    email = click.prompt("Email", type=NON_BLANK)
    tax_id = click.prompt("Tax id", type=NON_BLANK)

    customer = app.add_customer.handle(
        customer_id=customer_id, name=name, email=email, tax_id=tax_id
    )
    click.echo(f"Customer #{customer.id} '{customer.name}' added")


def list_customers(app: App) -> None:
    customers = app.list_customers.handle()

    if not customers:
        click.echo("No customers found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Email':<28} {'Tax id':<14}")
    click.echo("-" * 71)
    for c in customers:
        click.echo(f"{c.id:<6} {c.name:<20} {c.email:<28} {c.tax_id:<14}")
