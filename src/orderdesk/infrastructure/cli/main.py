"""Console entry point: the ``orderdesk`` command group and menu loop."""

from __future__ import annotations

import logging
from typing import Callable

import click

from orderdesk.application.dto import OrderItemSpec
from orderdesk.domain.exceptions import DomainException
from orderdesk.infrastructure.bootstrap import App, build_app
from orderdesk.infrastructure.cli.customer_commands import add_customer, list_customers
from orderdesk.infrastructure.cli.order_commands import (
    create_order,
    display_order,
    order_report,
)
from orderdesk.infrastructure.cli.product_commands import add_product, list_products
from orderdesk.infrastructure.config import LOG_LEVELS, AppConfig, load_config
from orderdesk.infrastructure.logging_config import configure_logging

logger = logging.getLogger(__name__)

MENU: list[tuple[str, Callable[[App], None]]] = [
    ("Add product", add_product),
    ("Add customer", add_customer),
    ("Create order", create_order),
    ("List products", list_products),
    ("List customers", list_customers),
    ("Order report", order_report),
]


def _print_menu() -> None:
    click.echo()
    for number, (label, _) in enumerate(MENU, start=1):
        click.echo(f"  {number}) {label}")
    click.echo("  0) Exit")


def run_menu(app: App) -> None:
    """Loop over the menu until the user picks Exit.

    Domain errors are reported and the loop carries on.
    """
    while True:
        _print_menu()
        choice = click.prompt("Choose an option", type=click.IntRange(0, len(MENU)))
        if choice == 0:
            click.echo("Goodbye.")
            return
        label, action = MENU[choice - 1]
        logger.debug("Menu action: %s", label)
        try:
            action(app)
        except DomainException as exc:
            click.echo(f"Error: {exc}")


@click.group(invoke_without_command=True)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Override ORDERDESK_LOG_LEVEL.",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """orderdesk: in-memory order management console."""
    overrides = {"log_level": log_level} if log_level is not None else {}
    try:
        config = load_config(**overrides)
    except DomainException as exc:
        raise click.ClickException(str(exc))
    configure_logging(config.log_level)
    ctx.obj = config

    if ctx.invoked_subcommand is None:
        ctx.invoke(shell)


@cli.command()
@click.pass_obj
def shell(config: AppConfig) -> None:
    """Start the interactive menu."""
    try:
        app = build_app(config)
    except DomainException as exc:
        raise click.ClickException(str(exc))
    run_menu(app)


def load_demo_data(app: App) -> None:
    """Register a small catalog and place two orders against it."""
    app.add_product.handle(1, "Laptop", "100.00", "Electronics")
    app.add_product.handle(2, "Novel", "20.00", "Books")
    app.add_product.handle(3, "Notebook", "4.50", "Stationery")
    app.add_customer.handle(1, "Ada Lovelace", "ada@example.com", "TAX-0001")
    app.add_customer.handle(2, "Alan Turing", "alan@example.com", "TAX-0002")

    display_order(app.create_order.handle(1, 1, [OrderItemSpec(1, 3), OrderItemSpec(3, 2)]))
    click.echo()
    display_order(app.create_order.handle(2, 2, [OrderItemSpec(2, 6)]))
    click.echo()


@cli.command()
@click.pass_obj
def seed(config: AppConfig) -> None:
    """Load demo data into a fresh session and print the order report."""
    try:
        app = build_app(config)
        load_demo_data(app)
    except DomainException as exc:
        raise click.ClickException(str(exc))
    order_report(app)
