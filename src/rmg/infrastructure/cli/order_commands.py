"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from rmg.application.show_order import ShowOrderHandler
from rmg.domain.exceptions import DomainException
from rmg.infrastructure.bootstrap import demo_scenario
from rmg.infrastructure.cli.output import display_order
from rmg.infrastructure.config import get_settings


@click.command("show")
@click.option("--id", "order_id", required=True, help="Order ID to display.")
def order_show(order_id: str) -> None:
    """Show the receipt of one of the demo customer's orders."""
    scenario = demo_scenario()
    handler = ShowOrderHandler(
        scenario.customer, currency_symbol=get_settings().currency_symbol
    )

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_order(dto)
