"""CLI command that runs the demonstration scenario end to end."""

from __future__ import annotations

import click

from rmg.application.show_customer import ShowCustomerHandler
from rmg.application.show_order import ShowOrderHandler
from rmg.domain.exceptions import DomainException
from rmg.infrastructure.bootstrap import demo_scenario
from rmg.infrastructure.cli.output import display_customer, display_order
from rmg.infrastructure.config import get_settings


@click.command("demo")
def demo() -> None:
    """Build the sample shop, place one order and print the receipt."""
    settings = get_settings()

    try:
        scenario = demo_scenario()
        receipt = ShowOrderHandler(
            scenario.customer, currency_symbol=settings.currency_symbol
        ).handle(scenario.order.order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_order(receipt)
    click.echo()
    display_customer(ShowCustomerHandler().handle(scenario.customer))
