"""CLI commands for inventory queries."""

from __future__ import annotations

import click

from rmg.application.show_inventory import ShowInventoryHandler
from rmg.infrastructure.bootstrap import demo_scenario
from rmg.infrastructure.config import get_settings


@click.command("show")
@click.option("--color", default=None, help="Only garments of this color (any case).")
@click.option("--size", default=None, help="Only garments of this size (any case).")
def inventory_show(color: str | None, size: str | None) -> None:
    """Show the garments in the demo inventory."""
    handler = ShowInventoryHandler(
        demo_scenario().inventory, currency_symbol=get_settings().currency_symbol
    )
    lines = handler.handle(color=color, size=size)

    if not lines:
        click.echo("No garments found.")
        return

    click.echo(
        f"{'ID':<6} {'Name':<20} {'Size':<5} {'Color':<10} {'Fabric':<10} {'Price':>10} {'Stock':>7}"
    )
    click.echo("-" * 74)
    for line in lines:
        click.echo(
            f"{line.garment_id:<6} {line.name:<20} {line.size:<5} {line.color:<10} "
            f"{line.fabric:<10} {line.price:>10} {line.stock:>7}"
        )
