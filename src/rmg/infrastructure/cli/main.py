import click

from rmg.infrastructure.cli.demo_commands import demo
from rmg.infrastructure.cli.inventory_commands import inventory_show
from rmg.infrastructure.cli.order_commands import order_show
from rmg.infrastructure.config import get_settings
from rmg.infrastructure.observability import configure_logging


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    default=None,
    help="Log level (defaults to RMG_LOG_LEVEL or WARNING).",
)
def cli(log_level: str | None) -> None:
    """RMG — Retail Management for Garments"""
    settings = get_settings()
    configure_logging(
        log_level=log_level or settings.log_level,
        json_format=settings.log_json,
    )


@cli.group()
def order() -> None:
    """Inspect orders."""


@cli.group()
def inventory() -> None:
    """Inspect inventory."""


# Register subcommands
cli.add_command(demo)
order.add_command(order_show)
inventory.add_command(inventory_show)
