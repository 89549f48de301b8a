"""Shared console formatting for receipts and customer summaries."""

from __future__ import annotations

import click

from rmg.application.dto import CustomerDTO, OrderDTO


def display_order(dto: OrderDTO) -> None:
    click.echo(f"Order ID: {dto.order_id}")
    click.echo(f"Date: {dto.order_date}")
    click.echo(f"Status: {dto.status}")
    click.echo("Items:")
    for item in dto.items:
        click.echo(f"- {item.name} ({item.price})")
    click.echo(f"Total: {dto.total}")


def display_customer(dto: CustomerDTO) -> None:
    click.echo("Customer Details:")
    click.echo(f"Name: {dto.name}")
    click.echo(f"Email: {dto.email}")
    click.echo(f"Total Orders: {dto.total_orders}")
