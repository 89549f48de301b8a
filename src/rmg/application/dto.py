"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


def format_money(amount: float, currency_symbol: str = "$") -> str:
    """Format *amount* for display, e.g. ``29.99`` -> ``"$29.99"``."""
    return f"{currency_symbol}{amount:.2f}"


@dataclass(frozen=True)
class OrderLineDTO:
    """Output: a single garment on a receipt."""

    garment_id: str
    name: str
    price: str  # formatted, e.g. "$29.99"


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as printed on a receipt."""

    order_id: str
    order_date: str
    status: str
    items: list[OrderLineDTO]
    total: str


@dataclass(frozen=True)
class CustomerDTO:
    customer_id: str
    name: str
    email: str
    phone: str
    total_orders: int


@dataclass(frozen=True)
class InventoryLineDTO:
    garment_id: str
    name: str
    size: str
    color: str
    fabric: str
    price: str
    stock: int
