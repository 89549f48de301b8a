"""Garment aggregate: a sellable item cut from one fabric.

Garments live independently of orders.  Their price can change at any
time, and every order holding the garment sees the new price.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from rmg.domain.model.entity import Entity
from rmg.domain.model.fabric import Fabric


@dataclass(eq=False)
class Garment(Entity):
    """A garment in the catalog.

    Stock starts at zero and only moves through ``update_stock()``.
    Other garments may share the same ``fabric``.
    """

    _read_only_fields: ClassVar[tuple[str, ...]] = ("id", "name", "size", "color", "fabric")

    id: str
    name: str
    description: str
    size: str
    color: str
    price: float
    fabric: Fabric
    _stock_quantity: int = field(default=0, init=False)

    @property
    def stock_quantity(self) -> int:
        return self._stock_quantity

    def update_price(self, new_price: float) -> None:
        self.price = new_price

    def update_stock(self, quantity: int) -> None:
        """Add *quantity* (possibly negative) to the stock on hand.

        There is no floor: shipping more than is on hand leaves the stock
        negative, which reads as a backorder.
        """
        self._stock_quantity += quantity

    def calculate_discount_price(self, discount_percentage: float) -> float:
        return self.price * (1 - discount_percentage / 100)
