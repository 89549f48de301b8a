"""Fabric: the raw material a garment is cut from."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from rmg.domain.model.entity import Entity


@dataclass(eq=False)
class Fabric(Entity):
    """A fabric sold by the meter.

    ``id``, ``type`` and ``color`` describe the fabric and never change;
    the price per meter follows the market.
    """

    _read_only_fields: ClassVar[tuple[str, ...]] = ("id", "type", "color")

    id: str
    type: str
    color: str
    price_per_meter: float

    def update_price_per_meter(self, price_per_meter: float) -> None:
        self.price_per_meter = price_per_meter

    def calculate_cost(self, meters: float) -> float:
        """Cost of *meters* of this fabric at the current price.

        Negative lengths are the caller's business and yield negative costs.
        """
        return self.price_per_meter * meters
