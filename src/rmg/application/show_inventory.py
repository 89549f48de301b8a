"""Application service: Show Inventory use case (query).

Lists the garments on offer, optionally narrowed down by color and/or
size.  Both filters match case-insensitively and keep insertion order.
"""

from __future__ import annotations

from rmg.application.dto import InventoryLineDTO, format_money
from rmg.domain.model.garment import Garment
from rmg.domain.model.inventory import Inventory


class ShowInventoryHandler:

    def __init__(self, inventory: Inventory, currency_symbol: str = "$") -> None:
        self._inventory = inventory
        self._currency_symbol = currency_symbol

    def handle(
        self,
        color: str | None = None,
        size: str | None = None,
    ) -> list[InventoryLineDTO]:
        if color is not None:
            garments = self._inventory.find_garments_by_color(color)
        else:
            garments = self._inventory.garments

        if size is not None:
            by_size = self._inventory.find_garments_by_size(size)
            garments = [g for g in garments if any(g is s for s in by_size)]

        return [self._to_dto(g) for g in garments]

    def _to_dto(self, garment: Garment) -> InventoryLineDTO:
        return InventoryLineDTO(
            garment_id=garment.id,
            name=garment.name,
            size=garment.size,
            color=garment.color,
            fabric=garment.fabric.type,
            price=format_money(garment.price, self._currency_symbol),
            stock=garment.stock_quantity,
        )
