"""Customer: the buyer and the orders they have placed."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import ClassVar

import structlog

from rmg.domain.model.entity import Entity
from rmg.domain.model.order import Order

logger = structlog.wrap_logger(logging.getLogger(__name__))


@dataclass(eq=False)
class Customer(Entity):
    """A customer and the orders they have placed.

    Orders are append-only: once placed, an order stays on the customer's
    record.
    """

    _read_only_fields: ClassVar[tuple[str, ...]] = ("customer_id",)

    customer_id: str
    name: str
    email: str
    phone: str
    _orders: list[Order] = field(default_factory=list, init=False, repr=False)

    @property
    def orders(self) -> list[Order]:
        """A copy of the placed orders, oldest first."""
        return list(self._orders)

    def place_order(self, order: Order) -> None:
        self._orders.append(order)
        logger.info(
            "order_placed",
            customer_id=self.customer_id,
            order_id=order.order_id,
            order_count=len(self._orders),
        )
