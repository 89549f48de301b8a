"""Application service: Show Order use case (query).

Builds the receipt for one of a customer's orders.
"""

from __future__ import annotations

import logging

import structlog

from rmg.application.dto import OrderDTO, OrderLineDTO, format_money
from rmg.domain.exceptions import EntityNotFoundError
from rmg.domain.model.customer import Customer
from rmg.domain.model.order import Order

logger = structlog.wrap_logger(logging.getLogger(__name__))


class ShowOrderHandler:

    def __init__(self, customer: Customer, currency_symbol: str = "$") -> None:
        self._customer = customer
        self._currency_symbol = currency_symbol

    def handle(self, order_id: str) -> OrderDTO:
        for order in self._customer.orders:
            if order.order_id == order_id:
                logger.debug(
                    "order_receipt_built",
                    customer_id=self._customer.customer_id,
                    order_id=order_id,
                )
                return self.to_dto(order, self._currency_symbol)
        raise EntityNotFoundError(
            f"Order '{order_id}' not found for customer {self._customer.name}"
        )

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def to_dto(order: Order, currency_symbol: str = "$") -> OrderDTO:
        return OrderDTO(
            order_id=order.order_id,
            order_date=order.order_date.strftime("%Y-%m-%d %H:%M UTC"),
            status=order.status.value,
            items=[
                OrderLineDTO(
                    garment_id=garment.id,
                    name=garment.name,
                    price=format_money(garment.price, currency_symbol),
                )
                for garment in order.garments
            ],
            total=format_money(order.total_amount, currency_symbol),
        )
