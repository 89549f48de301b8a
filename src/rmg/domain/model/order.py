"""Order aggregate: a customer's cart and its lifecycle.

The Order holds references to garments, not price snapshots: the total is
always the sum of what the garments cost *now*.  The status follows a fixed
lifecycle enforced by ``set_status()``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import ClassVar

import structlog

from rmg.domain.exceptions import InvalidStatusTransitionError, ValidationError
from rmg.domain.model.entity import Entity, remove_first
from rmg.domain.model.garment import Garment

logger = structlog.wrap_logger(logging.getLogger(__name__))


class OrderStatus(str, Enum):
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    SHIPPED = "SHIPPED"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"

    @classmethod
    def parse(cls, value: OrderStatus | str) -> OrderStatus:
        """Coerce a status or its (case-insensitive) name to an OrderStatus."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value.strip().upper())
        except (AttributeError, ValueError) as exc:
            raise ValidationError(f"Unknown order status: {value!r}") from exc


# ---------------------------------------------------------------------------
# Lifecycle: DELIVERED and CANCELLED are terminal
# ---------------------------------------------------------------------------
ALLOWED_TRANSITIONS: dict[OrderStatus, frozenset[OrderStatus]] = {
    OrderStatus.PENDING: frozenset({OrderStatus.CONFIRMED, OrderStatus.CANCELLED}),
    OrderStatus.CONFIRMED: frozenset({OrderStatus.SHIPPED, OrderStatus.CANCELLED}),
    OrderStatus.SHIPPED: frozenset({OrderStatus.DELIVERED}),
    OrderStatus.DELIVERED: frozenset(),
    OrderStatus.CANCELLED: frozenset(),
}


@dataclass(eq=False)
class Order(Entity):
    """Aggregate root for customer orders.

    ``order_date`` is captured once, at construction, and cannot be
    reassigned.  Garments are kept in the order they were added; the same
    garment may appear more than once.
    """

    _read_only_fields: ClassVar[tuple[str, ...]] = ("order_id", "order_date")

    order_id: str
    order_date: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    _garments: list[Garment] = field(default_factory=list, init=False, repr=False)
    _status: OrderStatus = field(default=OrderStatus.PENDING, init=False)

    # --- Line items -----------------------------------------------------------

    @property
    def garments(self) -> list[Garment]:
        """A copy of the garments in this order."""
        return list(self._garments)

    def add_garment(self, garment: Garment) -> None:
        self._garments.append(garment)

    def remove_garment(self, garment: Garment) -> None:
        """Remove the first occurrence of *garment*; no-op if it isn't here."""
        remove_first(self._garments, garment)

    # --- State transitions ----------------------------------------------------

    @property
    def status(self) -> OrderStatus:
        return self._status

    def can_transition_to(self, status: OrderStatus | str) -> bool:
        return OrderStatus.parse(status) in ALLOWED_TRANSITIONS[self._status]

    def set_status(self, status: OrderStatus | str) -> None:
        """Move the order to *status*.

        Raises InvalidStatusTransitionError if the lifecycle does not allow
        the move from the current status; the status is left untouched.
        """
        new_status = OrderStatus.parse(status)
        if new_status not in ALLOWED_TRANSITIONS[self._status]:
            raise InvalidStatusTransitionError(self._status.value, new_status.value)
        logger.info(
            "order_status_changed",
            order_id=self.order_id,
            old_status=self._status.value,
            new_status=new_status.value,
        )
        self._status = new_status

    # --- Computed properties --------------------------------------------------

    @property
    def total_amount(self) -> float:
        return sum((garment.price for garment in self._garments), 0.0)
