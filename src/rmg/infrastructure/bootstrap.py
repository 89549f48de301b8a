"""Composition root: builds the demonstration scenario.

This is the only place in the codebase that wires entities together.
The CLI commands read from the scenario; nothing is persisted, so each
invocation starts from the same state.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import structlog

from rmg.domain.model.customer import Customer
from rmg.domain.model.fabric import Fabric
from rmg.domain.model.garment import Garment
from rmg.domain.model.inventory import Inventory
from rmg.domain.model.order import Order, OrderStatus
from rmg.domain.model.supplier import Supplier

logger = structlog.wrap_logger(logging.getLogger(__name__))


@dataclass(frozen=True)
class DemoScenario:
    fabric: Fabric
    supplier: Supplier
    garment: Garment
    inventory: Inventory
    customer: Customer
    order: Order


def demo_scenario() -> DemoScenario:
    """One of each entity: a white cotton T-shirt ordered by John Doe."""
    cotton = Fabric(id="F1", type="Cotton", color="White", price_per_meter=10.0)

    supplier = Supplier(id="S1", name="TextileCo", contact_info="contact@textileco.com")
    supplier.add_fabric(cotton)

    tshirt = Garment(
        id="G1",
        name="T-Shirt",
        description="Basic Tee",
        size="M",
        color="White",
        price=29.99,
        fabric=cotton,
    )
    tshirt.update_stock(100)

    inventory = Inventory()
    inventory.add_garment(tshirt)

    customer = Customer(
        customer_id="C1",
        name="John Doe",
        email="john@email.com",
        phone="1234567890",
    )

    order = Order(order_id="O1")
    order.add_garment(tshirt)
    order.set_status(OrderStatus.CONFIRMED)
    customer.place_order(order)

    logger.debug(
        "demo_scenario_built",
        garments=len(inventory),
        orders=len(customer.orders),
    )
    return DemoScenario(
        fabric=cotton,
        supplier=supplier,
        garment=tshirt,
        inventory=inventory,
        customer=customer,
        order=order,
    )
