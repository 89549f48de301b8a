"""Tests for the demonstration scenario wiring."""

import pytest

from rmg.infrastructure.bootstrap import demo_scenario


class TestDemoScenario:

    def test_supplier_lists_the_fabric(self):
        scenario = demo_scenario()
        assert scenario.supplier.supplied_fabrics == [scenario.fabric]

    def test_garment_is_stocked(self):
        scenario = demo_scenario()
        assert scenario.garment.stock_quantity == 100
        assert scenario.garment.fabric is scenario.fabric

    def test_inventory_holds_garment(self):
        scenario = demo_scenario()
        assert scenario.inventory.find_garment("G1") is scenario.garment

    def test_order_total_and_status(self):
        scenario = demo_scenario()
        assert scenario.order.total_amount == pytest.approx(29.99)
        assert scenario.order.status == "CONFIRMED"

    def test_customer_owns_the_order(self):
        scenario = demo_scenario()
        orders = scenario.customer.orders
        assert len(orders) == 1
        assert orders[0].status == "CONFIRMED"

    def test_each_call_starts_fresh(self):
        first = demo_scenario()
        first.garment.update_stock(-100)
        assert demo_scenario().garment.stock_quantity == 100
