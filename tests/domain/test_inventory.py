"""Unit tests for the Inventory aggregate."""

import pytest

from rmg.domain.exceptions import DuplicateGarmentError, EntityNotFoundError
from rmg.domain.model.fabric import Fabric
from rmg.domain.model.garment import Garment
from rmg.domain.model.inventory import Inventory

COTTON = Fabric(id="F1", type="Cotton", color="White", price_per_meter=10.0)


def _garment(garment_id: str, color: str = "White", size: str = "M", price: float = 29.99) -> Garment:
    return Garment(
        id=garment_id,
        name=f"Garment {garment_id}",
        description="",
        size=size,
        color=color,
        price=price,
        fabric=COTTON,
    )


def _stocked(*garments: Garment) -> Inventory:
    inventory = Inventory()
    for g in garments:
        inventory.add_garment(g)
    return inventory


class TestInventoryAdd:

    def test_add_keeps_insertion_order(self):
        inventory = _stocked(_garment("G2"), _garment("G1"), _garment("G3"))
        assert [g.id for g in inventory.garments] == ["G2", "G1", "G3"]
        assert len(inventory) == 3

    def test_duplicate_ids_allowed_by_default(self):
        inventory = _stocked(_garment("G1"), _garment("G1", price=31.0))
        assert len(inventory) == 2

    def test_unique_ids_rejects_duplicate(self):
        inventory = Inventory(unique_ids=True)
        inventory.add_garment(_garment("G1"))
        with pytest.raises(DuplicateGarmentError, match="already in the inventory"):
            inventory.add_garment(_garment("G1"))
        assert len(inventory) == 1


class TestInventoryRemove:

    def test_remove_drops_every_entry_with_id(self):
        inventory = _stocked(_garment("G1"), _garment("G2"), _garment("G1"))
        inventory.remove_garment("G1")
        assert [g.id for g in inventory.garments] == ["G2"]

    def test_remove_unknown_id_is_noop(self):
        inventory = _stocked(_garment("G1"))
        inventory.remove_garment("nope")
        assert len(inventory) == 1


class TestInventorySize:

    def test_empty_inventory_is_falsy(self):
        inventory = Inventory()
        assert len(inventory) == 0
        assert not inventory

    def test_stocked_inventory_is_truthy(self):
        assert _stocked(_garment("G1"))


class TestInventoryLookup:

    def test_find_returns_first_match(self):
        first = _garment("G1", price=10.0)
        inventory = _stocked(first, _garment("G1", price=20.0))
        assert inventory.find_garment("G1") is first

    def test_find_missing_returns_none(self):
        assert _stocked(_garment("G1")).find_garment("nonexistent") is None

    def test_find_on_empty_inventory(self):
        assert Inventory().find_garment("G1") is None

    def test_get_missing_raises(self):
        with pytest.raises(EntityNotFoundError, match="not found"):
            Inventory().get_garment("G1")

    def test_get_existing(self):
        garment = _garment("G1")
        assert _stocked(garment).get_garment("G1") is garment


class TestInventoryFilters:

    def test_color_match_is_case_insensitive(self):
        inventory = _stocked(
            _garment("G1", color="White"),
            _garment("G2", color="Black"),
            _garment("G3", color="WHITE"),
        )
        lower = inventory.find_garments_by_color("white")
        title = inventory.find_garments_by_color("White")
        assert [g.id for g in lower] == ["G1", "G3"]
        assert lower == title

    def test_color_is_exact_not_substring(self):
        inventory = _stocked(_garment("G1", color="Off-White"))
        assert inventory.find_garments_by_color("white") == []

    def test_size_filter_keeps_insertion_order(self):
        inventory = _stocked(
            _garment("G3", size="m"),
            _garment("G1", size="L"),
            _garment("G2", size="M"),
        )
        assert [g.id for g in inventory.find_garments_by_size("M")] == ["G3", "G2"]

    def test_no_match_returns_empty_list(self):
        assert _stocked(_garment("G1")).find_garments_by_size("XXL") == []


class TestInventoryDefensiveCopy:

    def test_mutating_returned_list_does_not_leak(self):
        inventory = _stocked(_garment("G1"))
        garments = inventory.garments
        garments.append(_garment("G2"))
        garments.pop(0)
        assert [g.id for g in inventory.garments] == ["G1"]
